"""
Application state shared by every request.

Built once when the app is created and never mutated afterwards; tests
derive variants with `dataclasses.replace` before building their app.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fastapi import Request

from users.repository import PgUserRepo, UserRepo
from users.service import UserService, UserUseCase


@dataclass(frozen=True)
class Repositories:
    user: UserRepo = field(default_factory=PgUserRepo)


@dataclass(frozen=True)
class UseCases:
    user: UserUseCase = field(default_factory=UserService)


@dataclass(frozen=True)
class AppState:
    repos: Repositories = field(default_factory=Repositories)
    use_cases: UseCases = field(default_factory=UseCases)


def default_app_state() -> AppState:
    return AppState()


def get_app_state(request: Request) -> AppState:
    return request.app.state.app_state
