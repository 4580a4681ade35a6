"""
User use-cases.

One method per router action. Today each is a pass-through to the
repository; business rules that belong to users go here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import asyncpg

from .schemas import User

if TYPE_CHECKING:
    from core.state import Repositories


class UserUseCase(Protocol):
    async def find_all(self, repos: Repositories, conn: asyncpg.Connection) -> list[User]: ...

    async def create(self, repos: Repositories, conn: asyncpg.Connection, name: str, age: int) -> User: ...

    async def update(
        self,
        repos: Repositories,
        conn: asyncpg.Connection,
        user_id: int,
        name: str,
        age: int,
    ) -> User: ...

    async def delete(self, repos: Repositories, conn: asyncpg.Connection, user_id: int) -> None: ...


class UserService:
    async def find_all(self, repos: Repositories, conn: asyncpg.Connection) -> list[User]:
        return await repos.user.find_all(conn)

    async def create(self, repos: Repositories, conn: asyncpg.Connection, name: str, age: int) -> User:
        return await repos.user.create(conn, name, age)

    async def update(
        self,
        repos: Repositories,
        conn: asyncpg.Connection,
        user_id: int,
        name: str,
        age: int,
    ) -> User:
        return await repos.user.update(conn, user_id, name, age)

    async def delete(self, repos: Repositories, conn: asyncpg.Connection, user_id: int) -> None:
        await repos.user.delete(conn, user_id)
