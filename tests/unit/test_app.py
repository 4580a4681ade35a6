"""Tests for application wiring: state, errors, logging, CORS settings."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError

import pytest

import main
from core.log import log_level
from core.state import AppState, default_app_state
from main import cors_origins, create_app, server_port
from users.repository import PgUserRepo
from users.service import UserService


def test_default_state_uses_production_variants():
    state = default_app_state()
    assert isinstance(state.repos.user, PgUserRepo)
    assert isinstance(state.use_cases.user, UserService)


def test_state_is_immutable():
    state = AppState()
    with pytest.raises(FrozenInstanceError):
        state.repos = None  # type: ignore[misc]


def test_create_app_keeps_given_state():
    state = AppState()
    app = create_app(state)
    assert app.state.app_state is state


def test_cors_origins(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, ,https://b.example")
    assert cors_origins() == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("raw, expected", [("debug", logging.DEBUG), ("", logging.INFO), ("chatty", logging.INFO)])
def test_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert log_level() == expected


@pytest.mark.parametrize("raw, expected", [("9000", 9000), ("", 8000), ("http", 8000)])
def test_server_port(monkeypatch, raw, expected):
    monkeypatch.setenv("PORT", raw)
    assert server_port() == expected


def test_run_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    main.run()

    assert calls == [(("main:app",), {"host": "127.0.0.1", "port": 9000})]
