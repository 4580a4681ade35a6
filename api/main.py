from __future__ import annotations

import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db
from core.errors import AppError, app_error_handler
from core.log import configure_logging
from core.state import AppState, default_app_state
from users import repository as user_repository
from users import router as users_router

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def server_port() -> int:
    raw = os.environ.get("PORT", "").strip()
    try:
        return int(raw) if raw else 8000
    except ValueError:
        return 8000


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        await db.run_migrations(user_repository.SCHEMA)
        yield
    finally:
        await db.close_pool()


def create_app(state: AppState | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(lifespan=lifespan)
    app.state.app_state = state if state is not None else default_app_state()

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(users_router.router, tags=["users"])
    return app


app = create_app()


def run() -> None:
    uvicorn.run("main:app", host=os.environ.get("HOST", "0.0.0.0"), port=server_port())
