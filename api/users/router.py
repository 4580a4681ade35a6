"""
User API endpoints.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import APIRouter, Depends, Response

from core import db
from core.errors import AppError
from core.state import AppState, get_app_state

from .schemas import User, UserName

# Creates above this age are rejected. Updates are not checked.
MAX_AGE = 32

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def index(
    app: AppState = Depends(get_app_state),
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> list[User]:
    logger.info("user_controller.index")
    return await app.use_cases.user.find_all(app.repos, conn)


@router.post("/add")
async def add(
    user: UserName,
    app: AppState = Depends(get_app_state),
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> User:
    logger.info("user_controller.add name=%s age=%s", user.name, user.age)

    if user.age > MAX_AGE:
        raise AppError(400, f"age must be less than {MAX_AGE}")

    return await app.use_cases.user.create(app.repos, conn, user.name, user.age)


@router.put("/{user_id}")
async def update(
    user_id: int,
    user: UserName,
    app: AppState = Depends(get_app_state),
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> User:
    logger.info("user_controller.update id=%s", user_id)
    return await app.use_cases.user.update(app.repos, conn, user_id, user.name, user.age)


@router.delete("/{user_id}")
async def delete(
    user_id: int,
    app: AppState = Depends(get_app_state),
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> Response:
    logger.info("user_controller.delete id=%s", user_id)
    await app.use_cases.user.delete(app.repos, conn, user_id)
    return Response(status_code=200)
