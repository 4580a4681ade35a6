"""
User persistence (raw SQL).

`UserRepo` is the contract the use-case layer depends on; `PgUserRepo` is
the PostgreSQL implementation. Every method borrows a connection owned by
the caller.
"""

from __future__ import annotations

from typing import Any, Protocol

import asyncpg

from core import db
from core.errors import AppError

from .schemas import User

USER_NOT_FOUND = "User not found."

# `users.id` is SERIAL (int4); ids outside this range cannot exist.
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL,
        age INTEGER NOT NULL
    )
    """,
]


class UserRepo(Protocol):
    async def find_all(self, conn: asyncpg.Connection) -> list[User]: ...

    async def create(self, conn: asyncpg.Connection, name: str, age: int) -> User: ...

    async def update(self, conn: asyncpg.Connection, user_id: int, name: str, age: int) -> User: ...

    async def delete(self, conn: asyncpg.Connection, user_id: int) -> None: ...


def is_storable_id(user_id: int) -> bool:
    return ID_MIN <= user_id <= ID_MAX


def _to_user(row: dict[str, Any]) -> User:
    return User(id=int(row["id"]), name=str(row["name"]), age=int(row["age"]))


class PgUserRepo:
    async def find_all(self, conn: asyncpg.Connection) -> list[User]:
        rows = await db.fetch_all(
            conn,
            """
            SELECT id, name, age
            FROM users
            ORDER BY id ASC
            """,
        )
        return [_to_user(row) for row in rows]

    async def create(self, conn: asyncpg.Connection, name: str, age: int) -> User:
        row = await db.fetch_one(
            conn,
            """
            INSERT INTO users (name, age)
            VALUES ($1, $2)
            RETURNING id, name, age
            """,
            name,
            age,
        )
        if row is None:
            raise AppError(500, "Failed to create user.")
        return _to_user(row)

    async def update(self, conn: asyncpg.Connection, user_id: int, name: str, age: int) -> User:
        if not is_storable_id(user_id):
            raise AppError(404, USER_NOT_FOUND)
        row = await db.fetch_one(
            conn,
            """
            UPDATE users
            SET name = $2,
                age = $3
            WHERE id = $1
            RETURNING id, name, age
            """,
            user_id,
            name,
            age,
        )
        if row is None:
            raise AppError(404, USER_NOT_FOUND)
        return _to_user(row)

    async def delete(self, conn: asyncpg.Connection, user_id: int) -> None:
        if not is_storable_id(user_id):
            raise AppError(404, USER_NOT_FOUND)
        row = await db.fetch_one(
            conn,
            """
            DELETE FROM users
            WHERE id = $1
            RETURNING id
            """,
            user_id,
        )
        if row is None:
            raise AppError(404, USER_NOT_FOUND)
