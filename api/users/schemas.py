"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class UserName(BaseModel):
    # Write-side shape for create/update; no identity.
    name: str
    age: int


class User(BaseModel):
    id: int
    name: str
    age: int
