"""SQLAlchemy implementation for tollgate_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserModel: SQLAlchemy model for user records
- UserStoreSQLAlchemy: Store implementation

Examples
--------
from tollgate_auth.persistence.sqlalchemy import AuthBase

async with engine.begin() as conn:
    await conn.run_sync(AuthBase.metadata.create_all)
"""

from tollgate_auth.persistence.sqlalchemy.base import AuthBase, TimestampMixin
from tollgate_auth.persistence.sqlalchemy.models import UserModel
from tollgate_auth.persistence.sqlalchemy.repositories import UserStoreSQLAlchemy

__all__ = [
    "AuthBase",
    "TimestampMixin",
    "UserModel",
    "UserStoreSQLAlchemy",
]
