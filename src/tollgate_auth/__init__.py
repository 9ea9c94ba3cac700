"""Tollgate Auth - authentication infrastructure.

This package provides the building blocks the credential service is made
of, independent of the message bus that exposes them. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification
- User record storage (with pluggable persistence)

Architecture:
    tollgate_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from tollgate_auth import PasswordHashingService, JWTService

    from tollgate_auth.persistence.sqlalchemy import UserStoreSQLAlchemy
"""

from tollgate_auth.exceptions import (
    AlreadyExistsError,
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from tollgate_auth.repositories import UserRecord, UserStore
from tollgate_auth.schemas import TokenPayload
from tollgate_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "UserRecord",
    "UserStore",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "AlreadyExistsError",
    "ConflictError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "WeakPasswordError",
]
