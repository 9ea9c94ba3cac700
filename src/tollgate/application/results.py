"""Result values returned by the authentication service.

Every operation returns either an ``AuthSession`` or an ``AuthFailure``;
callers branch on the type instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from tollgate_auth.exceptions import (
    AlreadyExistsError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)


class ErrorKind(str, Enum):
    """Stable failure kinds. Part of the contract with the gateway."""

    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    INTERNAL = "INTERNAL"


ERROR_TYPE_TO_KIND: dict[type[AuthError], ErrorKind] = {
    AlreadyExistsError: ErrorKind.ALREADY_EXISTS,
    InvalidCredentialsError: ErrorKind.INVALID_CREDENTIALS,
    InvalidTokenError: ErrorKind.INVALID_TOKEN,
    WeakPasswordError: ErrorKind.WEAK_PASSWORD,
}


@dataclass(frozen=True)
class AuthSession:
    """A successful register, login or verify: user claims plus a fresh token."""

    user: dict[str, Any]
    token: str

    def to_dict(self) -> dict[str, Any]:
        return {"user": dict(self.user), "token": self.token}


@dataclass(frozen=True)
class AuthFailure:
    """A failed operation, in the ``{status, message}`` shape callers see."""

    kind: ErrorKind
    status: int
    message: str

    @classmethod
    def from_error(cls, error: AuthError) -> AuthFailure:
        kind = ERROR_TYPE_TO_KIND.get(type(error), ErrorKind.INTERNAL)
        return cls(kind=kind, status=error.status, message=error.message)

    @classmethod
    def internal(cls, message: str, status: int = 400) -> AuthFailure:
        return cls(kind=ErrorKind.INTERNAL, status=status, message=message)

    @classmethod
    def invalid_payload(cls, message: str = "Invalid request payload") -> AuthFailure:
        return cls(kind=ErrorKind.INVALID_PAYLOAD, status=400, message=message)

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "message": self.message}


AuthResult = Union[AuthSession, AuthFailure]
