"""Application layer: use-case orchestration and result types."""

from tollgate.application.results import (
    AuthFailure,
    AuthResult,
    AuthSession,
    ErrorKind,
)

__all__ = [
    "AuthFailure",
    "AuthResult",
    "AuthSession",
    "ErrorKind",
]
