"""Message bus presentation layer (NATS request/reply)."""

from tollgate.presentation.bus.handlers import (
    LOGIN_PATTERN,
    REGISTER_PATTERN,
    VERIFY_PATTERN,
    AuthMessageHandlers,
)
from tollgate.presentation.bus.server import BusServer

__all__ = [
    "LOGIN_PATTERN",
    "REGISTER_PATTERN",
    "VERIFY_PATTERN",
    "AuthMessageHandlers",
    "BusServer",
]
