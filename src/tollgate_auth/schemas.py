"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    claims
        The user claims carried by the token, without the reserved
        ``sub``/``iat``/``exp`` fields
    subject
        The ``sub`` claim, if the token had one
    issued_at
        Token issue timestamp
    expires_at
        Token expiration timestamp
    """

    claims: dict[str, Any] = field(default_factory=dict)
    subject: str | None = None
    issued_at: datetime | None = None
    expires_at: datetime | None = None
