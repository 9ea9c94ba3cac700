"""JWT token service.

Provides JWT token creation and verification for session tokens.
"""

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from tollgate_auth.exceptions import InvalidTokenError
from tollgate_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens carry arbitrary user claims plus the reserved ``sub``, ``iat``
    and ``exp`` claims. They are never stored: a token is valid as long as
    its signature checks out and it has not expired.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.sign({"id": "42", "email": "a@x.com", "name": "Ann"})
    >>> payload = service.verify(token)
    >>> print(payload.claims["email"])
    """

    DEFAULT_EXPIRE_HOURS = 2
    ALGORITHM = "HS256"
    RESERVED_CLAIMS = frozenset({"sub", "iat", "exp"})

    def __init__(
        self,
        secret_key: str,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expire_hours
            Hours until a token expires (default 2)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=expire_hours)

    def sign(
        self,
        claims: Mapping[str, Any],
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed token over the given claims.

        Parameters
        ----------
        claims
            User claims to embed. Reserved claims in the input are
            replaced by fresh values.
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._expire)

        payload = self.strip_reserved(claims)
        if payload.get("id") is not None:
            payload["sub"] = str(payload["id"])
        payload["iat"] = now
        payload["exp"] = expire

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload with the user claims separated from the reserved ones

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "iat"]},
            )

            return TokenPayload(
                claims=self.strip_reserved(payload),
                subject=payload.get("sub"),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    @classmethod
    def strip_reserved(cls, claims: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of ``claims`` without ``sub``, ``iat`` and ``exp``."""
        return {k: v for k, v in claims.items() if k not in cls.RESERVED_CLAIMS}
