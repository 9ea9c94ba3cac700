"""Password hashing service using bcrypt.

Provides salted one-way password hashing and constant-time verification.
"""

from functools import cached_property

import bcrypt

from tollgate_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a fixed work factor. ``bcrypt.checkpw`` compares
    digests in constant time.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    DEFAULT_ROUNDS = 10

    # bcrypt only looks at the first 72 bytes of its input
    MAX_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 10.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If the password is empty or too long for bcrypt
        """
        self.validate(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            # Invalid hash format or oversized input
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend the same bcrypt work as ``verify`` when there is no user.

        Keeps a login for an unknown email as slow as one with a wrong
        password. Always returns False.
        """
        self.verify(password, self._dummy_hash)
        return False

    @cached_property
    def _dummy_hash(self) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(b"tollgate-dummy-password", salt).decode("utf-8")

    def validate(self, password: str) -> None:
        """Check that bcrypt can hash the password without truncating it.

        Raises
        ------
        WeakPasswordError
            If the password is empty or longer than 72 bytes
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)
