"""Abstract store interface for user records.

This interface defines the narrow contract the authentication service
needs from persistence. Implementations can use SQLAlchemy or any other
storage, as long as the store itself enforces email uniqueness.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UserRecord:
    """Immutable user record returned by a store.

    The password hash stays inside the service; only ``public_claims``
    is ever sent to a caller or embedded in a token.
    """

    id: str
    email: str
    name: str
    password_hash: str

    def public_claims(self) -> dict[str, Any]:
        """Return the user fields that are safe to expose."""
        return {"id": self.id, "email": self.email, "name": self.name}

    def __repr__(self) -> str:
        return f"UserRecord(id={self.id}, email={self.email})"


class UserStore(ABC):
    """
    Abstract store for user records, keyed by unique email.

    Example implementation:
        class UserStoreSQLAlchemy(UserStore):
            def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
                self._session_maker = session_maker

            async def find_by_email(self, email: str) -> UserRecord | None:
                ...
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> UserRecord | None:
        """
        Find a user by exact email match.

        Parameters
        ----------
        email
            The email address to look up

        Returns
        -------
        The user record if found, None otherwise
        """

    @abstractmethod
    async def create(self, email: str, name: str, password_hash: str) -> UserRecord:
        """
        Create and persist a new user record.

        Parameters
        ----------
        email
            Unique email address
        name
            Display name
        password_hash
            The bcrypt password hash

        Returns
        -------
        The stored record, with its assigned id

        Raises
        ------
        ConflictError
            If a record with this email already exists
        """
