"""SQLAlchemy model for user records."""

from uuid import uuid4

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tollgate_auth.persistence.sqlalchemy.base import AuthBase, TimestampMixin


class UserModel(AuthBase, TimestampMixin):
    """
    SQLAlchemy model for persisting user records.

    The unique index on ``email`` is the final authority on uniqueness:
    concurrent registrations for the same address race here and only one
    insert commits.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Password hash (bcrypt format, ~60 chars)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
