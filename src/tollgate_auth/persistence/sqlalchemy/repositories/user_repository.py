"""SQLAlchemy implementation of UserStore."""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tollgate_auth.exceptions import ConflictError
from tollgate_auth.persistence.sqlalchemy.models import UserModel
from tollgate_auth.repositories import UserRecord, UserStore

logger = logging.getLogger(__name__)


class UserStoreSQLAlchemy(UserStore):
    """
    SQLAlchemy implementation of UserStore.

    Every operation runs in its own session, so one store instance can be
    shared by all concurrently handled messages.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the store with a session factory.

        Parameters
        ----------
        session_maker
            Factory producing SQLAlchemy async sessions
        """
        self._session_maker = session_maker

    async def find_by_email(self, email: str) -> UserRecord | None:
        async with self._session_maker() as session:
            stmt = select(UserModel).where(UserModel.email == email)
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_record(model)

    async def create(self, email: str, name: str, password_hash: str) -> UserRecord:
        user_id = str(uuid4())
        model = UserModel(
            id=user_id,
            email=email,
            name=name,
            password_hash=password_hash,
        )

        async with self._session_maker() as session:
            session.add(model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if "unique" in str(e).lower():
                    raise ConflictError(email) from e
                raise

        logger.info("Created user: %s (email: %s)", user_id, email)
        return UserRecord(
            id=user_id,
            email=email,
            name=name,
            password_hash=password_hash,
        )

    def _to_record(self, model: UserModel) -> UserRecord:
        # Non-native UUID backends hand the id back as bare hex
        return UserRecord(
            id=str(UUID(str(model.id))),
            email=model.email,
            name=model.name,
            password_hash=model.password_hash,
        )
