from tollgate_auth.persistence.sqlalchemy.repositories.user_repository import (
    UserStoreSQLAlchemy,
)

__all__ = ["UserStoreSQLAlchemy"]
