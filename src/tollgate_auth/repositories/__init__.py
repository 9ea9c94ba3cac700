"""Store interfaces for tollgate_auth.

This package defines abstract interfaces that can be implemented
by different persistence technologies. The SQLAlchemy implementation
lives in tollgate_auth.persistence.sqlalchemy.
"""

from tollgate_auth.repositories.user_repository import UserRecord, UserStore

__all__ = ["UserRecord", "UserStore"]
