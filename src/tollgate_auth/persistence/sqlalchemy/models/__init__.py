from tollgate_auth.persistence.sqlalchemy.models.user_model import UserModel

__all__ = ["UserModel"]
