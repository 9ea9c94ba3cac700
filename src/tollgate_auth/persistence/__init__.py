"""Persistence implementations for tollgate_auth.

This package contains database-specific implementations of the
store interfaces defined in tollgate_auth.repositories.

Structure:
    persistence/
    └── sqlalchemy/     # SQLAlchemy/SQL database implementation

Usage:
    from tollgate_auth.persistence.sqlalchemy import (
        AuthBase,
        UserModel,
        UserStoreSQLAlchemy,
    )
"""
