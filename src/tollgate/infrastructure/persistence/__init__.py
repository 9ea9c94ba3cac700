from tollgate.infrastructure.persistence.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)

__all__ = [
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
