"""Service composition and lifecycle.

Builds every component from one ``Settings`` instance and runs the bus
server until the process is signalled.
"""

import asyncio
import logging
import signal
import sys
from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine

from tollgate.application.services import AuthenticationService
from tollgate.infrastructure.persistence import (
    create_engine,
    create_session_maker,
    create_tables,
)
from tollgate.presentation.bus import AuthMessageHandlers, BusServer
from tollgate_auth import JWTService, PasswordHashingService
from tollgate_auth.persistence.sqlalchemy import UserStoreSQLAlchemy
from tollgate_config import Settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_logging(level: str = "INFO") -> None:
    """Configure service logging.

    Sets up console logging with timestamps and module names, and sets
    noisy third-party loggers to WARNING.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("tollgate").setLevel(log_level)
    logging.getLogger("tollgate_auth").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("nats").setLevel(logging.WARNING)


@dataclass
class Service:
    """The assembled service: what ``run`` starts and stops."""

    engine: AsyncEngine
    auth_service: AuthenticationService
    server: BusServer


def build_service(settings: Settings) -> Service:
    """Wire store, hasher, signer, handlers and bus server together."""
    engine = create_engine(settings.database_url)
    user_store = UserStoreSQLAlchemy(create_session_maker(engine))

    auth_service = AuthenticationService(
        user_store=user_store,
        password_service=PasswordHashingService(rounds=settings.bcrypt_rounds),
        jwt_service=JWTService(
            secret_key=settings.jwt_secret.get_secret_value(),
            expire_hours=settings.jwt_expire_hours,
        ),
    )

    handlers = AuthMessageHandlers(auth_service)
    server = BusServer(
        servers=settings.nats_server_list,
        routes=handlers.routes(),
        queue_group=settings.nats_queue_group,
    )
    return Service(engine=engine, auth_service=auth_service, server=server)


async def run(settings: Settings) -> None:
    """Run the service until SIGINT or SIGTERM."""
    service = build_service(settings)
    stop_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    try:
        await create_tables(service.engine)
        await service.server.start()
        logger.info("Auth microservice is running.")
        await stop_event.wait()
        logger.info("Shutdown requested")
    finally:
        try:
            await service.server.stop()
        finally:
            await service.engine.dispose()
