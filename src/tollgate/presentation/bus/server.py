"""NATS request/reply server for the auth patterns.

Subscribes every routed pattern as a subject inside a shared queue group,
runs each inbound message in its own task, and replies with a
``ResponseEnvelope``. Failures never leak exception details: the reply
carries only ``{status, message}``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

import nats

from tollgate.application.results import AuthFailure, AuthResult, AuthSession
from tollgate.presentation.bus.schemas import RequestEnvelope, ResponseEnvelope

if TYPE_CHECKING:
    from nats.aio.client import Client
    from nats.aio.msg import Msg
    from nats.aio.subscription import Subscription

    from tollgate.presentation.bus.handlers import Handler

logger = logging.getLogger(__name__)


def decode_request(body: bytes) -> RequestEnvelope:
    """Decode a request body.

    Bodies framed as ``{"pattern", "data", "id"}`` are unwrapped; any
    other JSON value is taken as the payload itself.

    Raises
    ------
    ValueError
        If the body is not valid JSON
    """
    raw = json.loads(body)
    if isinstance(raw, dict) and "data" in raw:
        return RequestEnvelope.model_validate(raw)
    return RequestEnvelope(data=raw)


def encode_result(request_id: str | None, result: AuthResult) -> ResponseEnvelope:
    """Wrap a service result in a reply envelope."""
    if isinstance(result, AuthSession):
        return ResponseEnvelope(id=request_id, response=result.to_dict())
    return ResponseEnvelope(id=request_id, err=result.to_dict())


class BusServer:
    """Serve auth patterns over NATS request/reply."""

    def __init__(
        self,
        servers: list[str],
        routes: Mapping[str, Handler],
        queue_group: str = "auth-service",
        name: str = "tollgate",
    ):
        self._servers = servers
        self._routes = dict(routes)
        self._queue_group = queue_group
        self._name = name
        self._nc: Client | None = None
        self._subscriptions: list[Subscription] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def is_connected(self) -> bool:
        return self._nc is not None and self._nc.is_connected

    async def start(self) -> None:
        """Connect to NATS and subscribe all routed patterns."""
        self._nc = await nats.connect(
            servers=self._servers,
            name=self._name,
            error_cb=self._on_error,
            disconnected_cb=self._on_disconnected,
            reconnected_cb=self._on_reconnected,
        )
        for pattern in self._routes:
            sub = await self._nc.subscribe(
                pattern,
                queue=self._queue_group,
                cb=self.on_message,
            )
            self._subscriptions.append(sub)
            logger.debug("Subscribed to %s (queue: %s)", pattern, self._queue_group)

        logger.info(
            "Auth service listening on %s (%d patterns)",
            ", ".join(self._servers),
            len(self._routes),
        )

    async def stop(self) -> None:
        """Stop accepting messages, finish in-flight ones, then disconnect."""
        if self._nc is None:
            return

        nc, self._nc = self._nc, None
        subscriptions, self._subscriptions = self._subscriptions, []
        try:
            if not nc.is_closed:
                # Delivers what is already pending, then unsubscribes
                for sub in subscriptions:
                    await sub.drain()
        finally:
            if self._tasks:
                logger.info("Waiting for %d in-flight messages", len(self._tasks))
                await asyncio.gather(*self._tasks, return_exceptions=True)

        if nc.is_closed:
            logger.warning("NATS connection was already closed")
        else:
            await nc.drain()
        logger.info("Auth service disconnected")

    async def on_message(self, msg: Msg) -> None:
        """Subscription callback: hand the message to its own task."""
        task = asyncio.create_task(self.handle_message(msg))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def handle_message(self, msg: Msg) -> None:
        """Decode, dispatch and reply to one message."""
        try:
            request = decode_request(msg.data)
        except ValueError:
            logger.warning("Malformed message on %s", msg.subject)
            await self._reply(msg, encode_result(None, AuthFailure.invalid_payload()))
            return

        handler = self._routes.get(msg.subject)
        if handler is None:
            logger.warning("No handler for subject %s", msg.subject)
            failure = AuthFailure.internal(f"Unknown pattern: {msg.subject}", status=404)
            await self._reply(msg, encode_result(request.id, failure))
            return

        try:
            result = await handler(request.data)
        except Exception:
            logger.exception("Unhandled error while processing %s", msg.subject)
            result = AuthFailure.internal("Internal error")

        await self._reply(msg, encode_result(request.id, result))

    async def _reply(self, msg: Msg, envelope: ResponseEnvelope) -> None:
        if not msg.reply:
            logger.debug("Message on %s has no reply subject", msg.subject)
            return
        await msg.respond(envelope.to_json())

    async def _on_error(self, e: Exception) -> None:
        logger.error("NATS error: %s", e)

    async def _on_disconnected(self) -> None:
        logger.warning("Disconnected from NATS")

    async def _on_reconnected(self) -> None:
        logger.info("Reconnected to NATS")
