"""Message handlers for the auth patterns.

Each handler decodes its payload and delegates to the
AuthenticationService. Handlers always return a result value; a payload
that does not decode becomes an ``INVALID_PAYLOAD`` failure, except on
the verify pattern where it is reported as an invalid token.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from tollgate.application.results import AuthFailure, AuthResult
from tollgate.application.services import AuthenticationService
from tollgate.presentation.bus.schemas import (
    LoginUserMessage,
    RegisterUserMessage,
    VerifyTokenMessage,
)
from tollgate_auth import InvalidTokenError

logger = logging.getLogger(__name__)

REGISTER_PATTERN = "auth.register.user"
LOGIN_PATTERN = "auth.login.user"
VERIFY_PATTERN = "auth.verify.user"

Handler = Callable[[Any], Awaitable[AuthResult]]


class AuthMessageHandlers:
    """Binds the auth bus patterns to the AuthenticationService."""

    def __init__(self, auth_service: AuthenticationService):
        self._auth_service = auth_service

    async def register_user(self, data: Any) -> AuthResult:
        try:
            message = RegisterUserMessage.model_validate(data)
        except ValidationError as e:
            logger.info("Rejected %s payload: %d errors", REGISTER_PATTERN, e.error_count())
            return AuthFailure.invalid_payload()

        return await self._auth_service.register(
            email=message.email,
            name=message.name,
            password=message.password,
        )

    async def login_user(self, data: Any) -> AuthResult:
        try:
            message = LoginUserMessage.model_validate(data)
        except ValidationError as e:
            logger.info("Rejected %s payload: %d errors", LOGIN_PATTERN, e.error_count())
            return AuthFailure.invalid_payload()

        return await self._auth_service.login(
            email=message.email,
            password=message.password,
        )

    async def verify_token(self, data: Any) -> AuthResult:
        try:
            message = VerifyTokenMessage.model_validate(data)
        except ValidationError as e:
            logger.info("Rejected %s payload: %d errors", VERIFY_PATTERN, e.error_count())
            return AuthFailure.from_error(InvalidTokenError())

        return self._auth_service.verify_token(message.token)

    def routes(self) -> dict[str, Handler]:
        """Map each bus pattern to its handler."""
        return {
            REGISTER_PATTERN: self.register_user,
            LOGIN_PATTERN: self.login_user,
            VERIFY_PATTERN: self.verify_token,
        }
