"""Authentication service for user registration, login and token verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tollgate.application.results import AuthFailure, AuthResult, AuthSession
from tollgate_auth import (
    AlreadyExistsError,
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    UserRecord,
)

if TYPE_CHECKING:
    from tollgate_auth.repositories import UserStore

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the user store, password hashing and JWT signing to provide:
    - User registration
    - Login with password
    - Token verification with reissue (sliding expiration)

    The service holds no state of its own. Domain errors raised by its
    collaborators never escape: every method returns an ``AuthSession`` or
    an ``AuthFailure``.
    """

    def __init__(
        self,
        user_store: UserStore,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_store = user_store
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_session(self, user: UserRecord) -> AuthSession:
        claims = user.public_claims()
        return AuthSession(user=claims, token=self._jwt_service.sign(claims))

    async def register(self, email: str, name: str, password: str) -> AuthResult:
        try:
            existing_user = await self._user_store.find_by_email(email)
            if existing_user is not None:
                raise AlreadyExistsError

            password_hash = self._password_service.hash(password)
            try:
                user = await self._user_store.create(
                    email=email,
                    name=name,
                    password_hash=password_hash,
                )
            except ConflictError as e:
                # Lost a race against a concurrent registration
                raise AlreadyExistsError from e

            session = self._issue_session(user)
        except AuthError as e:
            logger.info("Registration rejected for %s: %s", email, e.message)
            return AuthFailure.from_error(e)
        except Exception:
            logger.exception("Registration failed for %s", email)
            return AuthFailure.internal("Could not register user.")

        logger.info("User registered: %s", email)
        return session

    async def login(self, email: str, password: str) -> AuthResult:
        try:
            user = await self._user_store.find_by_email(email)
            if user is None:
                self._password_service.verify_dummy(password)
                raise InvalidCredentialsError

            if not self._password_service.verify(password, user.password_hash):
                raise InvalidCredentialsError

            session = self._issue_session(user)
        except AuthError as e:
            logger.info("Login rejected for %s", email)
            return AuthFailure.from_error(e)
        except Exception:
            logger.exception("Login failed for %s", email)
            return AuthFailure.internal("Could not log in.")

        logger.info("User logged in: %s", email)
        return session

    def verify_token(self, token: str) -> AuthResult:
        try:
            payload = self._jwt_service.verify(token)
            new_token = self._jwt_service.sign(payload.claims)
        except InvalidTokenError as e:
            logger.warning("Token verification failed: %s", e.message)
            return AuthFailure.from_error(InvalidTokenError())
        except Exception:
            logger.exception("Token verification failed unexpectedly")
            return AuthFailure.from_error(InvalidTokenError())

        logger.debug("Token reissued for subject: %s", payload.subject)
        return AuthSession(user=payload.claims, token=new_token)
