"""Service settings loaded from environment variables.

Configuration sources (in priority order):
1. OS environment variables (always highest priority)
2. TOLLGATE_ENV_FILE environment variable (path to a .env file)
3. .env in the current working directory

Uses pydantic-settings for type coercion and validation. Settings are built
once at startup by ``load_settings`` and handed to the components that need
them; nothing reads them as module-level state.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import SecretStr, ValidationError, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. TOLLGATE_ENV_FILE env var
    2. ./.env
    """
    env_file_path = os.environ.get("TOLLGATE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = Path.cwd() / path
        if path.exists():
            return path

    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env

    return None


class Settings(BaseSettings):
    """Service configuration loaded from environment variables.

    ``nats_servers`` and ``jwt_secret`` have no defaults: the service refuses
    to start without them.
    """

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required
    nats_servers: str  # Comma-separated list, e.g. "nats://a:4222,nats://b:4222"
    jwt_secret: SecretStr

    # Message bus
    nats_queue_group: str = "auth-service"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/tollgate.db"

    # Tokens and hashing
    jwt_expire_hours: int = 2
    bcrypt_rounds: int = 10

    # Logging
    log_level: str = "INFO"

    @field_validator("nats_servers", mode="before")
    @classmethod
    def _validate_nats_servers(cls, v: object) -> str:
        """Accept a list or a comma-separated string; require one address."""
        if isinstance(v, (list, tuple)):
            v = ",".join(str(item) for item in v)
        value = str(v) if v is not None else ""
        if not any(part.strip() for part in value.split(",")):
            msg = "at least one NATS server address is required"
            raise ValueError(msg)
        return value

    @field_validator("jwt_secret")
    @classmethod
    def _validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            msg = "JWT secret cannot be empty"
            raise ValueError(msg)
        return v

    @field_validator("jwt_expire_hours", "bcrypt_rounds")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v <= 0:
            msg = "must be a positive integer"
            raise ValueError(msg)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def nats_server_list(self) -> list[str]:
        """Parse NATS servers from the comma-separated string."""
        return [s.strip() for s in self.nats_servers.split(",") if s.strip()]


def load_settings(env_file: Path | None = None, **overrides: object) -> Settings:
    """Build and validate the service settings.

    Parameters
    ----------
    env_file
        Explicit .env file; defaults to the discovered one
    overrides
        Explicit values that take precedence over the environment

    Returns
    -------
    The validated settings

    Raises
    ------
    ConfigError
        If a required variable is missing or a value is invalid
    """
    try:
        return Settings(
            _env_file=env_file or _resolve_env_file_path(),  # type: ignore[call-arg]
            **overrides,
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']).upper()}: {err['msg']}"
            for err in e.errors()
        )
        msg = f"Config validation error: {details}"
        raise ConfigError(msg) from e
