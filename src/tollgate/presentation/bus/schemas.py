"""Message schemas for the auth bus patterns.

Incoming payloads are decoded into these models before they reach the
authentication service. Field checks stay minimal: the gateway owns
request validation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RegisterUserMessage(BaseModel):
    """Payload of ``auth.register.user``."""

    email: str
    name: str
    password: str

    model_config = ConfigDict(extra="ignore")


class LoginUserMessage(BaseModel):
    """Payload of ``auth.login.user``."""

    email: str
    password: str

    model_config = ConfigDict(extra="ignore")


class VerifyTokenMessage(BaseModel):
    """Payload of ``auth.verify.user``.

    The gateway may send the token either as a bare string or wrapped in
    an object.
    """

    token: str

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_token(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"token": data}
        return data


class RequestEnvelope(BaseModel):
    """Request frame as sent by the gateway's NATS client."""

    pattern: str | None = None
    data: Any = None
    id: str | None = None

    model_config = ConfigDict(extra="ignore")


class ResponseEnvelope(BaseModel):
    """Reply frame: exactly one of ``response`` or ``err`` is set."""

    id: str | None = None
    response: Any = None
    err: Any = None
    is_disposed: bool = Field(default=True, serialization_alias="isDisposed")

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
