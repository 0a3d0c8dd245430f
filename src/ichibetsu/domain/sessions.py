"""Models for identity-provider sessions."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class SessionUserPayload(BaseModel):
    """User block of a provider session."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    email: str | None = None
    image: str | None = None


class SessionPayload(BaseModel):
    """Session document returned by the identity provider."""

    model_config = ConfigDict(extra="ignore")

    user: SessionUserPayload | None = None
    expires: str | None = None


@dataclass(frozen=True)
class UserInfo:
    """Shallow projection of the signed-in user."""

    id: str
    name: str | None
    email: str | None
    image: str | None
