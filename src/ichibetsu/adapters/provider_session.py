"""Adapter from the identity provider's session document to SessionView."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import ValidationError

from ichibetsu.domain.sessions import SessionPayload, UserInfo
from ichibetsu.services.sessions import SessionView

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderSession(SessionView):
    """SessionView backed by a provider session payload."""

    payload: SessionPayload

    @classmethod
    def from_payload(cls, raw: object) -> "ProviderSession | None":
        """Wrap a decoded session document; empty or malformed documents yield None."""
        if not isinstance(raw, dict) or not raw:
            return None
        try:
            payload = SessionPayload.model_validate(raw)
        except ValidationError:
            _logger.warning("Ignoring malformed session payload")
            return None
        return cls(payload=payload)

    def has_user(self) -> bool:
        user = self.payload.user
        return bool(user and user.id)

    def is_expired(self, now: datetime) -> bool:
        expires_at = _parse_timestamp(self.payload.expires)
        if expires_at is None:
            return True
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        return expires_at <= now

    def project_user_info(self) -> UserInfo:
        user = self.payload.user
        if user is None or not user.id:
            raise ValueError("Session has no authenticated user")
        return UserInfo(
            id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
        )


def _parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
