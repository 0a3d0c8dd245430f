"""Session gate over sessions issued by the external identity provider."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from urllib.parse import urlsplit

from ichibetsu.domain.sessions import UserInfo

_logger = logging.getLogger(__name__)

DEFAULT_REDIRECT = "/"
DEFAULT_PUBLIC_PATHS = frozenset({"/login", "/auth/error"})


class SessionView(Protocol):
    """Capabilities the gate needs from a provider session."""

    def has_user(self) -> bool:
        """Return true when the session carries a user with an id."""

    def is_expired(self, now: datetime) -> bool:
        """Return true unless the session expires strictly after ``now``."""

    def project_user_info(self) -> UserInfo:
        """Return the user fields exposed to the application."""


@dataclass
class SessionGate:
    """Answers authentication, route protection and redirect questions."""

    base_url: str
    public_paths: frozenset[str] = field(default=DEFAULT_PUBLIC_PATHS)

    def is_authenticated(self, session: SessionView | None) -> bool:
        """Return true when a session with a user id is present."""
        return session is not None and session.has_user()

    def is_session_valid(
        self, session: SessionView | None, now: datetime | None = None
    ) -> bool:
        """Return true when the session has not yet expired."""
        if session is None:
            return False
        current = now or datetime.now(tz=UTC)
        if current.tzinfo is None:
            current = current.replace(tzinfo=UTC)
        return not session.is_expired(current)

    def get_user_info(self, session: SessionView | None) -> UserInfo | None:
        """Return the user projection for authenticated sessions only."""
        if session is None or not self.is_authenticated(session):
            return None
        return session.project_user_info()

    def requires_auth(self, path: str) -> bool:
        """Return true unless the path is publicly reachable."""
        return path not in self.public_paths

    def get_redirect_url(self, callback_url: str | None = None) -> str:
        """Return a safe post-login redirect target."""
        if not callback_url:
            return DEFAULT_REDIRECT
        if callback_url.startswith("/"):
            return callback_url
        origin = _origin(callback_url)
        if origin is None:
            _logger.warning("Invalid callback URL: %s", callback_url)
            return DEFAULT_REDIRECT
        if origin == _origin(self.base_url):
            return callback_url
        return DEFAULT_REDIRECT

    def provider_redirect(self, url: str) -> str:
        """Resolve the provider's post-sign-in redirect against the base URL."""
        base = self.base_url.rstrip("/")
        if url.startswith("/"):
            return f"{base}{url}"
        origin = _origin(url)
        if origin is not None and origin == _origin(self.base_url):
            return url
        return base


def _origin(url: str) -> tuple[str, str] | None:
    """Return (scheme, netloc) for absolute http(s) URLs, else None."""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None
    if parts.scheme not in {"http", "https"} or not parts.hostname:
        return None
    default_port = 443 if parts.scheme == "https" else 80
    netloc = parts.hostname.lower()
    if port is not None and port != default_port:
        netloc = f"{netloc}:{port}"
    return parts.scheme, netloc
