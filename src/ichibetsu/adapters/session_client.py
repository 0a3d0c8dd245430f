"""Client for the identity provider's session endpoint."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class SessionClient(Protocol):
    """Interface for reading the current provider session."""

    async def get_session(self, cookie: str | None) -> dict[str, object] | None:
        """Return the raw session document, or None when signed out."""


@dataclass
class HttpSessionClient(SessionClient):
    """Reads ``/api/auth/session`` from the identity provider with httpx."""

    auth_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, auth_url: str) -> "HttpSessionClient":
        """Create a session client with a managed httpx session."""
        return cls(auth_url=auth_url, http_client=httpx.AsyncClient())

    async def get_session(self, cookie: str | None) -> dict[str, object] | None:
        """Fetch the session for the given cookie header."""
        if not cookie:
            return None
        url = f"{self.auth_url.rstrip('/')}/api/auth/session"
        response = await self.http_client.get(
            url, headers={"cookie": cookie}, timeout=10
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict) or not payload:
            return None
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
