"""Session-aware endpoints and dependencies."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from ichibetsu.adapters.provider_session import ProviderSession

if TYPE_CHECKING:
    from ichibetsu.containers import AppContainer

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def get_session(request: Request) -> ProviderSession | None:
    """Return the caller's provider session, if any."""
    container: AppContainer = request.app.state.container
    try:
        raw = await container.session_client.get_session(
            request.headers.get("cookie")
        )
    except Exception:
        _logger.exception("Failed to read provider session")
        return None
    return ProviderSession.from_payload(raw)


async def require_session(
    request: Request,
    session: ProviderSession | None = Depends(get_session),
) -> ProviderSession:
    """Ensure the caller holds an authenticated, unexpired session."""
    container: AppContainer = request.app.state.container
    gate = container.session_gate
    if session is None or not (
        gate.is_authenticated(session) and gate.is_session_valid(session)
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    return session


@router.get("/me")
async def current_user(
    request: Request,
    session: ProviderSession = Depends(require_session),
) -> dict[str, object]:
    """Return the signed-in user's profile fields."""
    container: AppContainer = request.app.state.container
    user_info = container.session_gate.get_user_info(session)
    if user_info is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    return asdict(user_info)


@router.get("/redirect")
async def redirect_target(
    request: Request,
    callback_url: str | None = Query(default=None, alias="callbackUrl"),
) -> dict[str, str]:
    """Return the safe redirect target for a post-login callback URL."""
    container: AppContainer = request.app.state.container
    return {"url": container.session_gate.get_redirect_url(callback_url)}
