"""Shop catalogue endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ichibetsu.api.auth import require_session
from ichibetsu.api.errors import shop_error_response
from ichibetsu.domain.shops import ShopDataError

if TYPE_CHECKING:
    from ichibetsu.containers import AppContainer

router = APIRouter(prefix="/api/shops", tags=["shops"])


@router.get("")
async def list_shops(request: Request) -> JSONResponse:
    """Return every valid shop in backing-file order."""
    container: AppContainer = request.app.state.container
    try:
        shops = await container.shop_query_service.list_all()
    except ShopDataError as exc:
        return shop_error_response(exc)
    return JSONResponse([shop.to_dict() for shop in shops])


@router.get("/deck", dependencies=[Depends(require_session)])
async def shop_deck(request: Request) -> JSONResponse:
    """Return all shops shuffled, with image fallbacks applied."""
    container: AppContainer = request.app.state.container
    try:
        cards = await container.shop_query_service.shuffled_deck()
    except ShopDataError as exc:
        return shop_error_response(exc)
    return JSONResponse([card.to_dict() for card in cards])
