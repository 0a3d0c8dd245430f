"""HTTP mapping for shop data failures."""

from fastapi import status
from fastapi.responses import JSONResponse

from ichibetsu.domain.shops import ShopDataError, ShopDataErrorCode


def shop_error_response(exc: ShopDataError) -> JSONResponse:
    """Translate a shop data failure into the public error body."""
    # FETCH_ERROR also covers upstream failures of HttpShopStore; the body stays
    # the file-store wording so clients see one fixed error vocabulary.
    if exc.code is ShopDataErrorCode.FETCH_ERROR:
        return JSONResponse(
            {"error": "Shop data file not found"},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return JSONResponse(
        {"error": "Failed to load shop data"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
