"""Shop store that reads the catalogue from a running shops API."""

from dataclasses import dataclass

import httpx

from ichibetsu.domain.shops import (
    ShopDataError,
    ShopDataErrorCode,
    ShopRecord,
    filter_valid_shops,
)
from ichibetsu.services.shops import ShopStore


@dataclass
class HttpShopStore(ShopStore):
    """HTTPX-backed shop store."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpShopStore":
        """Create a shop store with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def load_all(self) -> list[ShopRecord]:
        """Fetch GET /api/shops and validate the returned array."""
        url = f"{self.base_url.rstrip('/')}/api/shops"
        response = await self.http_client.get(url, timeout=10)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ShopDataError(
                "Failed to parse shop data", ShopDataErrorCode.PARSE_ERROR
            )
        return filter_valid_shops(payload)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
