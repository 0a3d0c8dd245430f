"""Read-only query service over the shop catalogue."""

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from ichibetsu.domain.shops import (
    ShopCard,
    ShopDataError,
    ShopDataErrorCode,
    ShopRecord,
)
from ichibetsu.services.presentation import resolve_image_url, shuffle

_logger = logging.getLogger(__name__)


class ShopStore(Protocol):
    """Source of validated shop records."""

    async def load_all(self) -> list[ShopRecord]:
        """Load every well-formed shop from the backing store."""


@dataclass
class ShopQueryService:
    """Application service for listing and looking up shops."""

    store: ShopStore

    async def list_all(self) -> list[ShopRecord]:
        """Return every valid shop, wrapping unexpected failures as FETCH_ERROR."""
        try:
            return await self.store.load_all()
        except ShopDataError:
            raise
        except Exception as exc:
            _logger.exception("Failed to fetch shops")
            raise ShopDataError(
                "Failed to fetch shop data", ShopDataErrorCode.FETCH_ERROR
            ) from exc

    async def get_by_id(self, shop_id: str) -> ShopRecord:
        """Return the shop with the given id or raise NOT_FOUND."""
        shops = await self.list_all()
        for shop in shops:
            if shop.id == shop_id:
                return shop
        raise ShopDataError(
            f"Shop with id {shop_id} not found", ShopDataErrorCode.NOT_FOUND
        )

    async def shuffled_deck(self, rng: random.Random | None = None) -> list[ShopCard]:
        """Return all shops in random order, ready for the swipe UI."""
        shops = await self.list_all()
        return [
            ShopCard.from_record(shop, resolve_image_url(shop.image_url))
            for shop in shuffle(shops, rng)
        ]
