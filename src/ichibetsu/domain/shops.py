"""Domain models for the shop catalogue."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

_logger = logging.getLogger(__name__)

SHOP_FIELDS = ("id", "name", "address", "genre", "imageUrl", "story")


class ShopDataErrorCode(str, Enum):
    """Closed set of failure kinds surfaced by the shop data layer."""

    FETCH_ERROR = "FETCH_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    NOT_FOUND = "NOT_FOUND"


class ShopDataError(Exception):
    """Raised when shop data cannot be loaded or a lookup misses."""

    def __init__(self, message: str, code: ShopDataErrorCode | str) -> None:
        super().__init__(message)
        self.message = message
        self.code = ShopDataErrorCode(code)

    def __repr__(self) -> str:
        return f"ShopDataError(message={self.message!r}, code={self.code.value!r})"


@dataclass(frozen=True)
class ShopRecord:
    """A single shop as presented to users."""

    id: str
    name: str
    address: str
    genre: str
    image_url: str
    story: str

    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> "ShopRecord":
        """Build a record from a validated wire mapping, ignoring extra keys."""
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            address=str(payload["address"]),
            genre=str(payload["genre"]),
            image_url=str(payload["imageUrl"]),
            story=str(payload["story"]),
        )

    def to_dict(self) -> dict[str, str]:
        """Return the camelCase wire representation."""
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "genre": self.genre,
            "imageUrl": self.image_url,
            "story": self.story,
        }


@dataclass(frozen=True)
class ShopCard:
    """Display projection of a shop with its image URL already resolved."""

    id: str
    name: str
    address: str
    genre: str
    image_url: str
    story: str

    @classmethod
    def from_record(cls, shop: ShopRecord, image_url: str) -> "ShopCard":
        return cls(
            id=shop.id,
            name=shop.name,
            address=shop.address,
            genre=shop.genre,
            image_url=image_url,
            story=shop.story,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "genre": self.genre,
            "imageUrl": self.image_url,
            "story": self.story,
        }


def is_valid_shop(candidate: object) -> bool:
    """Return true when the candidate carries all six non-empty string fields."""
    if not isinstance(candidate, Mapping):
        return False
    for field_name in SHOP_FIELDS:
        value = candidate.get(field_name)
        if not isinstance(value, str) or not value:
            return False
    return True


def filter_valid_shops(candidates: Iterable[object]) -> list[ShopRecord]:
    """Keep well-formed records in source order and drop the rest."""
    shops: list[ShopRecord] = []
    dropped = 0
    for candidate in candidates:
        if is_valid_shop(candidate):
            shops.append(ShopRecord.from_mapping(candidate))  # type: ignore[arg-type]
        else:
            dropped += 1
    if dropped:
        _logger.warning(
            "Some shop data was invalid and filtered out: dropped=%s kept=%s",
            dropped,
            len(shops),
        )
    return shops
