"""JSON file-backed shop store."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from ichibetsu.domain.shops import (
    ShopDataError,
    ShopDataErrorCode,
    ShopRecord,
    filter_valid_shops,
)
from ichibetsu.services.shops import ShopStore

_logger = logging.getLogger(__name__)


@dataclass
class FileShopStore(ShopStore):
    """Reads the whole catalogue from a single JSON array on every call."""

    path: Path

    async def load_all(self) -> list[ShopRecord]:
        """Read, decode and validate the backing file."""
        if not self.path.exists():
            raise ShopDataError(
                "Shop data file not found", ShopDataErrorCode.FETCH_ERROR
            )
        try:
            payload = json.loads(
                self.path.read_text(encoding="utf-8"),
                parse_constant=_reject_constant,
            )
        except (OSError, ValueError, RecursionError) as exc:
            _logger.exception(
                "Error reading shop data", extra={"path": str(self.path)}
            )
            raise ShopDataError(
                "Failed to load shop data", ShopDataErrorCode.PARSE_ERROR
            ) from exc
        if not isinstance(payload, list):
            _logger.error(
                "Shop data is not a JSON array", extra={"path": str(self.path)}
            )
            raise ShopDataError(
                "Failed to load shop data", ShopDataErrorCode.PARSE_ERROR
            )
        return filter_valid_shops(payload)


def _reject_constant(name: str) -> float:
    """Refuse NaN and Infinity, which are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")
