"""Ordering and display helpers for the shop deck."""

import random
from collections.abc import Sequence
from typing import TypeVar

DEFAULT_SHOP_IMAGE_URL = "/images/shops/default-shop.jpg"

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of the items (Fisher-Yates)."""
    generator = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = generator.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def default_image_url() -> str:
    """Return the placeholder image shown when a shop has none."""
    return DEFAULT_SHOP_IMAGE_URL


def resolve_image_url(url: str | None) -> str:
    """Return the URL unless it is missing or blank, else the placeholder."""
    if not url or not url.strip():
        return default_image_url()
    return url
