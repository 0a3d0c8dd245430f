"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from ichibetsu.adapters.file_shop_store import FileShopStore
from ichibetsu.adapters.session_client import SessionClient
from ichibetsu.config import Settings, parse_public_paths
from ichibetsu.containers import AppContainer
from ichibetsu.domain.shops import ShopDataError, ShopRecord
from ichibetsu.services.sessions import SessionGate
from ichibetsu.services.shops import ShopQueryService, ShopStore

TEST_CAFE = {
    "id": "test-001",
    "name": "テストカフェ",
    "address": "東京都テスト区1-1-1",
    "genre": "カフェ",
    "imageUrl": "/images/shops/test-cafe.jpg",
    "story": "テスト用のカフェです。",
}

TEST_SOBA = {
    "id": "test-002",
    "name": "テスト蕎麦屋",
    "address": "東京都テスト区2-2-2",
    "genre": "蕎麦屋",
    "imageUrl": "/images/shops/test-soba.jpg",
    "story": "テスト用の蕎麦屋です。",
}

INVALID_SHOP = {
    "id": "",
    "name": "Invalid Shop",
    "address": "",
    "genre": "カフェ",
    "imageUrl": "/test.jpg",
    "story": "Invalid",
}


def future_expiry(hours: int = 24) -> str:
    return (datetime.now(tz=UTC) + timedelta(hours=hours)).isoformat()


def past_expiry(seconds: int = 1) -> str:
    return (datetime.now(tz=UTC) - timedelta(seconds=seconds)).isoformat()


@dataclass
class InMemoryShopStore(ShopStore):
    """In-memory shop store for tests."""

    shops: list[ShopRecord] = field(default_factory=list)
    error: Exception | None = None
    calls: int = 0

    async def load_all(self) -> list[ShopRecord]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.shops)


@dataclass
class FakeSessionClient(SessionClient):
    """Fake session client returning a fixed session document."""

    session: dict[str, object] | None = None
    error: Exception | None = None
    cookies: list[str | None] = field(default_factory=list)

    async def get_session(self, cookie: str | None) -> dict[str, object] | None:
        self.cookies.append(cookie)
        if self.error is not None:
            raise self.error
        return self.session


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        shop_data_path=tmp_path / "shops.json",
        auth_url="http://localhost:3000",
        environment="test",
    )


@pytest.fixture
def shop_file(settings: Settings) -> Path:
    settings.shop_data_path.write_text(
        json.dumps([TEST_CAFE, INVALID_SHOP], ensure_ascii=False), encoding="utf-8"
    )
    return settings.shop_data_path


@pytest.fixture
def session_client() -> FakeSessionClient:
    return FakeSessionClient()


@pytest.fixture
def container(settings: Settings, session_client: FakeSessionClient) -> AppContainer:
    shop_store = FileShopStore(settings.shop_data_path)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        shop_store=shop_store,
        shop_query_service=ShopQueryService(shop_store),
        session_gate=SessionGate(
            base_url=settings.auth_url,
            public_paths=parse_public_paths(settings.public_paths),
        ),
        session_client=session_client,
        close_resources=close_resources,
    )


def shop_error(code: str) -> ShopDataError:
    return ShopDataError(f"{code} raised by test", code)
