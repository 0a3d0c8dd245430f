"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ichibetsu.adapters.file_shop_store import FileShopStore
from ichibetsu.adapters.http_shop_store import HttpShopStore
from ichibetsu.adapters.session_client import HttpSessionClient, SessionClient
from ichibetsu.config import Settings, parse_public_paths
from ichibetsu.services.sessions import SessionGate
from ichibetsu.services.shops import ShopQueryService, ShopStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    shop_store: ShopStore
    shop_query_service: ShopQueryService
    session_gate: SessionGate
    session_client: SessionClient
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_shop_store: HttpShopStore | None = None
    shop_store: ShopStore
    if resolved_settings.shops_api_url:
        http_shop_store = HttpShopStore.create(resolved_settings.shops_api_url)
        shop_store = http_shop_store
    else:
        shop_store = FileShopStore(resolved_settings.shop_data_path)
    shop_query_service = ShopQueryService(shop_store)
    session_gate = SessionGate(
        base_url=resolved_settings.auth_url,
        public_paths=parse_public_paths(resolved_settings.public_paths),
    )
    session_client = HttpSessionClient.create(resolved_settings.auth_url)

    async def close_resources() -> None:
        await session_client.close()
        if http_shop_store is not None:
            await http_shop_store.close()

    return AppContainer(
        settings=resolved_settings,
        shop_store=shop_store,
        shop_query_service=shop_query_service,
        session_gate=session_gate,
        session_client=session_client,
        close_resources=close_resources,
    )
