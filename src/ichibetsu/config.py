"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    shop_data_path: Path = Path("data/shops.json")
    shops_api_url: str | None = None
    auth_url: str = "http://localhost:3000"
    public_paths: str = "/login,/auth/error"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_public_paths(raw: str | None) -> frozenset[str]:
    """Parse the comma-separated list of paths reachable without a session."""
    if raw is None:
        return frozenset()
    paths: set[str] = set()
    for chunk in raw.split(","):
        value = chunk.strip()
        if value:
            paths.add(value)
    return frozenset(paths)
