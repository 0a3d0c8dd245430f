"""ASGI entrypoint for the shop discovery API."""

from ichibetsu.api.app import create_app
from ichibetsu.containers import build_container

app = create_app(build_container())
