"""ASGI entrypoint for the nutrient gap API."""

from nutrient_gap.api.app import create_app
from nutrient_gap.containers import build_container

app = create_app(build_container())
