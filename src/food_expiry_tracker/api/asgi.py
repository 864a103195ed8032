"""ASGI entrypoint for the food expiry tracker API."""

from food_expiry_tracker.api.app import create_app
from food_expiry_tracker.containers import build_container

app = create_app(build_container())
