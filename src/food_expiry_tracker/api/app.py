"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from food_expiry_tracker.api.items import router as items_router
from food_expiry_tracker.api.notifications import router as notifications_router
from food_expiry_tracker.api.produce import router as produce_router
from food_expiry_tracker.app_logging import configure_logging
from food_expiry_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Food Expiry Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(items_router)
    app.include_router(produce_router)
    app.include_router(notifications_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
