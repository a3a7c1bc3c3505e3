"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Query, Request

from fastfit.api.models import (
    CatalogOut,
    MenuItemOut,
    PlaceIn,
    RecommendationRequest,
    RestaurantMatchOut,
)
from fastfit.api.tracking import router as tracking_router
from fastfit.app_logging import configure_logging
from fastfit.containers import AppContainer
from fastfit.services.ranking import MenuFilter


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        catalog_service = app.state.container.session.catalog_service
        load_task: asyncio.Task | None = None
        if catalog_service.is_loading:
            logger.info("Loading catalog in the background")
            load_task = asyncio.create_task(catalog_service.load())
        yield
        if load_task is not None and not load_task.done():
            load_task.cancel()
            with suppress(asyncio.CancelledError):
                await load_task
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(tracking_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog")
    async def catalog(request: Request) -> CatalogOut:
        """Return the loading state and all loaded items."""
        state = _container(request).session.catalog_service.state
        return CatalogOut(
            loading=state.loading,
            source=state.catalog.source,
            item_count=len(state.catalog.items),
            items=[MenuItemOut.from_item(item) for item in state.catalog.items],
        )

    @app.post("/catalog/reload")
    async def reload_catalog(request: Request) -> dict[str, object]:
        """Reload the dataset and replace the catalog."""
        loaded = await _container(request).session.catalog_service.reload()
        return {"source": loaded.source, "item_count": len(loaded.items)}

    @app.post("/places/match")
    async def match_places(
        places: list[PlaceIn], request: Request
    ) -> list[RestaurantMatchOut]:
        """Flag nearby places the catalog has menus for."""
        session = _container(request).session
        matches = session.match_places(place.to_domain() for place in places)
        return [RestaurantMatchOut.from_match(match) for match in matches]

    @app.post("/recommendations")
    async def recommendations(
        payload: RecommendationRequest, request: Request
    ) -> list[MenuItemOut]:
        """Rank nearby menu items against the remaining budget."""
        items = _container(request).session.recommendations(payload.nearby)
        return [MenuItemOut.from_item(item) for item in items]

    @app.get("/restaurants/{name}/items")
    async def restaurant_items(
        name: str,
        request: Request,
        filters: list[MenuFilter] = Query(default=[], alias="filter"),  # noqa: B008
    ) -> list[MenuItemOut]:
        """Return one restaurant's menu within budget, sorted by the filters."""
        items = _container(request).session.restaurant_items(name, filters)
        return [MenuItemOut.from_item(item) for item in items]

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container
