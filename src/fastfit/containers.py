"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from fastfit.adapters.activity_feed_client import SimulatedActivityFeedClient
from fastfit.adapters.dataset_source import (
    DatasetSource,
    FileDatasetSource,
    HttpxDatasetSource,
)
from fastfit.config import Settings
from fastfit.domain.activity import ActivityInputs
from fastfit.services.activity_feed import ActivityFeedService
from fastfit.services.budget import BudgetCalculator
from fastfit.services.dataset import CatalogService
from fastfit.services.session import SessionContext


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session: SessionContext
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_source: HttpxDatasetSource | None = None
    source: DatasetSource | None = None
    if resolved_settings.dataset_url:
        http_source = HttpxDatasetSource.create(resolved_settings.dataset_url)
        source = http_source
    elif resolved_settings.dataset_path:
        source = FileDatasetSource(Path(resolved_settings.dataset_path))

    session = SessionContext(
        catalog_service=CatalogService(source=source),
        activity_feed=ActivityFeedService(
            client=SimulatedActivityFeedClient(
                latency_seconds=resolved_settings.activity_feed_latency_seconds
            )
        ),
        calculator=BudgetCalculator(
            base_calorie_goal=resolved_settings.base_calorie_goal,
            base_protein_goal=resolved_settings.base_protein_goal,
            carb_goal=resolved_settings.carb_goal,
        ),
        activity=ActivityInputs(steps=resolved_settings.default_steps),
    )

    async def close_resources() -> None:
        if http_source is not None:
            await http_source.close()

    return AppContainer(
        settings=resolved_settings,
        session=session,
        close_resources=close_resources,
    )
