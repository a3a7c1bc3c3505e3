"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from fastfit.adapters.activity_feed_client import ActivityFeedClient
from fastfit.adapters.dataset_source import StaticDatasetSource
from fastfit.config import Settings
from fastfit.containers import AppContainer
from fastfit.domain.activity import ActivityInputs, ActivityRecord
from fastfit.domain.catalog import Catalog, MenuItem
from fastfit.services.activity_feed import ActivityFeedService
from fastfit.services.budget import BudgetCalculator
from fastfit.services.dataset import CatalogService, parse_catalog
from fastfit.services.session import SessionContext

HEADER = (
    "restaurant,item,calories,cal_fat,total_fat,sat_fat,trans_fat,cholesterol,"
    "sodium,total_carb,fiber,sugar,protein,vit_a,vit_c,calcium,salad"
)

SAMPLE_CSV = "\n".join(
    [
        HEADER,
        "Mcdonalds,Big Mac,540,250,28,10,1,80,950,46,3,9,25,6,2,25,Other",
        "Mcdonalds,Grilled Chicken Salad,350,0,15,0,0,0,0,12,0,0,38,0,0,0,Other",
        "Mcdonalds,Side Salad,0,0,0,0,0,0,0,0,0,0,0,0,0,0,Other",
        "Taco Bell,Crunchy Taco,170,0,10,0,0,0,0,13,0,0,8,0,0,0,Other",
        "Taco Bell,Power Menu Bowl - Chicken,470,0,19,0,0,0,0,50,0,0,26,0,0,0,Other",
        "Chick-fil-A,Grilled Chicken Sandwich,320,0,6,0,0,0,0,41,0,0,28,0,0,0,Other",
        "Chick-fil-A,Spicy Deluxe,550,0,25,0,0,0,0,48,0,0,28,0,0,0,Other",
        "Broken,row,12",
        'Subway,"Turkey, Ham & Cheese",280,0,,0,0,0,0,46,0,0,18,0,0,0,Other',
        "",
    ]
)


def make_item(  # noqa: PLR0913
    name: str,
    calories: int,
    protein: float,
    carbs: float = 0,
    fat: float = 0,
    restaurant: str = "Mcdonalds",
) -> MenuItem:
    return MenuItem(
        id=uuid4(),
        restaurant_name=restaurant,
        name=name,
        calories=calories,
        protein=f"{protein:g}g",
        carbs=f"{carbs:g}g",
        fat=f"{fat:g}g",
    )


@dataclass
class FakeActivityFeedClient(ActivityFeedClient):
    """Feed client returning fixed activities without delay."""

    activities: list[ActivityRecord] = field(
        default_factory=lambda: [
            ActivityRecord(
                name="Evening Swim",
                category="Swim",
                calories=300,
                duration="40 min",
                icon="figure.pool.swim",
            )
        ]
    )
    calls: int = 0

    async def fetch_activities(self) -> list[ActivityRecord]:
        self.calls += 1
        return list(self.activities)


@dataclass
class GatedActivityFeedClient(ActivityFeedClient):
    """Feed client that blocks until the test releases it."""

    release: asyncio.Event | None = None

    async def fetch_activities(self) -> list[ActivityRecord]:
        assert self.release is not None
        await self.release.wait()
        return [
            ActivityRecord(
                name="Late Run",
                category="Run",
                calories=500,
                duration="50 min",
                icon="figure.run",
            )
        ]


@dataclass
class FailingActivityFeedClient(ActivityFeedClient):
    async def fetch_activities(self) -> list[ActivityRecord]:
        raise RuntimeError("feed offline")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        dataset_path=None,
        activity_feed_latency_seconds=0,
        environment="test",
    )


@pytest.fixture
def catalog() -> Catalog:
    return parse_catalog(SAMPLE_CSV)


@pytest.fixture
def feed_client() -> FakeActivityFeedClient:
    return FakeActivityFeedClient()


@pytest.fixture
def session(feed_client: FakeActivityFeedClient) -> SessionContext:
    catalog_service = CatalogService(source=StaticDatasetSource(SAMPLE_CSV))
    asyncio.run(catalog_service.load())
    return SessionContext(
        catalog_service=catalog_service,
        activity_feed=ActivityFeedService(client=feed_client),
        calculator=BudgetCalculator(),
        activity=ActivityInputs(steps=0),
    )


@pytest.fixture
def container(settings: Settings, session: SessionContext) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session=session,
        close_resources=close_resources,
    )
