"""Tests for container wiring."""

import asyncio

from fastfit.adapters.dataset_source import FileDatasetSource, HttpxDatasetSource
from fastfit.config import Settings
from fastfit.containers import build_container
from tests.conftest import SAMPLE_CSV


def test_build_container_loads_file_dataset(tmp_path) -> None:
    path = tmp_path / "fastfood.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    settings = Settings(
        dataset_path=str(path),
        base_calorie_goal=2000,
        activity_feed_latency_seconds=0,
    )

    container = build_container(settings)
    session = container.session

    assert isinstance(session.catalog_service.source, FileDatasetSource)
    assert session.catalog_service.is_loading
    catalog = asyncio.run(session.catalog_service.load())
    assert catalog.source == "primary"
    assert session.activity.steps == 6500
    assert session.budget().total_calorie_goal == 2000 + 260
    asyncio.run(container.close_resources())


def test_build_container_prefers_dataset_url() -> None:
    settings = Settings(dataset_url="https://data.test/fastfood.csv")

    container = build_container(settings)

    assert isinstance(container.session.catalog_service.source, HttpxDatasetSource)
    asyncio.run(container.close_resources())


def test_build_container_without_source_uses_fallback(settings) -> None:
    container = build_container(settings)

    catalog = asyncio.run(container.session.catalog_service.load())

    assert catalog.source == "fallback"
    asyncio.run(container.close_resources())
