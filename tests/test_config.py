"""Tests for settings loading."""

from fastfit.config import Settings


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.base_calorie_goal == 2200
    assert settings.base_protein_goal == 150
    assert settings.carb_goal == 200
    assert settings.dataset_url is None


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("BASE_CALORIE_GOAL", "2500")
    monkeypatch.setenv("DATASET_URL", "https://data.test/menu.csv")

    settings = Settings(_env_file=None)

    assert settings.base_calorie_goal == 2500
    assert settings.dataset_url == "https://data.test/menu.csv"
