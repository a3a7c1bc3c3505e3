"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    dataset_path: str | None = "fastfood.csv"
    dataset_url: str | None = None
    base_calorie_goal: int = 2200
    base_protein_goal: int = 150
    carb_goal: int = 200
    default_steps: float = 6500
    activity_feed_latency_seconds: float = 1.5
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
