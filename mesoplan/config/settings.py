"""Application configuration settings."""
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Settings read from ``MESOPLAN_*`` environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="MESOPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "mesoplan"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Static data shipped with the package
    exercise_catalog_path: Path = PACKAGE_ROOT / "data" / "exercises.yaml"
    engine_config_path: Path = PACKAGE_ROOT / "config" / "engine_config.yaml"

    # Persisted profile/program/active-state document
    program_store_path: Path = Path("program_store.json")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("program_store_path")
    @classmethod
    def expand_store_path(cls, v: Path) -> Path:
        return v.expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
