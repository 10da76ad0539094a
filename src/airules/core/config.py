# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from airules.core.constants import DEFAULT_TARGETS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AIRULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Sources and destination
    source_dir: Path = Path(".")
    dest_dir: Path = Path(".")

    # Generation
    default_targets: Annotated[list[str], NoDecode] = list(DEFAULT_TARGETS)
    include_skills: bool = True
    backup: bool = False

    @field_validator("default_targets", mode="before")
    @classmethod
    def _parse_default_targets(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v if isinstance(v, list) else []

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"


def get_settings() -> Settings:
    return Settings()
