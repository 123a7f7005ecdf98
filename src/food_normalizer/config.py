"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Ingest settings loaded from environment variables."""

    input_file: Path = Path("input/openfoodfacts-products.jsonl.gz")
    output_dir: Path = Path("output")
    output_prefix: str = "openfoodfacts_to_eatnlift"
    chunk_size: int = Field(default=50000, gt=0)
    progress_every: int = Field(default=10000, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FOOD_NORMALIZER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
