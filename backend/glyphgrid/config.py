"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    glyphgrid_env: str = "development"
    glyphgrid_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Output size
    default_cols: int = 100
    max_cols: int = 400
    max_rows: int = 1000

    # Upload guard
    max_image_bytes: int = 10 * 1024 * 1024

    # Preparation
    resample_filter: str = "lanczos"
    cell_aspect: float = 2.0
    default_ramp: str = "standard"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
