"""Application configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from patchwork.types import Color


class Settings(BaseSettings):
    """Settings loaded from environment variables (PATCHWORK_*) and .env.

    Priority: environment variables > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="PATCHWORK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Surface
    surface_width: int = 800
    surface_height: int = 600
    background_color: str = "#FFFFFF"  # Hex color

    # Output
    output_path: str = "scene.png"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # JSON lines instead of human-readable output
    log_file: str | None = None

    @field_validator("surface_width", "surface_height")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("surface dimensions must be positive")
        return value

    @field_validator("background_color")
    @classmethod
    def _hex_color(cls, value: str) -> str:
        Color.from_hex(value)
        return value

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping().get(self.log_level.upper(), logging.INFO)


settings = Settings()
