"""
Designer Configuration

Uses pydantic-settings for environment variable loading with validation.
Engine limits (history depth, zoom bounds) and session defaults live here.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from volta.core.constants import DEFAULT_ZOOM, MAX_HISTORY, ZOOM_MAX, ZOOM_MIN


class Settings(BaseSettings):
    """
    Designer settings loaded from environment variables.

    Environment variables can be set directly or via .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="VOLTA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Runtime environment"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level applied by configure_logging()"
    )

    # ==========================================================================
    # History
    # ==========================================================================
    max_history: int = Field(
        default=MAX_HISTORY,
        ge=1,
        description="Maximum number of undo steps kept per session"
    )

    # ==========================================================================
    # Canvas
    # ==========================================================================
    zoom_min: int = Field(
        default=ZOOM_MIN,
        ge=1,
        description="Lowest zoom percentage"
    )
    zoom_max: int = Field(
        default=ZOOM_MAX,
        description="Highest zoom percentage"
    )
    default_zoom: int = Field(
        default=DEFAULT_ZOOM,
        description="Zoom percentage for a freshly opened session"
    )
    grid_enabled_default: bool = Field(
        default=True,
        description="Whether the canvas grid is shown when a session opens"
    )
    snap_to_grid_default: bool = Field(
        default=True,
        description="Whether drops snap to the grid when a session opens"
    )

    # ==========================================================================
    # Layout
    # ==========================================================================
    default_layout_template: str = Field(
        default="full-width",
        description="Catalog template used when a session opens without a document"
    )

    @model_validator(mode="after")
    def check_zoom_bounds(self) -> "Settings":
        if not self.zoom_min <= self.default_zoom <= self.zoom_max:
            raise ValueError(
                f"default_zoom ({self.default_zoom}) must be within "
                f"[{self.zoom_min}, {self.zoom_max}]"
            )
        return self

    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @computed_field
    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
