"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.barcode.renderer import RenderGeometry


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["dev", "staging", "prod"] = "dev"

    # Validation
    strict_checksum: bool = Field(
        False, description="Reject codes whose check digit does not match"
    )

    # Storage
    store_path: Path = Field(
        Path.home() / ".ean13" / "barcode.json",
        description="JSON file holding the stored barcode",
    )

    # Rendering
    render_module_width: int = Field(3, description="Width of one module in pixels")
    render_bar_height: int = Field(140, description="Height of guard bars in pixels")
    render_full_height_guards: bool = True
    render_guard_extension: int = Field(20, description="Extra height of guard bars")
    render_show_caption: bool = False
    render_caption_height: int = 30

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "prod"

    def render_geometry(self) -> RenderGeometry:
        """Build the default render geometry from settings."""
        return RenderGeometry(
            module_width=self.render_module_width,
            bar_height=self.render_bar_height,
            full_height_guards=self.render_full_height_guards,
            guard_extension=self.render_guard_extension,
            show_caption=self.render_show_caption,
            caption_height=self.render_caption_height,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
