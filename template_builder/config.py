"""
Template Builder Settings
=========================

Application configuration loaded from environment variables.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration (env prefix: TEMPLATE_BUILDER_)."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_BUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "template-builder"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # New documents
    default_template_name: str = "Untitled Template"
    default_canvas_width: str = "600px"
    default_canvas_height: str = "auto"

    # Section selector offers 1..12 columns
    max_section_columns: int = 12

    # Export
    export_extension: str = ".html"


# Global settings instance
settings = Settings()
