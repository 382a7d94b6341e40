"""Application configuration using Pydantic Settings"""

from typing import Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from keyword arguments, environment variables or .env"""

    # Application
    app_name: str = "Taskboard API"
    environment: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Project internal id ("{prefix}-{id}-{suffix}")
    project_prefix: Optional[str] = Field(
        None, validation_alias=AliasChoices("project.prefix", "project_prefix")
    )
    project_suffix: Optional[int] = Field(
        None, validation_alias=AliasChoices("project.suffix", "project_suffix")
    )

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Sample data
    seed_sample_data: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list"""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def internal_id_enabled(self) -> bool:
        """Internal ids are generated only when both prefix and suffix are configured"""
        return self.project_prefix is not None and self.project_suffix is not None
