"""Configuration management for Tool Rental."""

import os
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    model_config = ConfigDict(
        env_file=".env" if os.getenv("ENVIRONMENT") != "test" else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow"
    )

    # Application
    app_name: str = "Tool Rental"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False, env="DEBUG")
    environment: str = Field(default="development", env="ENVIRONMENT")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # Server
    host: str = Field(default="0.0.0.0", env="HOST")
    port: int = Field(default=8000, env="PORT")

    # Checkout
    max_rental_days: int = Field(
        default=3650,
        env="MAX_RENTAL_DAYS",
        description="Upper bound on rental_days accepted by checkout",
    )

    # CORS Configuration
    cors_allowed_origins: str = Field(
        default="",
        env="CORS_ALLOWED_ORIGINS",
        description="Comma-separated list of allowed CORS origins. Defaults to ['*'] in dev.",
    )

    @field_validator("max_rental_days")
    @classmethod
    def validate_max_rental_days(cls, v):
        if v < 1:
            raise ValueError("max_rental_days must be 1 or greater")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v).upper()

    def get_cors_origins(self) -> List[str]:
        """Parse CORS allowed origins from config."""
        if self.cors_allowed_origins:
            return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]
        # Default: allow all outside production
        if self.environment != "production":
            return ["*"]
        return []


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
