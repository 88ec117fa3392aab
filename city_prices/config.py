"""Application configuration using Pydantic Settings.

This module centralizes all configuration values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Application =====
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "API monitoreo de precios")
    API_VERSION: str = os.getenv("API_VERSION", "1.0.0")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # ===== Storage =====
    CITIES_STORAGE_BACKEND: str = os.getenv("CITIES_STORAGE_BACKEND", "file")  # "file" or "memory"
    CITIES_DATA_FILE: str = os.getenv("CITIES_DATA_FILE", "data/cities.json")
    CITIES_BACKUP_DIR: Optional[str] = os.getenv("CITIES_BACKUP_DIR") or None
    CITIES_MAX_BACKUPS: int = int(os.getenv("CITIES_MAX_BACKUPS", "20"))

    # ===== Web =====
    PUBLIC_DIR: Optional[str] = os.getenv("PUBLIC_DIR") or None
    CORS_ALLOW_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
