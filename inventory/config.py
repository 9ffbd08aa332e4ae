"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) Fallback to a local sqlite file next to the working directory
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    return "sqlite:///./data.db"


def resolve_port(default: int = 3000) -> int:
    port_raw = os.getenv("PORT")
    try:
        return int(port_raw) if port_raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    DATABASE_URL: str = resolve_database_url()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Development server only; gunicorn takes its own bind address.
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = resolve_port()


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration (in-memory database unless overridden)."""

    DEBUG: bool = False
    TESTING: bool = True
    DATABASE_URL: str = "sqlite://"


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
