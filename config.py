"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os


def _env_flag(name: str, default: str) -> bool:
    """Read a boolean flag such as ``"true"``/``"0"`` from the environment."""
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base configuration with default settings."""

    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Reported by the health endpoint
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "unknown")
    APP_VERSION: str = os.environ.get("APP_VERSION", "unknown")

    # Per-client request limit within a rolling window
    RATE_LIMIT_ENABLED: bool = _env_flag("RATE_LIMIT_ENABLED", "true")
    RATE_LIMIT_MAX_REQUESTS: int = int(os.environ.get("RATE_LIMIT_MAX_REQUESTS", "100"))
    RATE_LIMIT_WINDOW_SECONDS: float = float(os.environ.get("RATE_LIMIT_WINDOW_SECONDS", "900"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # Tests that exercise throttling enable it explicitly
    RATE_LIMIT_ENABLED: bool = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
