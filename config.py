"""
Test suite configuration module.

This module defines configuration classes for the environments the
suite runs in (local development, CI). Values are loaded from
environment variables with defaults pointing at the public targets.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    # Playwright documentation site (UI navigation tests)
    BASE_URL: str = os.environ.get("BASE_URL", "https://playwright.dev")

    # TodoMVC demo application (UI + localStorage tests)
    TODO_APP_URL: str = os.environ.get(
        "TODO_APP_URL", "https://demo.playwright.dev/todomvc"
    )

    # JSONPlaceholder REST API
    API_BASE_URL: str = os.environ.get(
        "API_BASE_URL", "https://jsonplaceholder.typicode.com"
    )

    # localStorage key the TodoMVC app persists into
    STORAGE_KEY: str = "react-todos"

    # Timeouts in milliseconds
    DEFAULT_TIMEOUT: int = 5000
    PAGE_LOAD_TIMEOUT: int = 30000

    # Seconds allowed for the reachability probe of a live target
    REACHABILITY_TIMEOUT: int = 5

    VIEWPORT: dict = {"width": 1280, "height": 720}

    SCREENSHOT_DIR: Path = BASE_DIR / "test-results" / "screenshots"


class DevelopmentConfig(Config):
    """Local development configuration."""

    DEBUG: bool = True


class CIConfig(Config):
    """Continuous integration configuration."""

    DEBUG: bool = False

    # Shared CI runners are slower than a workstation
    DEFAULT_TIMEOUT: int = 10000
    PAGE_LOAD_TIMEOUT: int = 60000
    REACHABILITY_TIMEOUT: int = 15


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "ci": CIConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, ci).
             If None, uses the TEST_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TEST_ENV", "development")
    return config.get(env, config["default"])
