"""
Harness configuration module.

Configuration classes for the filter-table harness. Values are loaded
from environment variables with sensible defaults, one class per
environment, resolved through :func:`get_config`.

Polling budgets are expressed in ticks rather than seconds: each tick is
one ``wait_for_timeout(interval_ms)`` on the page, so the browser event
loop keeps running while the harness waits.
"""

from __future__ import annotations

import os

from harness.polling import PollingBudget


class ConfigurationError(RuntimeError):
    """Raised when required harness configuration is missing."""


class HarnessConfig:
    """Base configuration targeting a deployed application."""

    BASE_URL: str = os.environ.get("TEST_BASE_URL", "https://test.site")

    # Summary text lookup: 250ms x 10 = 2.5 seconds
    SUMMARY_BUDGET = PollingBudget(interval_ms=250, max_ticks=10)
    # Summary change after a click: 100ms x 20 = 2 seconds
    CHANGE_BUDGET = PollingBudget(interval_ms=100, max_ticks=20)
    # Filter checkboxes appearing: 250ms x 8 = 2 seconds
    FILTER_BUDGET = PollingBudget(interval_ms=250, max_ticks=8)
    # Full table re-render: 1000ms x 10 = 10 seconds
    TABLE_BUDGET = PollingBudget(interval_ms=1000, max_ticks=10)
    # Bearer capture from an outgoing filter request: 250ms x 40 = 10 seconds
    AUTH_BUDGET = PollingBudget(interval_ms=250, max_ticks=40)
    # Page title change after signing in: 250ms x 20 = 5 seconds
    TITLE_BUDGET = PollingBudget(interval_ms=250, max_ticks=20)

    # Seconds, for the requests side channel
    REQUEST_TIMEOUT: int = 10

    @staticmethod
    def credentials() -> tuple[str, str]:
        """
        Read login credentials from the environment.

        Returns:
            Tuple of (username, password).

        Raises:
            ConfigurationError: If TEST_USERNAME or TEST_PASSWORD is unset or blank.
        """
        username = os.environ.get("TEST_USERNAME", "").strip()
        password = os.environ.get("TEST_PASSWORD", "")
        if not username or not password:
            raise ConfigurationError(
                "Please provide TEST_USERNAME and TEST_PASSWORD environment variables"
            )
        return username, password


class FastConfig(HarnessConfig):
    """Short budgets for the local fixture application."""

    BASE_URL: str = os.environ.get("TEST_BASE_URL", "http://127.0.0.1:5002")

    SUMMARY_BUDGET = PollingBudget(interval_ms=50, max_ticks=20)
    CHANGE_BUDGET = PollingBudget(interval_ms=50, max_ticks=30)
    FILTER_BUDGET = PollingBudget(interval_ms=100, max_ticks=20)
    TABLE_BUDGET = PollingBudget(interval_ms=250, max_ticks=8)
    AUTH_BUDGET = PollingBudget(interval_ms=100, max_ticks=30)
    TITLE_BUDGET = PollingBudget(interval_ms=100, max_ticks=30)

    REQUEST_TIMEOUT: int = 5


# Configuration mapping for easy access
config = {
    "default": HarnessConfig,
    "remote": HarnessConfig,
    "fast": FastConfig,
}


def get_config(env: str | None = None) -> type[HarnessConfig]:
    """
    Get the harness configuration class for the specified environment.

    Args:
        env: Environment name (remote, fast).
             If None, uses HARNESS_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("HARNESS_ENV", "default")
    return config.get(env, config["default"])
