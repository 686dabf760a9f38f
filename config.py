"""
Settings for the local fixture application.

The fixture application stands in for the deployed site so the harness
can be exercised end to end on a developer machine. Every value can be
overridden from the environment.
"""

import os
from pathlib import Path

INSTANCE_DIR = Path(__file__).resolve().parent / "instance"


def _sqlite_uri(filename: str, **params: str) -> str:
    query = "&".join(f"{key}={value}" for key, value in params.items())
    return f"sqlite:///{INSTANCE_DIR / filename}" + (f"?{query}" if query else "")


class Config:
    """Settings shared by every fixture environment."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "fixture-secret-not-for-deployment")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_DATABASE_URI: str = os.environ.get("DATABASE_URL", _sqlite_uri("tables.db"))

    # Bearer issued at sign-in and sent by the page with every /filter call
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRY_HOURS: int = int(os.environ.get("JWT_EXPIRY_HOURS", "8"))

    # The one account /login accepts. Kept apart from TEST_USERNAME and
    # TEST_PASSWORD, which only ever name an account on a real deployment.
    FIXTURE_USERNAME: str = os.environ.get("FIXTURE_USERNAME", "tester")
    FIXTURE_PASSWORD: str = os.environ.get("FIXTURE_PASSWORD", "Tester123!")

    # Table and summary redraw this long after a filter response arrives
    RENDER_DELAY_MS: int = int(os.environ.get("RENDER_DELAY_MS", "300"))

    # False makes /filter return every row regardless of the active filters
    APPLY_FILTERS: bool = True

    SEED_SAMPLE_DATA: bool = True


class DevelopmentConfig(Config):
    DEBUG: bool = True


class TestingConfig(Config):
    """Used by the integration and UI suites; starts with empty tables."""

    TESTING: bool = True

    # The UI suite serves the app from a background thread
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL", _sqlite_uri("test_tables.db", check_same_thread="False")
    )
    SQLALCHEMY_ENGINE_OPTIONS: dict = {"pool_pre_ping": True}

    RENDER_DELAY_MS: int = 200
    SEED_SAMPLE_DATA: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """Return the settings class for ``env`` (falls back to FLASK_ENV, then development)."""
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
