"""
Fixtures shared by every suite.

The fixture application is created once per session with the testing
settings. ``table_factory`` installs exact rows for a view so UI and
integration tests can assert on known contents. A failing browser test
leaves a screenshot under ``test-results/screenshots``.
"""

import os
from collections.abc import Generator

import pytest
from faker import Faker
from playwright.sync_api import Browser, BrowserContext, Page

# Must be set before the app package reads its settings
os.environ["FLASK_ENV"] = "testing"

from app import create_app
from app.catalog import VIEWS
from app.seed import clear_all, replace_records
from harness.pages.base_page import BasePage

fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """Fixture application on the testing database, shared by the session."""
    yield create_app("testing")


@pytest.fixture(scope="function")
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def clean_tables(app):
    """Empty every view and saved filter around the test."""
    with app.app_context():
        clear_all()
    yield app
    with app.app_context():
        clear_all()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def table_factory(app, clean_tables):
    """
    Replace the rows of a view.

    Columns a row leaves out get a generated name so every cell is filled.

    Example:
        def test_something(table_factory):
            table_factory("shipments", [{"Status": "Shipped"}] * 5)
    """

    def _install(view: str, rows: list[dict[str, str]]) -> int:
        filled = []
        for cells in rows:
            row = {
                column: f"{fake.word().title()}-{fake.random_int(100, 999)}"
                for column in VIEWS[view].columns
            }
            row.update(cells)
            filled.append(row)
        with app.app_context():
            return replace_records(view, filled)

    return _install


@pytest.fixture
def fixture_credentials(app) -> dict[str, str]:
    return {
        "username": app.config["FIXTURE_USERNAME"],
        "password": app.config["FIXTURE_PASSWORD"],
    }


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_context_args():
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict) -> Generator[BrowserContext, None, None]:
    """Fresh context per test so sign-in cookies never leak between tests."""
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Save a screenshot when a test that used a browser page fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call" or not report.failed:
        return
    page = item.funcargs.get("page")
    if page is None:
        return
    try:
        path = BasePage(page, "").take_screenshot(item.name)
        print(f"\nScreenshot saved: {path}")
    except Exception as exc:  # pragma: no cover - best effort logging
        print(f"\nFailed to capture screenshot: {exc}")
