"""
Fixtures for UI tests against the fixture application.

The application is served from a daemon thread for the whole session.
Page objects use the ``fast`` harness budgets, which suit its short
render delay.
"""

import threading
import time
from collections.abc import Callable, Generator

import pytest
import requests
from playwright.sync_api import Page

from harness.config import FastConfig
from harness.pages.login_page import LoginPage
from harness.pages.table_view_page import TableViewPage
from harness.views import TABLE_VIEWS

LIVE_SERVER_HOST = "127.0.0.1"
LIVE_SERVER_PORT = 5002
STARTUP_TIMEOUT_S = 10


def _wait_until_healthy(base_url: str) -> None:
    deadline = time.time() + STARTUP_TIMEOUT_S
    while time.time() < deadline:
        try:
            if requests.get(f"{base_url}/api/health", timeout=1).status_code == 200:
                return
        except requests.RequestException:
            pass
        time.sleep(0.1)
    raise RuntimeError(f"Fixture server at {base_url} not healthy after {STARTUP_TIMEOUT_S}s")


@pytest.fixture(scope="session")
def live_server(app) -> Generator[str, None, None]:
    """Serve the fixture application and yield its base URL."""
    threading.Thread(
        target=app.run,
        kwargs={
            "host": LIVE_SERVER_HOST,
            "port": LIVE_SERVER_PORT,
            "use_reloader": False,
            "threaded": True,
        },
        daemon=True,
    ).start()

    base_url = f"http://{LIVE_SERVER_HOST}:{LIVE_SERVER_PORT}"
    _wait_until_healthy(base_url)
    yield base_url


@pytest.fixture
def login_page(page: Page, live_server: str) -> LoginPage:
    return LoginPage(page, live_server, FastConfig)


@pytest.fixture
def signed_in_page(login_page: LoginPage, fixture_credentials, clean_tables) -> Page:
    """Tab signed in with the fixture account; no saved filters yet."""
    login_page.navigate()
    login_page.authenticate(fixture_credentials["username"], fixture_credentials["password"])
    return login_page.page


@pytest.fixture
def table_view_page(signed_in_page: Page, live_server: str) -> Callable[[str], TableViewPage]:
    """
    Build a table-view page object on the signed-in tab.

    Example:
        shipments = table_view_page("shipments")
    """

    def _make(view_id: str) -> TableViewPage:
        return TableViewPage(signed_in_page, live_server, TABLE_VIEWS[view_id], FastConfig)

    return _make


@pytest.fixture
def broken_filters(app):
    """Serve unfiltered rows for one test, whatever filters are active."""
    app.config["APPLY_FILTERS"] = False
    yield
    app.config["APPLY_FILTERS"] = True
