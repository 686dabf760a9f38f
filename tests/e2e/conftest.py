"""
Fixtures for end-to-end tests against a deployed application.

The suite only runs when TEST_BASE_URL points at a running deployment and
TEST_USERNAME / TEST_PASSWORD hold a valid account. Budgets come from the
``remote`` harness configuration.
"""

from __future__ import annotations

import os
from collections.abc import Callable

import pytest
from playwright.sync_api import Page

from harness.config import ConfigurationError, HarnessConfig, get_config
from harness.pages.login_page import LoginPage
from harness.pages.main_page import MainPage
from harness.pages.table_view_page import TableViewPage
from harness.views import get_view


@pytest.fixture(scope="session")
def remote_config() -> type[HarnessConfig]:
    if not os.getenv("TEST_BASE_URL"):
        pytest.skip("TEST_BASE_URL is not set; E2E tests need a deployed application")
    config = get_config("remote")
    try:
        config.credentials()
    except ConfigurationError as exc:
        pytest.skip(str(exc))
    return config


@pytest.fixture(scope="session")
def remote_url(remote_config: type[HarnessConfig]) -> str:
    return remote_config.BASE_URL.rstrip("/")


@pytest.fixture
def authenticated_page(page: Page, remote_url: str, remote_config) -> Page:
    """Open the application root and sign in if the sign-in page shows."""
    MainPage(page, remote_url).navigate()
    LoginPage(page, remote_url, remote_config).authenticate()
    return page


@pytest.fixture
def remote_table_view(
    authenticated_page: Page, remote_url: str, remote_config
) -> Callable[[str], TableViewPage]:
    def _make(view_id: str) -> TableViewPage:
        return TableViewPage(authenticated_page, remote_url, get_view(view_id), remote_config)

    return _make
