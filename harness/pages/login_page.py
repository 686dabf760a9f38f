"""Login page object for authenticating against the application."""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, Page

from harness.config import HarnessConfig, get_config
from harness.pages.base_page import BasePage
from harness.polling import poll_with_budget

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """
    Page object for the sign-in page.

    Provides methods for:
    - Navigating to the sign-in form
    - Authenticating with environment-provided credentials
    """

    URL_PATH = "/login"
    EXPECTED_TITLE = "Sign in"

    def __init__(self, page: Page, base_url: str, config: type[HarnessConfig] | None = None):
        """
        Initialize LoginPage.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
            config: Harness configuration supplying the credentials.
        """
        super().__init__(page, base_url)
        self.config = config or get_config()

    def navigate(self) -> "LoginPage":
        """
        Navigate to the login page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        return self

    @property
    def username_input(self) -> Locator:
        return self.page.locator('input[name="username"]')

    @property
    def password_input(self) -> Locator:
        return self.page.locator('input[name="password"]')

    @property
    def submit_button(self) -> Locator:
        return self.page.locator('button[type="submit"]')

    @classmethod
    def is_sign_in_title(cls, title: str) -> bool:
        """True when ``title`` is the sign-in title, ignoring case."""
        return title.casefold() == cls.EXPECTED_TITLE.casefold()

    def authenticate(self, username: str | None = None, password: str | None = None) -> bool:
        """
        Sign in unless the session is already authenticated.

        Credentials default to TEST_USERNAME and TEST_PASSWORD. They are
        only read when the sign-in form is actually showing.

        Args:
            username: Username to enter.
            password: Password to enter.

        Returns:
            True if the form was submitted, False if already signed in.

        Raises:
            ConfigurationError: If credentials are needed but not configured.
            AssertionError: If the title did not change after submitting.
        """
        self.wait_for_page_load()
        login_title = self.title()

        if not self.is_sign_in_title(login_title):
            logger.info("Already logged in (title %r)", login_title)
            return False

        if username is None or password is None:
            username, password = self.config.credentials()

        self.username_input.fill(username)
        self.password_input.fill(password)
        self.submit_button.click()

        # Title change is the login success signal
        self.page.wait_for_load_state("domcontentloaded")
        new_title = login_title

        def _title_changed() -> bool:
            nonlocal new_title
            new_title = self.title()
            return new_title != login_title

        poll_with_budget(_title_changed, self.config.TITLE_BUDGET, self.page.wait_for_timeout)
        assert new_title != login_title, "Login should be successful"
        logger.info("Logged in as %s", username)
        return True
