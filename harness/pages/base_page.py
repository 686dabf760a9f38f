"""
Shared page-object plumbing.

Every page object holds the Playwright page and the application root;
paths handed to :meth:`BasePage.navigate_to` are appended to that root.
"""

import os
import re

from playwright.sync_api import Page, expect

SCREENSHOT_DIR = "test-results/screenshots"


class BasePage:
    """
    Common base for the login, main and table-view pages.

    Attributes:
        page: Browser tab the page object drives.
        base_url: Application root without a trailing slash.
    """

    def __init__(self, page: Page, base_url: str):
        self.page = page
        self.base_url = base_url.rstrip("/")

    def navigate_to(self, path: str = "") -> None:
        """Open ``path`` under the application root."""
        self.page.goto(f"{self.base_url}{path}")

    def wait_for_page_load(self) -> None:
        """Block until the tab has had no network traffic for a moment."""
        self.page.wait_for_load_state("networkidle")

    def assert_url_contains(self, fragment: str) -> None:
        expect(self.page).to_have_url(re.compile(re.escape(fragment)))

    def title(self) -> str:
        return self.page.title()

    def take_screenshot(self, name: str) -> str:
        """
        Save a PNG of the tab under ``test-results/screenshots``.

        Args:
            name: File stem; path separators and ``::`` are replaced.

        Returns:
            Path of the written file.
        """
        os.makedirs(SCREENSHOT_DIR, exist_ok=True)
        stem = name.replace("/", "_").replace("::", "_")
        path = f"{SCREENSHOT_DIR}/{stem}.png"
        self.page.screenshot(path=path)
        return path
