"""Main (landing) page object."""

from harness.pages.base_page import BasePage


class MainPage(BasePage):
    """Page object for the application's landing page."""

    URL_PATH = "/"

    def navigate(self) -> "MainPage":
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        return self
