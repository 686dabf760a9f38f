"""
Table View Page Object.

One page object serves every filterable table view. The view-specific
parts (route, default filters, validated column) come from a
:class:`~harness.views.TableView` descriptor; filter and table behaviour
is delegated to :class:`~harness.filter_tables.FilterTables`.

Key Concepts Demonstrated:
- Parameterized page object instead of one class per view
- Out-of-band reset through the API, verified through the UI
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from playwright.sync_api import Locator, Page

from harness.api import reset_filters
from harness.auth_capture import AuthorizationCapture
from harness.config import HarnessConfig, get_config
from harness.filter_tables import FilterTables
from harness.models import FilterSnapshot, check_array_equality, normalize_label
from harness.pages.base_page import BasePage
from harness.views import TableView

logger = logging.getLogger(__name__)


class TableViewPage(BasePage):
    """
    Page object for a filterable table view.

    Attributes:
        view: Descriptor of the view this page drives.
        filters: Filter and table helpers bound to the same page.
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        view: TableView,
        config: type[HarnessConfig] | None = None,
    ):
        """
        Initialize TableViewPage.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
            view: Table view descriptor.
            config: Harness configuration supplying polling budgets.
        """
        super().__init__(page, base_url)
        self.view = view
        self.config = config or get_config()
        self.filters = FilterTables(page, self.config)

    @property
    def default_filters(self) -> tuple[str, ...]:
        return self.view.default_filters

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self) -> "TableViewPage":
        """Navigate to the view in its default (non-table) layout."""
        self.navigate_to(self.view.path)
        return self

    def navigate_to_table_view(self) -> "TableViewPage":
        """
        Navigate straight to the table layout of the view.

        Returns once the table body is present and the DOM has loaded.
        """
        self.navigate_to(self.view.table_path)
        self.page.wait_for_selector(f".{self.view.table_class}", state="attached")
        self.page.wait_for_load_state("domcontentloaded")
        return self

    @property
    def view_switch(self) -> Locator:
        return self.page.locator(self.view.view_switch_selector)

    def switch_to_table_view(self) -> "TableViewPage":
        """Switch the current view to its table layout using the toggle."""
        self.view_switch.click()
        self.page.wait_for_selector(f".{self.view.table_class}", state="attached")
        return self

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def change_filter(self, options: Iterable[str], negate_existing: bool = False) -> None:
        """
        Enable ``options``, optionally clearing every active filter first.

        Args:
            options: Filter labels to enable.
            negate_existing: Uncheck all filters before enabling.
        """
        options = list(options)
        logger.info("Changing %s filters: enable %s, negate existing=%s", self.view.view_id, options, negate_existing)
        if negate_existing:
            self.filters.disable_all()
        self.filters.enable(options)

    def active_filters(self) -> FilterSnapshot:
        return self.filters.snapshot()

    def assert_default_filters(self) -> None:
        """Assert the active filters are exactly the view's defaults, in any order."""
        active = list(self.active_filters().active)
        expected = [normalize_label(label) for label in self.default_filters]
        assert check_array_equality(active, expected), (
            f"Filters should be returned to their original state: "
            f"expected {sorted(expected)}, got {sorted(active)}"
        )

    def capture_authorization(self) -> str:
        """
        Reload the table view and capture the bearer sent with its filter request.

        Returns:
            The authorization header value.
        """
        capture = AuthorizationCapture()
        with capture.listening(self.page):
            self.navigate_to_table_view()
            return capture.wait(self.page, self.config.AUTH_BUDGET)

    def reset_filters_by_api(self, authorization: str | None = None) -> FilterSnapshot:
        """
        Reset saved filters through the API and read them back from the UI.

        The page does not observe the out-of-band reset, so the table view
        is reloaded before the snapshot is taken.

        Args:
            authorization: Bearer from the page's own requests. Captured
                by reloading the table view when omitted.

        Returns:
            Snapshot of the filters after the reload.
        """
        if authorization is None:
            authorization = self.capture_authorization()
        reset_filters(authorization, self.base_url, timeout=self.config.REQUEST_TIMEOUT)
        self.navigate_to_table_view()
        self.filters.wait_for_filters()
        return self.active_filters()

    # -------------------------------------------------------------------------
    # Table
    # -------------------------------------------------------------------------

    def validate_table(self, header: str, value: str) -> None:
        """Assert every row holds ``value`` under ``header``."""
        self.filters.validate(header, value)

    def validate_default_column(self, value: str) -> None:
        """Assert every row holds ``value`` in the view's validated column."""
        self.validate_table(self.view.validated_column, value)
