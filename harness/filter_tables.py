"""
Filter-table synchronization and validation.

:class:`FilterTables` drives the checkbox filters shared by the assets,
loggers and shipments table views and checks what the table renders
afterwards. The application re-renders asynchronously, so every action is
followed by a bounded poll on the table summary text ("Showing ...")
which acts as the settlement signal.

Soft deadlines (summary lookup, summary change, table re-render) never
raise on their own. Correctness is asserted on the final state instead:
filter controls must appear, and the validated column must hold only the
expected value.

Key Concepts Demonstrated:
- Polling instead of event subscription
- One wait per click, so incremental count changes are observed
- Structural table read executed in the page
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from playwright.sync_api import Locator, Page

from harness.config import HarnessConfig, get_config
from harness.labels import derive_label
from harness.models import (
    NOT_LOADED,
    FilterOption,
    FilterSnapshot,
    ValidationOutcome,
    normalize_label,
)
from harness.polling import poll_with_budget

logger = logging.getLogger(__name__)

CHECKBOX_SELECTOR = 'input[type="checkbox"]'
# The pagination panel on every table view starts with this phrase
SUMMARY_SELECTOR = "text=Showing "

# Row 0 is the header row. Returns {success, failure, error}.
TABLE_READ_SCRIPT = """
([header, value]) => {
    const results = {success: 0, failure: 0, error: null};
    const rows = document.getElementsByTagName("tr");
    if (rows.length === 0) {
        results.error = "Table not found";
        return results;
    }
    const headers = document.getElementsByTagName("th");
    let headerIndex = -1;
    for (let i = 0; i < headers.length; i++) {
        if (headers[i].innerText === header) {
            headerIndex = i;
            break;
        }
    }
    if (headerIndex === -1) {
        results.error = "Header not found";
        return results;
    }
    for (let i = 1; i < rows.length; i++) {
        const cell = rows[i].children[headerIndex];
        if (cell && cell.innerText === value) {
            results.success += 1;
        } else {
            results.failure += 1;
        }
    }
    return results;
}
"""


class FilterTables:
    """
    Filter and table helpers for a single page.

    Attributes:
        page: Playwright page showing one of the table views.
        config: Harness configuration supplying the polling budgets.
    """

    def __init__(self, page: Page, config: type[HarnessConfig] | None = None):
        self.page = page
        self.config = config or get_config()

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def checkboxes(self) -> Locator:
        """Every filter checkbox on the page."""
        return self.page.locator(CHECKBOX_SELECTOR)

    # -------------------------------------------------------------------------
    # Table summary
    # -------------------------------------------------------------------------

    def _summary_text(self) -> str:
        # The parent holds the whole line, including the count that changes.
        # all_inner_texts does not auto-wait, so a summary that re-renders
        # away mid-read comes back empty instead of blocking.
        texts = self.page.locator(SUMMARY_SELECTOR).locator("..").all_inner_texts()
        return texts[0] if texts and texts[0] else NOT_LOADED

    def read_summary(self) -> str:
        """
        Read the table summary text used as a settlement token.

        Returns:
            The summary text, or ``NOT_LOADED`` if it never appeared
            within the summary budget.
        """
        token = NOT_LOADED

        def _loaded() -> bool:
            nonlocal token
            token = self._summary_text()
            return token != NOT_LOADED

        if not poll_with_budget(_loaded, self.config.SUMMARY_BUDGET, self.page.wait_for_timeout):
            logger.warning("Table summary not found after %dms", self.config.SUMMARY_BUDGET.timeout_ms)
        return token

    def await_change(self, baseline: str) -> bool:
        """
        Wait for the summary text to differ from ``baseline``.

        An unchanged summary is not an error: a filter may leave the row
        count as it was. Callers assert on the resulting state instead.

        Returns:
            True if a change was observed before the change budget ran out.
        """
        changed = poll_with_budget(
            lambda: self.read_summary() != baseline,
            self.config.CHANGE_BUDGET,
            self.page.wait_for_timeout,
        )
        if not changed:
            logger.debug("Summary still %r, proceeding", baseline)
        return changed

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def wait_for_filters(self) -> int:
        """
        Block until at least one filter checkbox is rendered.

        Returns:
            Number of checkboxes found.

        Raises:
            AssertionError: If no checkbox appeared within the filter budget.
        """
        count = 0

        def _populated() -> bool:
            nonlocal count
            count = self.checkboxes.count()
            return count > 0

        poll_with_budget(_populated, self.config.FILTER_BUDGET, self.page.wait_for_timeout)
        assert count > 0, "Filter options should load"
        return count

    def _toggle(self, checkbox: Locator, label: str) -> None:
        baseline = self.read_summary()
        logger.info("Toggling filter %r", label)
        checkbox.click()
        self.await_change(baseline)

    def disable_all(self) -> None:
        """Uncheck every checked filter, waiting for the table after each click."""
        self.wait_for_filters()

        checkboxes = self.checkboxes
        index = 0
        while index < checkboxes.count():
            checkbox = checkboxes.nth(index)
            if checkbox.is_checked():
                self._toggle(checkbox, derive_label(checkbox))
            index += 1

    def enable(self, labels: Iterable[str]) -> None:
        """
        Check the filters whose labels are in ``labels``.

        Matching is case-insensitive. Filters that are already checked are
        left alone, so calling this twice leaves the same end state.

        Args:
            labels: Filter labels to enable. A single string is one label.
        """
        if isinstance(labels, str):
            labels = [labels]
        wanted = {normalize_label(label) for label in labels}
        if not wanted:
            return

        self.wait_for_filters()

        checkboxes = self.checkboxes
        index = 0
        while index < checkboxes.count():
            checkbox = checkboxes.nth(index)
            label = derive_label(checkbox)
            if label in wanted and not checkbox.is_checked():
                self._toggle(checkbox, label)
            index += 1

    def snapshot(self) -> FilterSnapshot:
        """Read every filter checkbox once and partition by checked state."""
        checkboxes = self.checkboxes
        options = []
        for index in range(checkboxes.count()):
            checkbox = checkboxes.nth(index)
            options.append(FilterOption(derive_label(checkbox), checkbox.is_checked()))
        return FilterSnapshot.from_options(options)

    # -------------------------------------------------------------------------
    # Table validation
    # -------------------------------------------------------------------------

    def read_table(self, header: str, value: str) -> ValidationOutcome:
        """Run one structural read of the table in the page."""
        result = self.page.evaluate(TABLE_READ_SCRIPT, [header, value])
        return ValidationOutcome.from_page_result(result)

    def validate(self, header: str, value: str) -> ValidationOutcome:
        """
        Assert every data row holds ``value`` under ``header``.

        The read is retried while the table looks stale (no matches, any
        mismatch, or a structural error) until the table budget runs out.

        Args:
            header: Exact header text of the column to check.
            value: Exact cell text expected in every row.

        Returns:
            The final outcome.

        Raises:
            AssertionError: If the header or table is missing, the table is
                empty, or any row holds a different value.
        """
        outcome = ValidationOutcome()

        def _settled() -> bool:
            nonlocal outcome
            outcome = self.read_table(header, value)
            return outcome.settled

        if not poll_with_budget(_settled, self.config.TABLE_BUDGET, self.page.wait_for_timeout):
            logger.warning(
                "Table did not settle on %r=%r: success=%d failure=%d error=%s",
                header, value, outcome.success, outcome.failure, outcome.error,
            )

        outcome.assert_valid(header, value)
        return outcome
