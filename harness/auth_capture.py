"""
Capture the bearer credential the application sends with its filter requests.

The reset endpoint needs the same ``Authorization`` header the page uses,
and the only place to read it is an outgoing request. A ``request``
listener writes the header once; the test reads it after polling the
page. The handoff goes through a one-shot :class:`threading.Event` so the
write is visible to the reader as soon as the flag is.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Generator
from contextlib import contextmanager

from playwright.sync_api import Page, Request

from harness.polling import PollingBudget, poll_with_budget

logger = logging.getLogger(__name__)


class AuthorizationCapture:
    """
    One-shot cell holding the first authorization header seen on a matching request.

    Attributes:
        url_fragment: Substring a request URL must contain to be inspected.
    """

    def __init__(self, url_fragment: str = "filter"):
        self.url_fragment = url_fragment
        self._captured = threading.Event()
        self._value = ""

    @property
    def value(self) -> str:
        """Captured header, or an empty string before capture."""
        return self._value if self._captured.is_set() else ""

    def is_set(self) -> bool:
        return self._captured.is_set()

    def offer(self, url: str, headers: dict[str, str]) -> bool:
        """
        Store the authorization header from a request if none is held yet.

        Returns:
            True if this call set the value.
        """
        if self._captured.is_set() or self.url_fragment not in url:
            return False
        authorization = headers.get("authorization", "")
        if not authorization:
            return False
        self._value = authorization
        self._captured.set()
        logger.info("Captured authorization header from %s", url)
        return True

    def _on_request(self, request: Request) -> None:
        if self._captured.is_set() or self.url_fragment not in request.url:
            return
        self.offer(request.url, request.all_headers())

    def attach(self, page: Page) -> None:
        page.on("request", self._on_request)

    def detach(self, page: Page) -> None:
        page.remove_listener("request", self._on_request)

    @contextmanager
    def listening(self, page: Page) -> Generator["AuthorizationCapture", None, None]:
        """Attach to ``page`` for the duration of the block."""
        self.attach(page)
        try:
            yield self
        finally:
            self.detach(page)

    def wait(self, page: Page, budget: PollingBudget) -> str:
        """
        Poll until a header has been captured.

        Waiting goes through ``page.wait_for_timeout`` so request events
        keep being dispatched.

        Returns:
            The captured authorization header.

        Raises:
            AssertionError: If nothing was captured within the budget.
        """
        poll_with_budget(self.is_set, budget, page.wait_for_timeout)
        assert self.is_set(), "Authorization bearer acquired from filter request header"
        return self._value
