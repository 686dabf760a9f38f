"""HTTP side channel to the application's filter endpoint."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

RESET_PAYLOAD = {"value": ""}


def reset_filters(
    authorization: str,
    base_url: str,
    *,
    session: requests.Session | None = None,
    timeout: int = 10,
) -> requests.Response:
    """
    Reset the user's saved filters to the application defaults.

    Args:
        authorization: Value for the ``Authorization`` header, as captured
            from the page.
        base_url: Root URL of the application.
        session: Optional session to send the request with.
        timeout: Request timeout in seconds.

    Returns:
        The HTTP response.

    Raises:
        AssertionError: If the response status is not OK.
    """
    url = f"{base_url.rstrip('/')}/filter"
    headers = {
        "Authorization": authorization,
        "Content-Type": "application/json",
    }
    sender = session or requests
    logger.info("POST %s - resetting filters", url)
    response = sender.post(url, json=RESET_PAYLOAD, headers=headers, timeout=timeout)
    assert response.ok, (
        f"Reset filter via API call should be responsive, got {response.status_code}"
    )
    return response
