"""
Label lookup for filter checkboxes.

Table views nest their checkboxes differently: some put the text in the
checkbox's parent, others one level further up. Strategies are tried in
order and the first non-blank text wins.
"""

from __future__ import annotations

from typing import NamedTuple

from playwright.sync_api import Locator

from harness.models import normalize_label


class LabelStrategy(NamedTuple):
    name: str
    script: str


LABEL_STRATEGIES: tuple[LabelStrategy, ...] = (
    LabelStrategy(
        "parent",
        "node => (node.parentElement && node.parentElement.innerText) || ''",
    ),
    LabelStrategy(
        "grandparent",
        "node => (node.parentElement && node.parentElement.parentElement"
        " && node.parentElement.parentElement.innerText) || ''",
    ),
)


def derive_label(
    checkbox: Locator,
    strategies: tuple[LabelStrategy, ...] = LABEL_STRATEGIES,
) -> str:
    """
    Return the normalized label text for ``checkbox``.

    Args:
        checkbox: Locator resolving to a single checkbox input.
        strategies: Ordered lookups to try.

    Returns:
        Normalized label, or an empty string when every strategy came back blank.
    """
    for strategy in strategies:
        text = checkbox.evaluate(strategy.script) or ""
        if text.strip():
            return normalize_label(text)
    return ""
