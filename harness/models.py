"""
Value types observed from the table pages.

Everything here is rebuilt from the live DOM on each read and never
mutated afterwards. Nothing is cached between polls.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# Settlement token returned while the summary region is absent
NOT_LOADED = "Not loaded yet"

TABLE_NOT_FOUND = "Table not found"
HEADER_NOT_FOUND = "Header not found"


def normalize_label(text: str) -> str:
    """Canonical form used to compare filter labels."""
    return text.strip().casefold()


@dataclass(frozen=True)
class FilterOption:
    """A single filter checkbox: its normalized label and checked state."""

    label: str
    checked: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "label", normalize_label(self.label))


@dataclass(frozen=True)
class FilterSnapshot:
    """
    Partition of the known filter options into active and inactive labels.

    Build it with :meth:`from_options`; the partition and the ``states``
    lookup are derived from the same data and always agree.

    Attributes:
        active: Labels of checked options, in page order.
        inactive: Labels of unchecked options, in page order.
        states: Read-only mapping of label to checked state.
    """

    active: tuple[str, ...] = ()
    inactive: tuple[str, ...] = ()
    states: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_options(cls, options: Iterable[FilterOption]) -> "FilterSnapshot":
        """
        Build a snapshot from options read off the page.

        When the same label is read more than once, the last read wins.
        """
        states: dict[str, bool] = {}
        for option in options:
            # Re-insert so page order follows the winning read
            states.pop(option.label, None)
            states[option.label] = option.checked

        return cls(
            active=tuple(label for label, checked in states.items() if checked),
            inactive=tuple(label for label, checked in states.items() if not checked),
            states=MappingProxyType(states),
        )

    def is_active(self, label: str) -> bool:
        """Return the checked state of ``label``, False if unknown."""
        return self.states.get(normalize_label(label), False)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and normalize_label(label) in self.states


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of one structural read of the table.

    Either ``error`` is set (and the counts are meaningless) or the
    counts describe how many data rows matched the expected value.
    """

    success: int = 0
    failure: int = 0
    error: str | None = None

    @classmethod
    def from_page_result(cls, result: Mapping[str, Any]) -> "ValidationOutcome":
        """Convert the dict returned by the in-page table script."""
        error = result.get("error")
        if error:
            return cls(error=str(error))
        return cls(
            success=int(result.get("success", 0)),
            failure=int(result.get("failure", 0)),
        )

    @property
    def settled(self) -> bool:
        """True once the table shows matching rows and nothing else."""
        return self.error is None and self.success > 0 and self.failure == 0

    def assert_valid(self, header: str, value: str) -> None:
        """
        Assert the terminal validation invariants.

        Args:
            header: Column header that was validated.
            value: Expected value for every row in that column.

        Raises:
            AssertionError: Naming the first invariant that broke.
        """
        assert self.error != TABLE_NOT_FOUND, f"Table should be present ({self.error})"
        assert self.error is None, f"Header {header} should exist ({self.error})"
        assert self.success > 0, "Table should not be empty"
        assert self.failure == 0, (
            f"All table values should match {value} under heading {header} - "
            f"failure amount should be 0, got {self.failure}"
        )


def check_array_equality(first: Iterable[str], second: Iterable[str]) -> bool:
    """
    Check whether two sequences of strings hold the same contents, in any order.

    Inputs are copied before sorting, so callers' lists are untouched.
    """
    first_sorted = sorted(first)
    second_sorted = sorted(second)
    if len(first_sorted) != len(second_sorted):
        return False
    return first_sorted == second_sorted
