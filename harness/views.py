"""
Descriptors for the filterable table views.

The assets, loggers and shipments pages share their filter and table
behaviour; only the route, default filters and the column checked by the
filter scenarios differ.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TABLE_CLASS = "MuiTableBody-root"
DEFAULT_VIEW_SWITCH = "id=table-switch"


@dataclass(frozen=True)
class TableView:
    """
    A table view of the application.

    Attributes:
        view_id: Short name of the view.
        path: Route of the view, e.g. ``/assets``.
        default_filters: Labels checked after a filter reset.
        validated_column: Header of the column the filter scenarios check.
        table_class: CSS class of the table body, present once the table loaded.
        view_switch_selector: Selector of the card/table view toggle.
    """

    view_id: str
    path: str
    default_filters: tuple[str, ...]
    validated_column: str
    table_class: str = DEFAULT_TABLE_CLASS
    view_switch_selector: str = DEFAULT_VIEW_SWITCH

    @property
    def table_path(self) -> str:
        return f"{self.path}?view=table"


ASSETS = TableView(
    view_id="assets",
    path="/assets",
    default_filters=("Logged",),
    validated_column="Asset Type",
)

LOGGERS = TableView(
    view_id="loggers",
    path="/loggers",
    default_filters=(),
    validated_column="Logging Status",
)

SHIPMENTS = TableView(
    view_id="shipments",
    path="/shipments",
    default_filters=("Awaiting Shipment", "Shipping"),
    validated_column="Status",
)

TABLE_VIEWS: dict[str, TableView] = {
    view.view_id: view for view in (ASSETS, LOGGERS, SHIPMENTS)
}


def get_view(view_id: str) -> TableView:
    """
    Look up a table view by id.

    Raises:
        KeyError: If ``view_id`` is not a known view.
    """
    try:
        return TABLE_VIEWS[view_id]
    except KeyError:
        raise KeyError(
            f"Unknown table view {view_id!r}; expected one of {sorted(TABLE_VIEWS)}"
        ) from None
