"""
Table view catalog for the fixture application.

Each view lists its columns, the filter groups rendered as checkboxes,
and the filters a user sees before saving any of their own. Filter labels
are the cell values they match in their column.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ViewSpec:
    """
    Fixture definition of a table view.

    Attributes:
        view_id: Route name of the view.
        title: Page title.
        columns: Table headers, in display order.
        filter_groups: Column name -> labels offered as filters on it.
        default_filters: Labels active until the user saves a filter.
        label_nesting: "parent" puts the label text in the checkbox's parent,
            "grandparent" wraps the checkbox in an empty span first.
    """

    view_id: str
    title: str
    columns: tuple[str, ...]
    filter_groups: dict[str, tuple[str, ...]] = field(default_factory=dict)
    default_filters: tuple[str, ...] = ()
    label_nesting: str = "parent"

    @property
    def filter_labels(self) -> list[str]:
        return [label for labels in self.filter_groups.values() for label in labels]

    def column_for(self, label: str) -> str | None:
        """Return the column a filter label applies to."""
        for column, labels in self.filter_groups.items():
            if label in labels:
                return column
        return None

    def to_client(self) -> dict:
        """Serialize the parts the browser needs to render filters and the table."""
        return {
            "view": self.view_id,
            "columns": list(self.columns),
            "filterGroups": {column: list(labels) for column, labels in self.filter_groups.items()},
            "labelNesting": self.label_nesting,
        }


VIEWS: dict[str, ViewSpec] = {
    "assets": ViewSpec(
        view_id="assets",
        title="Assets",
        columns=("Asset Name", "Asset Type", "Logging"),
        filter_groups={
            "Logging": ("Logged", "Not Logged"),
            "Asset Type": ("Box", "Container", "Pallet"),
        },
        default_filters=("Logged",),
        label_nesting="parent",
    ),
    "loggers": ViewSpec(
        view_id="loggers",
        title="Loggers",
        columns=("Logger", "Logging Status", "Pairing"),
        filter_groups={
            "Logging Status": ("Logging", "Not Logging"),
            "Pairing": ("Paired", "Not paired"),
        },
        default_filters=(),
        label_nesting="grandparent",
    ),
    "shipments": ViewSpec(
        view_id="shipments",
        title="Shipments",
        columns=("Shipment", "Status", "Destination"),
        filter_groups={
            "Status": ("Awaiting Shipment", "Shipping", "Shipped", "Closed"),
        },
        default_filters=("Awaiting Shipment", "Shipping"),
        label_nesting="grandparent",
    ),
}


def get_view_spec(view_id: str) -> ViewSpec | None:
    return VIEWS.get(view_id)
