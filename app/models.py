"""
Database models for the fixture table application.

Table rows are stored per view with their cells as JSON keyed by column
header. Saved filters are stored per user and view; a user without a
saved filter sees the view's defaults.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select

from app import db
from app.catalog import ViewSpec


class TableRecord(db.Model):
    """
    One row of a table view.

    Attributes:
        id: Unique identifier for the row.
        view: View the row belongs to (assets, loggers, shipments).
        cells: Column header -> cell text.
    """

    __tablename__ = "table_records"

    id: int = db.Column(db.Integer, primary_key=True)
    view: str = db.Column(db.String(40), nullable=False, index=True)
    cells: dict = db.Column(db.JSON, nullable=False, default=dict)

    def to_row(self, columns: tuple[str, ...]) -> list[str]:
        """Return cell values in column order, blank for missing cells."""
        return [str(self.cells.get(column, "")) for column in columns]

    def __repr__(self) -> str:
        return f"<TableRecord {self.id}: {self.view}>"


class SavedFilter(db.Model):
    """
    Active filter labels a user saved for a view.

    Attributes:
        username: Owner of the filter.
        view: View the filter applies to.
        active: List of active filter labels.
        updated_at: Timestamp of the last save.
    """

    __tablename__ = "saved_filters"
    __table_args__ = (db.UniqueConstraint("username", "view", name="uq_saved_filter_user_view"),)

    id: int = db.Column(db.Integer, primary_key=True)
    username: str = db.Column(db.String(80), nullable=False)
    view: str = db.Column(db.String(40), nullable=False)
    active: list = db.Column(db.JSON, nullable=False, default=list)
    updated_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


def active_filters_for(username: str, spec: ViewSpec) -> list[str]:
    """Return the user's saved labels for a view, or the view's defaults."""
    saved = db.session.scalars(
        select(SavedFilter).where(SavedFilter.username == username, SavedFilter.view == spec.view_id)
    ).first()
    if saved is None:
        return list(spec.default_filters)
    return list(saved.active)


def save_filters(username: str, spec: ViewSpec, labels: list[str]) -> list[str]:
    """Store the user's active labels for a view, dropping unknown labels."""
    known = [label for label in labels if label in spec.filter_labels]
    saved = db.session.scalars(
        select(SavedFilter).where(SavedFilter.username == username, SavedFilter.view == spec.view_id)
    ).first()
    if saved is None:
        saved = SavedFilter(username=username, view=spec.view_id, active=known)
        db.session.add(saved)
    else:
        saved.active = known
    db.session.commit()
    return known


def reset_saved_filters(username: str) -> int:
    """Delete every saved filter of a user. Returns the number removed."""
    result = db.session.execute(delete(SavedFilter).where(SavedFilter.username == username))
    db.session.commit()
    return result.rowcount


def filtered_rows(spec: ViewSpec, active: list[str], apply_filters: bool = True) -> dict[str, Any]:
    """
    Select the rows of a view that pass the active filters.

    Labels in the same column are alternatives; columns combine with AND.
    A column with no active label does not restrict the rows.

    Returns:
        Dict with ``rows`` (lists of cell text) and ``total`` (unfiltered count).
    """
    records = db.session.scalars(
        select(TableRecord).where(TableRecord.view == spec.view_id).order_by(TableRecord.id)
    ).all()

    wanted: dict[str, set[str]] = {}
    for label in active:
        column = spec.column_for(label)
        if column is not None:
            wanted.setdefault(column, set()).add(label)

    visible = [
        record for record in records
        if not apply_filters
        or all(record.cells.get(column) in labels for column, labels in wanted.items())
    ]
    return {
        "rows": [record.to_row(spec.columns) for record in visible],
        "total": len(records),
    }
