"""
Sample data for the fixture table application.

``seed_sample_data`` fills every view with rows covering all filter
labels; tests call ``replace_records`` to install exact tables.
"""

import logging
import random
from collections.abc import Iterable

from faker import Faker
from sqlalchemy import delete, select

from app import db
from app.catalog import VIEWS, ViewSpec
from app.models import SavedFilter, TableRecord

logger = logging.getLogger(__name__)


def _sample_cells(spec: ViewSpec, fake: Faker, rng: random.Random) -> dict[str, str]:
    cells = {}
    for column in spec.columns:
        if column in spec.filter_groups:
            cells[column] = rng.choice(spec.filter_groups[column])
        elif column == "Destination":
            cells[column] = fake.city()
        else:
            cells[column] = f"{spec.title[:-1]} {fake.unique.bothify('??-####').upper()}"
    return cells


def replace_records(view: str, rows: Iterable[dict[str, str]]) -> int:
    """
    Replace every row of ``view`` with ``rows``.

    Returns:
        Number of rows inserted.
    """
    db.session.execute(delete(TableRecord).where(TableRecord.view == view))
    records = [TableRecord(view=view, cells=dict(cells)) for cells in rows]
    db.session.add_all(records)
    db.session.commit()
    return len(records)


def clear_all() -> None:
    """Remove every row and saved filter."""
    db.session.execute(delete(TableRecord))
    db.session.execute(delete(SavedFilter))
    db.session.commit()


def seed_sample_data(rows_per_view: int = 25, seed: int = 7) -> None:
    """Populate each view with random rows if it is empty."""
    fake = Faker()
    Faker.seed(seed)
    rng = random.Random(seed)

    for spec in VIEWS.values():
        if db.session.scalars(select(TableRecord.id).where(TableRecord.view == spec.view_id)).first():
            continue
        inserted = replace_records(
            spec.view_id,
            (_sample_cells(spec, fake, rng) for _ in range(rows_per_view)),
        )
        logger.info("Seeded %d %s rows", inserted, spec.view_id)
