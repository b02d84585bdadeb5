"""
Business logic behind the overview and data management pages: counts,
sequence health checks, CSV export and resets. Keeps the view layer focused
on rendering.
"""
import logging
from typing import Dict, List

import pandas as pd

from domain.constants import IMAGE_BUCKET, ORDERED_TABLES, PARTNER_TYPES, TABLES
from services import ordering, persistence, storage
from services.ordering import SequenceReport
from demo import sample_data

logger = logging.getLogger(__name__)

# Admin accounts are never exported or wiped from the dashboard
CONTENT_TABLES = [t for t in TABLES if t != 'admins']


def get_dashboard_counts() -> Dict[str, int]:
    """Active row counts per content table, plus partners per tier."""
    counts = {table: len(persistence.query(table)) for table in CONTENT_TABLES}
    partner_rows = persistence.query('partners')
    for t in PARTNER_TYPES:
        counts[f"partners_{t}"] = sum(1 for p in partner_rows if p.get('type') == t)
    return counts


def check_sequences() -> List[SequenceReport]:
    """Contiguity report for every ordered group."""
    return [ordering.verify_sequence(table, key)
            for table in ORDERED_TABLES for key in ordering.groups(table)]


def repair_all_sequences() -> int:
    changed = 0
    for report in check_sequences():
        if not report.ok:
            changed += ordering.repair_sequence(report.table, report.group_key)
    return changed


def to_dataframe(table: str) -> pd.DataFrame:
    rows = persistence.query(table)
    if not rows:
        return pd.DataFrame()
    df = pd.DataFrame(rows)
    # Stable column order: id first, the rest alphabetical
    cols = ['id'] + sorted(c for c in df.columns if c != 'id')
    df = df[cols]
    if 'order_index' in df.columns:
        sort_cols = [c for c in ('type', 'order_index') if c in df.columns]
        df = df.sort_values(sort_cols, kind='stable').reset_index(drop=True)
    return df


def export_to_csv(table: str) -> str:
    """CSV of the active rows of ``table``; empty string when there are none."""
    if table not in CONTENT_TABLES:
        raise ValueError(f"Dışa aktarılamayan tablo: {table}")
    df = to_dataframe(table)
    if df.empty:
        return ""
    return df.to_csv(index=False)


def seed_sample_content() -> Dict[str, int]:
    counts = sample_data.seed_all()
    logger.info("sample content seeded: %s", counts)
    return counts


def reset_all_data() -> int:
    """Empties every content table and the image bucket (admin accounts are kept).

    Returns how many stored images were deleted.
    """
    for table in CONTENT_TABLES:
        persistence.replace_all(table, [])
    removed = storage.clear_bucket(IMAGE_BUCKET)
    logger.warning("all content tables reset, %d images removed", removed)
    return removed
