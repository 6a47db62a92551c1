"""
Month column discovery.

Collects the month labels that carry utilisation data anywhere in the
dataset. Labels keep the order in which the records first mention them;
they are not sorted by date.
"""

from collections.abc import Iterable
from typing import Any

from auslastung.config.settings import MAX_MONTH_COLUMNS
from auslastung.normalization.records import resolve_worker


def iter_month_labels(records: Iterable[Any]) -> Iterable[str]:
    """Yield every breakdown month label in traversal order, duplicates included."""
    for record in records:
        worker = resolve_worker(record)
        if worker is None:
            continue
        for entry in worker.monthly_breakdown:
            month = entry.get("month")
            if isinstance(month, str):
                yield month


def discover_months(
    records: Iterable[Any],
    limit: int = MAX_MONTH_COLUMNS,
) -> list[str]:
    """
    Discover the month labels to show as table columns.

    Args:
        records: Raw records of the whole dataset.
        limit: Maximum number of labels to keep.

    Returns:
        Distinct labels in first-seen order, at most ``limit`` of them.
    """
    unique = dict.fromkeys(iter_month_labels(records))
    return list(unique)[:limit]
