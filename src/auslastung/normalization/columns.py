"""
Column descriptors for the utilisation table.

Provides the canonical row keys and their display labels, in the order
the presentation layer shows them.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from auslastung.utils.logging import get_logger

log = get_logger(__name__)

PERSON_KEY = "person"
PAST_12_MONTHS_KEY = "past12Months"
YTD_KEY = "y2d"
EARNINGS_KEY = "netEarningsPrevMonth"

# Canonical row key -> display label
LEADING_COLUMNS: dict[str, str] = {
    PERSON_KEY: "Person",
    PAST_12_MONTHS_KEY: "Past 12 Months",
    YTD_KEY: "YTD",
}

TRAILING_COLUMNS: dict[str, str] = {
    EARNINGS_KEY: "Net Earnings Prev Month",
}


@dataclass(frozen=True)
class ColumnDescriptor:
    """One table column: the row key it reads and its header label."""

    key: str
    label: str


def month_key(month: str) -> str:
    """Row key for a month column."""
    return month.lower()


def build_columns(months: Iterable[str]) -> list[ColumnDescriptor]:
    """
    Build the ordered column descriptors for a set of month labels.

    Args:
        months: Discovered month labels, in display order.

    Returns:
        Leading columns, one column per month, then the earnings column.
    """
    month_columns = [ColumnDescriptor(key=month_key(m), label=m) for m in months]

    columns = [
        *(ColumnDescriptor(key=k, label=v) for k, v in LEADING_COLUMNS.items()),
        *month_columns,
        *(ColumnDescriptor(key=k, label=v) for k, v in TRAILING_COLUMNS.items()),
    ]
    log.debug("Built columns", keys=[c.key for c in columns])
    return columns


def column_keys(columns: Iterable[ColumnDescriptor]) -> list[str]:
    """Distinct row keys in column order (month labels may share a key)."""
    return list(dict.fromkeys(c.key for c in columns))
