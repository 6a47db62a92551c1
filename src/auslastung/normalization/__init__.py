"""
Normalization layer turning raw personnel records into table rows.

Month discovery runs first; its result is threaded into the row
normalizer and the column builder.
"""

from auslastung.normalization.columns import ColumnDescriptor, build_columns
from auslastung.normalization.formatting import format_currency, format_percent
from auslastung.normalization.months import discover_months
from auslastung.normalization.records import Worker, resolve_worker
from auslastung.normalization.rows import (
    latest_earnings,
    month_utilisation,
    normalize_row,
    normalize_rows,
)

__all__ = [
    "ColumnDescriptor",
    "Worker",
    "build_columns",
    "discover_months",
    "format_currency",
    "format_percent",
    "latest_earnings",
    "month_utilisation",
    "normalize_row",
    "normalize_rows",
    "resolve_worker",
]
