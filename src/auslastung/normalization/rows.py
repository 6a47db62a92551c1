"""
Row normalization.

Turns one raw personnel record into one display row. Missing or
malformed data degrades to placeholders; no record makes this fail.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from auslastung.config.settings import TableConfig
from auslastung.normalization.columns import (
    EARNINGS_KEY,
    PAST_12_MONTHS_KEY,
    PERSON_KEY,
    YTD_KEY,
    month_key,
)
from auslastung.normalization.formatting import format_currency, format_percent
from auslastung.normalization.records import Worker, resolve_worker

_DEFAULT_TABLE = TableConfig()


def month_utilisation(worker: Worker | None, month: str) -> str:
    """
    Format a worker's utilisation for one month.

    The first breakdown entry with exactly this label wins; a worker
    without one gets ``"0%"``.
    """
    if worker is None:
        return format_percent(None)
    entry = next(
        (e for e in worker.monthly_breakdown if e.get("month") == month),
        None,
    )
    return format_percent(entry.get("utilisationRate") if entry is not None else None)


def latest_earnings(
    worker: Worker | None,
    table: TableConfig | None = None,
) -> str:
    """
    Format the potential earnings of the latest month on record.

    The latest entry is the one with the greatest month label. Ties keep
    the entry seen first.

    Args:
        worker: Resolved worker, or None.
        table: Table configuration for currency suffix and placeholder.

    Returns:
        Amount such as ``"88.00 EUR"``, or the placeholder when there is
        no entry or its amount does not parse.
    """
    table = table or _DEFAULT_TABLE
    earnings = worker.earnings_by_month if worker is not None else []
    if not earnings:
        return table.missing_value

    latest = earnings[0]
    latest_month = _month_of(latest)
    for entry in earnings[1:]:
        month = _month_of(entry)
        if month is not None and latest_month is not None and month > latest_month:
            latest, latest_month = entry, month

    costs = latest.get("costs") if isinstance(latest, Mapping) else None
    return format_currency(
        costs, suffix=table.currency_suffix, missing=table.missing_value
    )


def _month_of(entry: Any) -> str | None:
    month = entry.get("month") if isinstance(entry, Mapping) else None
    return month if isinstance(month, str) else None


def normalize_row(
    record: Any,
    months: Sequence[str],
    table: TableConfig | None = None,
) -> dict[str, str]:
    """
    Normalize one raw record into a table row.

    Args:
        record: Raw record with ``employeeInfo`` or ``externalInfo``.
        months: Discovered month labels, in column order.
        table: Table configuration (placeholders, currency).

    Returns:
        Row keyed by column key. Month keys are the lowercased labels.
    """
    table = table or _DEFAULT_TABLE
    worker = resolve_worker(record)

    name = worker.name if worker is not None else None
    rate_12m = worker.rate_last_twelve_months if worker is not None else None
    rate_ytd = worker.rate_year_to_date if worker is not None else None

    row: dict[str, str] = {
        PERSON_KEY: str(name) if name is not None else table.missing_value,
        PAST_12_MONTHS_KEY: format_percent(rate_12m),
        YTD_KEY: format_percent(rate_ytd),
    }
    for month in months:
        row[month_key(month)] = month_utilisation(worker, month)
    row[EARNINGS_KEY] = latest_earnings(worker, table)
    return row


def normalize_rows(
    records: Iterable[Any],
    months: Sequence[str],
    table: TableConfig | None = None,
) -> list[dict[str, str]]:
    """Normalize every record, preserving order and count."""
    return [normalize_row(record, months, table) for record in records]
