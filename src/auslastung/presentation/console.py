"""
Console presentation for the utilisation table.

Renders the finished table with Rich. Sorting and paging work on a copy;
the table handed in is never modified.
"""

import math
from collections.abc import Sequence

import pandas as pd
from rich.console import Console
from rich.table import Table

from auslastung.config.settings import MISSING_VALUE
from auslastung.normalization.columns import PERSON_KEY, ColumnDescriptor
from auslastung.normalization.formatting import parse_number


def _sort_values(series: pd.Series, missing_value: str) -> pd.Series:
    """
    Sort key for one table column.

    Columns whose filled cells all start with a number sort numerically,
    everything else case-insensitively. Placeholders become NaN.
    """
    filled = series != missing_value
    numbers = pd.to_numeric(series.map(parse_number), errors="coerce")
    if filled.any() and numbers[filled].notna().all():
        return numbers.where(filled)
    return series.str.casefold().where(filled)


def sort_frame(
    frame: pd.DataFrame,
    sort_by: str,
    *,
    descending: bool = False,
    missing_value: str = MISSING_VALUE,
) -> pd.DataFrame:
    """
    Sort table rows by one column, placeholders last.

    Raises:
        KeyError: If the column does not exist.
    """
    if sort_by not in frame.columns:
        available = ", ".join(frame.columns)
        msg = f"Unknown sort column '{sort_by}'. Available: {available}"
        raise KeyError(msg)
    return frame.sort_values(
        by=sort_by,
        ascending=not descending,
        key=lambda s: _sort_values(s, missing_value),
        na_position="last",
        kind="stable",
    )


def paginate(frame: pd.DataFrame, page: int, page_size: int) -> pd.DataFrame:
    """Rows of one 1-based page; pages past the end are empty."""
    if page < 1 or page_size < 1:
        msg = f"Page and page size must be positive, got page={page}, page_size={page_size}"
        raise ValueError(msg)
    start = (page - 1) * page_size
    return frame.iloc[start : start + page_size]


class TableRenderer:
    """Prints utilisation tables to a Rich console."""

    def __init__(self, console: Console, missing_value: str = MISSING_VALUE) -> None:
        """
        Initialize table renderer.

        Args:
            console: Rich Console instance for output.
            missing_value: Placeholder that sorts after real values.
        """
        self.console = console
        self.missing_value = missing_value

    def print_table(
        self,
        frame: pd.DataFrame,
        columns: Sequence[ColumnDescriptor],
        *,
        sort_by: str | None = None,
        descending: bool = False,
        page: int = 1,
        page_size: int = 10,
        title: str = "Workforce Utilisation",
    ) -> None:
        """
        Print one page of the table.

        Args:
            frame: Table frame, one column per row key.
            columns: Column descriptors in display order.
            sort_by: Optional row key to sort by.
            descending: Sort direction.
            page: 1-based page number.
            page_size: Rows per page.
            title: Table title.
        """
        if sort_by is not None:
            frame = sort_frame(
                frame, sort_by, descending=descending, missing_value=self.missing_value
            )
        visible = paginate(frame, page, page_size)
        n_pages = max(1, math.ceil(len(frame) / page_size))

        table = Table(
            title=title,
            caption=f"Page {page}/{n_pages} ({len(frame)} rows)",
            show_header=True,
        )
        for column in columns:
            if column.key == PERSON_KEY:
                table.add_column(column.label, style="cyan", no_wrap=True)
            else:
                table.add_column(column.label, justify="right")

        for _, row in visible.iterrows():
            table.add_row(*(str(row[column.key]) for column in columns))

        self.console.print(table)
