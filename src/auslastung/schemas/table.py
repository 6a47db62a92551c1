"""
Pandera schemas for the utilisation table output.
"""

import re
from collections.abc import Iterable

import pandera.pandas as pa
from pandera.typing import Series

from auslastung.config.settings import CURRENCY_SUFFIX, MISSING_VALUE

PERCENT_PATTERN = r"^-?\d+%$"


class TableRowSchema(pa.DataFrameModel):
    """
    Schema for the fixed columns of the utilisation table.

    Month columns depend on the dataset; see build_table_schema().
    """

    person: Series[str] = pa.Field(
        description="Worker name or placeholder",
    )
    past12Months: Series[str] = pa.Field(  # noqa: N815
        str_matches=PERCENT_PATTERN,
        description="Utilisation over the trailing twelve months",
    )
    y2d: Series[str] = pa.Field(
        str_matches=PERCENT_PATTERN,
        description="Utilisation since the start of the year",
    )

    class Config:
        """Schema configuration."""

        name = "TableRowSchema"
        strict = False  # Month columns vary per dataset
        coerce = True


def earnings_pattern(
    currency_suffix: str = CURRENCY_SUFFIX,
    missing_value: str = MISSING_VALUE,
) -> str:
    """Pattern for a formatted earnings cell."""
    return (
        rf"^(?:{re.escape(missing_value)}"
        rf"|-?\d+\.\d{{2}} {re.escape(currency_suffix)})$"
    )


def build_table_schema(
    month_keys: Iterable[str],
    currency_suffix: str = CURRENCY_SUFFIX,
    missing_value: str = MISSING_VALUE,
) -> pa.DataFrameSchema:
    """
    Build the full table schema for a set of month columns.

    Args:
        month_keys: Row keys of the month columns.
        currency_suffix: Suffix used for earnings.
        missing_value: Placeholder used for missing earnings.

    Returns:
        Schema covering fixed, month and earnings columns.
    """
    fixed = set(TableRowSchema.to_schema().columns)
    extra = {
        key: pa.Column(str, pa.Check.str_matches(PERCENT_PATTERN), coerce=True)
        for key in month_keys
        if key not in fixed
    }
    extra["netEarningsPrevMonth"] = pa.Column(
        str,
        pa.Check.str_matches(earnings_pattern(currency_suffix, missing_value)),
        coerce=True,
    )
    return TableRowSchema.to_schema().add_columns(extra)
