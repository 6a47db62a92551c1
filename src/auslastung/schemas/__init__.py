"""
Schema definitions using Pandera for output validation.

The table frame handed to presentation is checked against these
contracts before it leaves the pipeline.
"""

from auslastung.schemas.table import (
    PERCENT_PATTERN,
    TableRowSchema,
    build_table_schema,
    earnings_pattern,
)

__all__ = [
    "PERCENT_PATTERN",
    "TableRowSchema",
    "build_table_schema",
    "earnings_pattern",
]
