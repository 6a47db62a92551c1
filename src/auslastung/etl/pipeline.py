"""
Table pipeline implementation.

Runs month discovery once per dataset and threads the result into row
normalization and column building, producing the finished table.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import pandas as pd

from auslastung.config.settings import PipelineConfig, TableConfig
from auslastung.ingestion.source import SourceRecordLoader
from auslastung.normalization.columns import (
    ColumnDescriptor,
    build_columns,
    column_keys,
    month_key,
)
from auslastung.normalization.months import discover_months
from auslastung.normalization.records import resolve_worker
from auslastung.normalization.rows import normalize_rows
from auslastung.schemas.table import build_table_schema
from auslastung.utils.logging import get_logger, log_context

log = get_logger(__name__)


@dataclass(frozen=True)
class TableResult:
    """
    Result of one table build.

    Attributes:
        months: Discovered month labels, in column order.
        columns: Ordered column descriptors.
        rows: One read-only row per input record, in input order.
    """

    months: tuple[str, ...]
    columns: tuple[ColumnDescriptor, ...]
    rows: tuple[Mapping[str, str], ...]

    @property
    def month_keys(self) -> list[str]:
        """Row keys of the month columns."""
        return [month_key(m) for m in self.months]

    def to_dict(self) -> dict[str, Any]:
        """Plain representation for JSON output."""
        return {
            "columns": [{"key": c.key, "label": c.label} for c in self.columns],
            "rows": [dict(row) for row in self.rows],
        }


class TablePipeline:
    """
    Builds the utilisation table from raw personnel records.

    Holds configuration only; every transform call is independent.
    """

    def __init__(self, config: TableConfig | None = None) -> None:
        """
        Initialize table pipeline.

        Args:
            config: Table configuration (month cap, placeholders).
        """
        self.config = config or TableConfig()

    def transform(self, records: Sequence[Any]) -> TableResult:
        """
        Transform raw records into columns and rows.

        Args:
            records: Raw records of the whole dataset.

        Returns:
            TableResult with one row per record.
        """
        records = list(records)
        months = discover_months(records, limit=self.config.max_month_columns)
        log.info("Discovered month columns", months=months)

        n_unresolved = sum(1 for record in records if resolve_worker(record) is None)
        if n_unresolved:
            log.debug("Records without worker info", count=n_unresolved)

        rows = normalize_rows(records, months, self.config)
        columns = build_columns(months)
        log.info("Built table", rows=len(rows), columns=len(columns))

        return TableResult(
            months=tuple(months),
            columns=tuple(columns),
            rows=tuple(MappingProxyType(row) for row in rows),
        )

    def to_frame(self, result: TableResult, *, validate: bool = True) -> pd.DataFrame:
        """
        Convert a table result into a DataFrame in column order.

        Args:
            result: Table result to convert.
            validate: Whether to validate against the table schema.

        Returns:
            DataFrame with one column per distinct row key.

        Raises:
            pandera.errors.SchemaError: If validation fails.
        """
        keys = column_keys(result.columns)
        df = pd.DataFrame.from_records(
            [dict(row) for row in result.rows], columns=keys
        )

        if validate:
            schema = build_table_schema(
                result.month_keys,
                currency_suffix=self.config.currency_suffix,
                missing_value=self.config.missing_value,
            )
            df = schema.validate(df)
            log.debug("Table schema validation passed", rows=len(df))

        return df


def build_table(
    records: Sequence[Any],
    config: TableConfig | None = None,
) -> TableResult:
    """
    Convenience function to build a table from in-memory records.

    Args:
        records: Raw records.
        config: Optional table configuration.

    Returns:
        TableResult.
    """
    return TablePipeline(config).transform(records)


def run_table(
    config: PipelineConfig,
    source_path: Path | None = None,
) -> TableResult:
    """
    Load the configured source document and build its table.

    Args:
        config: Pipeline configuration.
        source_path: Optional override for the configured source path.

    Returns:
        TableResult.
    """
    if source_path is not None:
        data = config.data.model_copy(
            update={"data_root": Path("."), "source": source_path}
        )
        config = config.model_copy(update={"data": data})

    with log_context(project=config.project):
        records = SourceRecordLoader(config).load()
        return TablePipeline(config.table).transform(records)
