"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
The normalization core only ever sees a TableConfig; paths and logging
are consumed by the loader and the command-line interface.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from auslastung.utils.logging import VALID_LEVELS

MISSING_VALUE = "–"
CURRENCY_SUFFIX = "EUR"
MAX_MONTH_COLUMNS = 3


class DataPathsConfig(BaseModel):
    """Data file paths configuration.

    The source path is relative to data_root. Use resolve() to get the
    absolute path.
    """

    model_config = ConfigDict(frozen=True)

    data_root: Path = Field(
        default=Path("./data"), description="Root directory for all data files"
    )
    source: Path | None = Field(
        default=None, description="Path to the personnel source JSON document"
    )

    def resolve(self, path_attr: str = "source") -> Path:
        """Resolve a relative path against data_root."""
        rel_path = getattr(self, path_attr)
        if rel_path is None:
            msg = f"Path '{path_attr}' is not configured"
            raise ValueError(msg)
        return self.data_root / rel_path


class TableConfig(BaseModel):
    """Table shaping configuration: month column cap and sentinels."""

    model_config = ConfigDict(frozen=True)

    max_month_columns: int = Field(
        default=MAX_MONTH_COLUMNS,
        ge=1,
        le=12,
        description="Maximum number of dynamic month columns",
    )
    currency_suffix: str = Field(
        default=CURRENCY_SUFFIX,
        min_length=1,
        description="Suffix appended to formatted earnings",
    )
    missing_value: str = Field(
        default=MISSING_VALUE,
        min_length=1,
        description="Placeholder for a missing person or earnings figure",
    )
    page_size: int = Field(default=10, ge=1, description="Rows per printed page")


class LoggingConfig(BaseModel):
    """Logging configuration for the command-line tools."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="WARNING", description="Log level name")
    json_output: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is a known logging level name."""
        level = v.upper()
        if level not in VALID_LEVELS:
            msg = f"Log level must be one of {', '.join(VALID_LEVELS)}, got: {v!r}"
            raise ValueError(msg)
        return level


class PipelineConfig(BaseModel):
    """Complete configuration for one table build."""

    model_config = ConfigDict(frozen=True)

    project: str = Field(description="Project identifier (e.g., 'team-q3')")

    data: DataPathsConfig = Field(default_factory=DataPathsConfig)
    table: TableConfig = Field(default_factory=TableConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def source_path(self) -> Path:
        """Absolute path of the configured source document."""
        return self.data.resolve("source")
