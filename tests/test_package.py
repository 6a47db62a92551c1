"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import auslastung

    assert auslastung.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from auslastung.config import (
        DataPathsConfig,
        LoggingConfig,
        PipelineConfig,
        TableConfig,
        default_config,
        load_config,
    )

    assert PipelineConfig is not None
    assert DataPathsConfig is not None
    assert TableConfig is not None
    assert LoggingConfig is not None
    assert load_config is not None
    assert default_config is not None


def test_normalization_module_imports() -> None:
    """Verify normalization module structure is correct."""
    from auslastung.normalization import (
        ColumnDescriptor,
        build_columns,
        discover_months,
        format_currency,
        format_percent,
        normalize_row,
        normalize_rows,
        resolve_worker,
    )

    assert ColumnDescriptor is not None
    assert build_columns is not None
    assert discover_months is not None
    assert format_currency is not None
    assert format_percent is not None
    assert normalize_row is not None
    assert normalize_rows is not None
    assert resolve_worker is not None


def test_schemas_module_imports() -> None:
    """Verify schemas module structure is correct."""
    from auslastung.schemas import TableRowSchema, build_table_schema

    assert TableRowSchema is not None
    assert build_table_schema is not None
