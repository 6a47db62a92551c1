"""Tests for column descriptors."""

from auslastung.normalization.columns import (
    ColumnDescriptor,
    build_columns,
    column_keys,
    month_key,
)


class TestBuildColumns:
    """Tests for build_columns."""

    def test_fixed_month_and_trailing_order(self) -> None:
        """Test leading columns, month columns, then earnings."""
        columns = build_columns(["May", "June", "July"])
        assert columns == [
            ColumnDescriptor(key="person", label="Person"),
            ColumnDescriptor(key="past12Months", label="Past 12 Months"),
            ColumnDescriptor(key="y2d", label="YTD"),
            ColumnDescriptor(key="may", label="May"),
            ColumnDescriptor(key="june", label="June"),
            ColumnDescriptor(key="july", label="July"),
            ColumnDescriptor(key="netEarningsPrevMonth", label="Net Earnings Prev Month"),
        ]

    def test_no_months(self) -> None:
        """Test only fixed columns remain without month data."""
        keys = [c.key for c in build_columns([])]
        assert keys == ["person", "past12Months", "y2d", "netEarningsPrevMonth"]

    def test_month_label_keeps_case(self) -> None:
        """Test month keys are lowercased while labels keep their case."""
        column = build_columns(["2024-MAY"])[3]
        assert column.key == "2024-may"
        assert column.label == "2024-MAY"


class TestColumnKeys:
    """Tests for column helpers."""

    def test_month_key(self) -> None:
        """Test month keys are lowercased labels."""
        assert month_key("June") == "june"

    def test_column_keys_deduplicated(self) -> None:
        """Test labels that share a key appear once."""
        keys = column_keys(build_columns(["May", "may"]))
        assert keys == ["person", "past12Months", "y2d", "may", "netEarningsPrevMonth"]
