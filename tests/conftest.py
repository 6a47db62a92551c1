"""Pytest configuration and shared fixtures."""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo structlog configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def test_data_dir(project_root: Path) -> Path:
    """Return the test data directory."""
    return project_root / "tests" / "data"


@pytest.fixture
def source_path(test_data_dir: Path) -> Path:
    """Return the sample source document."""
    return test_data_dir / "source-data.json"


@pytest.fixture
def source_records(source_path: Path) -> list[Any]:
    """Load the sample source document as raw records."""
    with source_path.open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def employee_record() -> dict[str, Any]:
    """Create an employee record with every field present."""
    return {
        "employeeInfo": {
            "name": "Anna Schmidt",
            "workforceUtilisation": {
                "rateLastTwelveMonths": 0.85,
                "rateYearToDate": "0.79",
                "monthlyBreakdown": [
                    {"month": "May", "utilisationRate": 0.91},
                    {"month": "June", "utilisationRate": "0.8"},
                ],
            },
            "costsByMonth": {
                "potentialEarningsByMonth": [
                    {"month": "2024-05", "costs": "4210.5"},
                    {"month": "2024-06", "costs": "3980"},
                ]
            },
        }
    }


@pytest.fixture
def external_record() -> dict[str, Any]:
    """Create an external worker record."""
    return {
        "externalInfo": {
            "name": "Jane Doe",
            "workforceUtilisation": {
                "rateLastTwelveMonths": 0.4567,
                "rateYearToDate": 0,
                "monthlyBreakdown": [
                    {"month": "June", "utilisationRate": 0.5},
                    {"month": "July", "utilisationRate": 0.625},
                ],
            },
            "costsByMonth": {
                "potentialEarningsByMonth": [
                    {"month": "2024-05", "costs": "100.5"},
                    {"month": "2024-07", "costs": "88"},
                    {"month": "2024-06", "costs": "x"},
                ]
            },
        }
    }

