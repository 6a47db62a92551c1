"""
Personnel source document ingestion.

Loads the JSON document holding one record per employee or external
worker. Records are passed on untouched; the normalization layer
tolerates any shape.
"""

import json
from pathlib import Path
from typing import Any

from auslastung.config.settings import PipelineConfig
from auslastung.utils.logging import get_logger

log = get_logger(__name__)


class SourceRecordLoader:
    """Loader for the personnel source JSON document."""

    def __init__(self, config: PipelineConfig) -> None:
        """
        Initialize source loader.

        Args:
            config: Pipeline configuration with the source path.
        """
        self.config = config

    def load(self) -> list[Any]:
        """
        Load all raw records.

        Returns:
            Records in document order.

        Raises:
            FileNotFoundError: If the source file does not exist.
            ValueError: If the document is not valid JSON or not a list.
        """
        path = self.config.source_path
        log.info("Loading source records", path=str(path))
        records = load_source_records(path)
        log.info("Loaded source records", rows=len(records))
        return records


def load_source_records(path: Path) -> list[Any]:
    """
    Read a JSON document whose top level is a list of records.

    Args:
        path: Path to the JSON file.

    Returns:
        The list of records.
    """
    if not path.exists():
        msg = f"Source file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open(encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            msg = f"Source file {path} is not valid JSON: {e}"
            raise ValueError(msg) from e

    if not isinstance(data, list):
        msg = f"Source file {path} must contain a list of records, got {type(data).__name__}"
        raise ValueError(msg)

    return data
