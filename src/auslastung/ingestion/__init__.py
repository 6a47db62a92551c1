"""
Data ingestion layer for loading raw personnel records.

All source loading happens through this module so the normalization
core never touches the filesystem.
"""

from auslastung.ingestion.source import SourceRecordLoader, load_source_records

__all__ = ["SourceRecordLoader", "load_source_records"]
