"""
Table pipeline for personnel utilisation data.

Orchestrates source loading, month discovery, row normalization and
column building.
"""

from auslastung.etl.pipeline import TablePipeline, TableResult, build_table, run_table

__all__ = ["TablePipeline", "TableResult", "build_table", "run_table"]
