"""
Configuration management with typed Pydantic models.

Provides table shaping options, source paths and logging settings,
loaded from YAML with environment interpolation.
"""

from auslastung.config.loader import default_config, load_config
from auslastung.config.settings import (
    DataPathsConfig,
    LoggingConfig,
    PipelineConfig,
    TableConfig,
)

__all__ = [
    "DataPathsConfig",
    "LoggingConfig",
    "PipelineConfig",
    "TableConfig",
    "default_config",
    "load_config",
]
