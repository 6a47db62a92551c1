"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
Minimal configs only need: project
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from auslastung.config.settings import (
    DataPathsConfig,
    LoggingConfig,
    PipelineConfig,
    TableConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> PipelineConfig:
    """
    Load pipeline configuration from YAML file(s).

    Example:
        project: team-q3
        data:
          root: ./data
          source: source-data.json
        table:
          max_month_columns: 3
          currency_suffix: EUR
        logging:
          level: INFO

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated PipelineConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base != config_path:
            base_data = load_yaml(potential_base)
        else:
            base_data = {}

    merged = _deep_merge(base_data, load_yaml(config_path))

    project = merged.get("project")
    if not project:
        msg = "Config must specify 'project' name"
        raise ValueError(msg)

    data_data = merged.get("data") or {}
    data = DataPathsConfig(
        data_root=Path(data_data.get("root", "./data")),
        source=Path(data_data["source"]) if data_data.get("source") else None,
    )

    table = TableConfig(**(merged.get("table") or {}))

    logging_data = merged.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_data.get("level", "WARNING"),
        json_output=bool(logging_data.get("json", False)),
    )

    return PipelineConfig(
        project=str(project),
        data=data,
        table=table,
        logging=logging_config,
    )


def default_config(source: Path | None = None) -> PipelineConfig:
    """
    Build an ad-hoc configuration for a single source file.

    The source path is used as given (data_root is the current directory).
    """
    return PipelineConfig(
        project="adhoc",
        data=DataPathsConfig(data_root=Path("."), source=source),
    )
