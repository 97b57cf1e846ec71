"""
Configuration loading utilities.

Supports environment variable interpolation and base.yaml inheritance.
A minimal config only needs a ``colleges`` mapping.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from resultportal.config.settings import (
    CollegeConfig,
    FetchConfig,
    LoggingConfig,
    MarksConfig,
    PortalConfig,
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
    """Recursively interpolate env vars in every string of the config tree."""
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
    return _process_config_values(data) if data else {}


def _build_college(college_id: str, data: Any) -> CollegeConfig:
    if not isinstance(data, dict):
        msg = f"College {college_id!r} must be a mapping with 'name' and a sheet source"
        raise ValueError(msg)

    # Blank strings come from unset ${VAR} interpolations
    csv_url = data.get("csv_url") or None
    csv_path = data.get("csv_path") or None
    extra = {k: v for k, v in data.items() if k not in {"name", "csv_url", "csv_path"}}

    return CollegeConfig(
        name=data.get("name", college_id),
        csv_url=csv_url,
        csv_path=Path(csv_path) if csv_path else None,
        **extra,
    )


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> PortalConfig:
    """
    Load portal configuration from YAML file(s).

    Minimal config::

        colleges:
          college1:
            name: Springfield Public School
            csv_url: https://docs.google.com/spreadsheets/d/<id>/gviz/tq?tqx=out:csv

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to a base configuration for inheritance.

    Returns:
        Fully validated PortalConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        is_self = potential_base.resolve() == config_path.resolve()
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and not is_self
            else {}
        )

    merged = _deep_merge(base_data, load_yaml(config_path))

    colleges_data = merged.get("colleges")
    if not colleges_data or not isinstance(colleges_data, dict):
        msg = "Config must specify a 'colleges' mapping"
        raise ValueError(msg)

    colleges = {
        str(college_id): _build_college(str(college_id), data)
        for college_id, data in colleges_data.items()
    }

    kwargs: dict[str, Any] = {
        "colleges": colleges,
        "fetch": FetchConfig(**(merged.get("fetch") or {})),
        "marks": MarksConfig(**(merged.get("marks") or {})),
        "logging": LoggingConfig(**(merged.get("logging") or {})),
    }
    if merged.get("data_root"):
        kwargs["data_root"] = Path(merged["data_root"])
    if merged.get("standards"):
        kwargs["standards"] = merged["standards"]

    return PortalConfig(**kwargs)
