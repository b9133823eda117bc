"""
YAML settings for dsl-tables runs.

Example settings file:

    encoding: utf-16
    fail_fast: true
    include_attribute_links: false
    log_level: INFO
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import SettingsError
from .reader import DEFAULT_ENCODING


@dataclass(frozen=True)
class Settings:
    """Options for one parse-and-report run."""
    encoding: str = DEFAULT_ENCODING
    fail_fast: bool = True
    include_attribute_links: bool = False
    log_level: str = "WARNING"

    def override(self, **values: Any) -> "Settings":
        """Return a copy with the given non-None values replaced."""
        changes = {k: v for k, v in values.items() if v is not None}
        return replace(self, **changes)


_FIELD_TYPES: Dict[str, type] = {
    "encoding": str,
    "fail_fast": bool,
    "include_attribute_links": bool,
    "log_level": str,
}


def load_settings(
    source: Union[str, Path, Dict[str, Any], None] = None,
) -> Settings:
    """Load settings from a YAML file, a YAML string or a dictionary.

    Args:
        source: Path to YAML file, YAML string, parsed dictionary, or None
            for the defaults

    Returns:
        Settings object

    Raises:
        SettingsError: If the content cannot be parsed or is invalid
        FileNotFoundError: If the file does not exist
    """
    if source is None:
        return Settings()

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = _load_yaml(f.read())
    else:
        data = _load_yaml(source)

    return _parse_settings(data)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(text: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise SettingsError(f"Invalid YAML: {e}", line=line_num) from e

    # An empty file means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError("YAML root must be a mapping (dictionary)")
    return data


def _parse_settings(data: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise SettingsError(
            f"Setting names must be strings, got: {', '.join(map(repr, bad_keys))}"
        )
    unknown = sorted(set(data) - known)
    if unknown:
        raise SettingsError(
            f"Unknown setting(s): {', '.join(map(str, unknown))}. "
            f"Valid: {', '.join(sorted(known))}"
        )

    for key, value in data.items():
        expected = _FIELD_TYPES[key]
        if not isinstance(value, expected):
            raise SettingsError(
                f"Setting '{key}' must be a {expected.__name__}, got {type(value).__name__}"
            )

    log_level: Optional[str] = data.get("log_level")
    if log_level is not None:
        data = {**data, "log_level": log_level.upper()}
        if not isinstance(logging.getLevelName(data["log_level"]), int):
            raise SettingsError(f"Unknown log level: {log_level!r}")

    return Settings(**data)
