"""Read-only file helpers for WorkSleep configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_text(path: Path) -> str:
    """Read a UTF-8 text file; a missing file reads as ''."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping; missing or blank file -> {}.

    Raises ValueError naming *path* when the text is not valid YAML or its
    top level is not a mapping.
    """
    text = read_text(path)
    if not text.strip():
        return {}
    try:
        result = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"{path}: not valid YAML ({e})") from e
    if result is None:
        return {}
    if not isinstance(result, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(result).__name__}")
    return result
