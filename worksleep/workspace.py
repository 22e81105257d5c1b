"""Workspace root, configuration and local date helpers for WorkSleep."""

from __future__ import annotations

import os
from datetime import date, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from worksleep.fileio import read_yaml
from worksleep.models import Profile


def workspace_root() -> Path:
    """Directory holding config.yaml and worksleep.log.

    WORKSLEEP_ROOT wins when set to a non-blank value; otherwise ~/worksleep.
    """
    env = os.environ.get("WORKSLEEP_ROOT", "").strip()
    root = Path(env) if env else Path.home() / "worksleep"
    return root.expanduser().resolve()


def config_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "config.yaml"


def log_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "worksleep.log"


def _check_goals_section(raw: Any, path: Path) -> None:
    """Reject config shapes that YAML accepts but WorkSleep cannot use."""
    if raw is None:
        return
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: goals must be a mapping, got {type(raw).__name__}")
    bedtime = raw.get("target_bedtime")
    # YAML 1.1 reads an unquoted 22:30 as the base-60 integer 1350.
    if isinstance(bedtime, int) and not isinstance(bedtime, bool):
        hours, minutes = divmod(bedtime, 60)
        raise ValueError(
            f"{path}: goals.target_bedtime was read as the number {bedtime}; "
            f"quote it, e.g. target_bedtime: \"{hours:02d}:{minutes:02d}\""
        )


def load_profile(root: Path | None = None) -> Profile:
    """Load config.yaml into a Profile. Missing file means defaults.

    Raises ValueError when the file is not a YAML mapping or the goals
    section holds invalid values.
    """
    path = config_path(root)
    raw = read_yaml(path)
    _check_goals_section(raw.get("goals"), path)
    return Profile.from_dict(raw)


def get_user_timezone(profile: Profile) -> ZoneInfo:
    """Resolve the profile's timezone, defaulting to UTC."""
    try:
        return ZoneInfo(profile.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo("UTC")


def today(profile: Profile | None = None) -> date:
    """Today's calendar date in the user's timezone."""
    if profile is None:
        profile = load_profile()
    return datetime.now(get_user_timezone(profile)).date()
