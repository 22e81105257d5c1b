"""Shared test fixtures for WorkSleep tests."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import pytest
import yaml

from worksleep.session import Session


TODAY = date(2026, 2, 11)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with a config.yaml."""
    root = tmp_path / "workspace"
    root.mkdir(parents=True)

    config = {
        "timezone": "UTC",
        "log_level": "debug",
        "goals": {
            "work_sleep_balance": 60,
            "target_work_count": 4,
            "target_bedtime": "00:15",
            "target_bedtime_next_day": True,
            "bedtime_pts_halflife": 45,
        },
    }
    (root / "config.yaml").write_text(
        yaml.dump(config, default_flow_style=False), encoding="utf-8"
    )

    os.environ["WORKSLEEP_ROOT"] = str(root)
    yield root
    if "WORKSLEEP_ROOT" in os.environ:
        del os.environ["WORKSLEEP_ROOT"]


@pytest.fixture
def session() -> Session:
    """A fresh session opened on TODAY with default goals."""
    return Session(current_date=TODAY)
