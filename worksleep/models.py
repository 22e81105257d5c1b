"""Typed dataclasses for the WorkSleep data model.

Config-facing models provide from_dict/to_dict. Unknown keys are ignored;
missing keys use defaults. Times render as 'HH:MM', dates as ISO strings.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import time, timedelta
from typing import Any

from worksleep.parsing import parse_time_of_day
from worksleep.scoring import calc_score


DEFAULT_WORK_SLEEP_BALANCE = 70
DEFAULT_TARGET_WORK_COUNT = 6
DEFAULT_TARGET_BEDTIME = time(23, 0)
DEFAULT_BEDTIME_PTS_HALFLIFE = 30


# ── Bedtime ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Bedtime:
    """A clock time, optionally tagged as falling on the following day."""

    time: time
    next_day: bool = False

    @classmethod
    def from_str(cls, s: str, next_day: bool = False) -> Bedtime:
        """Parse '23:00' or '23:00:00'. Raises ValueError on bad input."""
        parsed = parse_time_of_day(s)
        if parsed is None:
            raise ValueError(f"Invalid bedtime: {s!r} (expected HH:MM)")
        return cls(time=parsed, next_day=next_day)

    def _offset(self) -> timedelta:
        t = self.time
        offset = timedelta(hours=t.hour, minutes=t.minute, seconds=t.second, microseconds=t.microsecond)
        if self.next_day:
            offset += timedelta(days=1)
        return offset

    def abs_diff(self, other: Bedtime) -> int:
        """Whole minutes between two bedtimes, next-day values shifted by 24h."""
        delta = abs(other._offset() - self._offset())
        return int(delta.total_seconds()) // 60

    def to_str(self) -> str:
        s = self.time.strftime("%H:%M")
        return f"{s} (+1d)" if self.next_day else s

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time.strftime("%H:%M"), "next_day": self.next_day}


# ── Goals ─────────────────────────────────────────────────────


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_goals(d: dict[str, Any]) -> list[str]:
    """Validate a goals mapping and return list of errors (empty if valid)."""
    errors = []
    if "work_sleep_balance" in d:
        v = d["work_sleep_balance"]
        if not _is_int(v) or v < 0 or v > 100:
            errors.append("work_sleep_balance must be integer 0-100")
    if "target_work_count" in d:
        v = d["target_work_count"]
        if not _is_int(v) or v < 1:
            errors.append("target_work_count must be integer >= 1")
    if "bedtime_pts_halflife" in d:
        v = d["bedtime_pts_halflife"]
        if not _is_int(v) or v < 1:
            errors.append("bedtime_pts_halflife must be integer >= 1 (minutes)")
    if "target_bedtime" in d:
        v = d["target_bedtime"]
        if not isinstance(v, str):
            errors.append(f"target_bedtime must be a quoted 'HH:MM' string, got {v!r}")
        elif parse_time_of_day(v) is None:
            errors.append(f"Invalid target_bedtime: {v!r} (expected HH:MM)")
    return errors


@dataclass
class WorkSleepGoals:
    work_sleep_balance: int = DEFAULT_WORK_SLEEP_BALANCE  # points for work; sleep gets the rest of 100
    target_work_count: int = DEFAULT_TARGET_WORK_COUNT
    target_bedtime: Bedtime = field(default_factory=lambda: Bedtime(DEFAULT_TARGET_BEDTIME))
    bedtime_pts_halflife: int = DEFAULT_BEDTIME_PTS_HALFLIFE  # minutes

    @property
    def sleep_weight(self) -> int:
        return 100 - self.work_sleep_balance

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> WorkSleepGoals:
        """Build goals from a config mapping. Raises ValueError listing all problems."""
        if not d or not isinstance(d, dict):
            return cls()
        errors = validate_goals(d)
        if errors:
            raise ValueError("Invalid goals: " + "; ".join(errors))
        bedtime = Bedtime(DEFAULT_TARGET_BEDTIME)
        if "target_bedtime" in d:
            bedtime = Bedtime.from_str(
                d["target_bedtime"],
                next_day=bool(d.get("target_bedtime_next_day", False)),
            )
        return cls(
            work_sleep_balance=d.get("work_sleep_balance", DEFAULT_WORK_SLEEP_BALANCE),
            target_work_count=d.get("target_work_count", DEFAULT_TARGET_WORK_COUNT),
            target_bedtime=bedtime,
            bedtime_pts_halflife=d.get("bedtime_pts_halflife", DEFAULT_BEDTIME_PTS_HALFLIFE),
        )

    def copy(self) -> WorkSleepGoals:
        # Bedtime is frozen, so a shallow replace never aliases mutable state.
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "work_sleep_balance": self.work_sleep_balance,
            "target_work_count": self.target_work_count,
            "target_bedtime": self.target_bedtime.time.strftime("%H:%M"),
            "target_bedtime_next_day": self.target_bedtime.next_day,
            "bedtime_pts_halflife": self.bedtime_pts_halflife,
        }


# ── Day record ────────────────────────────────────────────────


@dataclass
class WorkSleep:
    """One calendar day: its own goals snapshot plus what actually happened."""

    goals: WorkSleepGoals = field(default_factory=WorkSleepGoals)
    actual_work_count: int = 0
    actual_bedtime: Bedtime | None = None

    def calc_score(self) -> int:
        return calc_score(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "goals": self.goals.to_dict(),
            "actual_work_count": self.actual_work_count,
            "actual_bedtime": self.actual_bedtime.to_dict() if self.actual_bedtime else None,
            "score": self.calc_score(),
        }


# ── Task queue entries & input buffers ────────────────────────


def new_period_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Period:
    """A single planned unit of work."""

    id: str = field(default_factory=new_period_id)
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class NewTask:
    name: str = ""
    quantity: str = "1"


@dataclass
class BedtimeInput:
    time: str = ""
    next_day: bool = False


# ── Profile ───────────────────────────────────────────────────


@dataclass
class Profile:
    timezone: str = "UTC"
    log_level: str = "INFO"
    goals: WorkSleepGoals = field(default_factory=WorkSleepGoals)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Profile:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            timezone=str(d.get("timezone", "UTC")),
            log_level=str(d.get("log_level", "INFO")).upper(),
            goals=WorkSleepGoals.from_dict(d.get("goals") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timezone": self.timezone,
            "log_level": self.log_level,
            "goals": self.goals.to_dict(),
        }
