"""Date-keyed day records and the weekly display window."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date, timedelta

from worksleep.models import WorkSleep, WorkSleepGoals

log = logging.getLogger(__name__)

WEEK_DAYS = 7
# Window offsets: trailing when nothing is recorded after the open day,
# otherwise centered with the open day in 4th position.
ROLLING_OFFSET = WEEK_DAYS - 1
CENTERED_OFFSET = WEEK_DAYS // 2


class WorkSleepData:
    """Day records kept in ascending date order, plus a week-window cursor."""

    def __init__(self, week_start: date | None = None) -> None:
        self._data: dict[date, WorkSleep] = {}
        self.week_start = week_start if week_start is not None else date.today() - timedelta(days=ROLLING_OFFSET)

    # ── Records ──────────────────────────────────────────────

    def get(self, day: date) -> WorkSleep | None:
        return self._data.get(day)

    def get_mut_or_create(self, day: date, goals: WorkSleepGoals) -> WorkSleep:
        """Return the record for *day*, creating it from a copy of *goals* if absent."""
        record = self._data.get(day)
        if record is not None:
            return record
        record = WorkSleep(goals=goals.copy())
        self._data[day] = record
        if len(self._data) > 1 and day < max(self._data):
            self._data = dict(sorted(self._data.items()))
        log.debug("Created day record for %s", day.isoformat())
        return record

    def resync_goals(self, day: date, goals: WorkSleepGoals) -> WorkSleep:
        """Replace the goals snapshot of *day* with a fresh copy; actuals untouched."""
        record = self.get_mut_or_create(day, goals)
        record.goals = goals.copy()
        log.debug("Resynced goals for %s", day.isoformat())
        return record

    def last_date(self) -> date | None:
        if not self._data:
            return None
        return next(reversed(self._data))

    def dates(self) -> list[date]:
        return list(self._data)

    def items(self) -> list[tuple[date, WorkSleep]]:
        return list(self._data.items())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, day: object) -> bool:
        return day in self._data

    def __iter__(self) -> Iterator[date]:
        return iter(self._data)

    # ── Week window ──────────────────────────────────────────

    def current_week(self) -> list[tuple[date, WorkSleep | None]]:
        """The 7 (date, record-or-None) pairs starting at week_start."""
        days = (self.week_start + timedelta(days=i) for i in range(WEEK_DAYS))
        return [(d, self._data.get(d)) for d in days]

    def recompute_week_start(self, current_date: date) -> date:
        """Anchor the window on *current_date*.

        Trailing (ends on current_date) when the store is empty or nothing is
        recorded after current_date; centered on current_date otherwise.
        """
        last = self.last_date()
        if last is None or last <= current_date:
            self.week_start = current_date - timedelta(days=ROLLING_OFFSET)
        else:
            self.week_start = current_date - timedelta(days=CENTERED_OFFSET)
        return self.week_start

    def advance_week(self) -> date:
        self.week_start += timedelta(days=WEEK_DAYS)
        return self.week_start

    def retreat_week(self) -> date:
        self.week_start -= timedelta(days=WEEK_DAYS)
        return self.week_start

    def to_dict(self) -> dict[str, object]:
        return {
            "week_start": self.week_start.isoformat(),
            "days": {d.isoformat(): r.to_dict() for d, r in self._data.items()},
        }
