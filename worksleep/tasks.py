"""Planned work queue for WorkSleep.

The front of the queue is the task currently being worked on. Operations
on ids that are not in the queue are silent no-ops.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from typing import Any

from worksleep.models import Period

log = logging.getLogger(__name__)


class TaskQueue:
    def __init__(self, periods: list[Period] | None = None) -> None:
        self._periods: deque[Period] = deque(periods or [])

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[Period]:
        return iter(self._periods)

    def front(self) -> Period | None:
        return self._periods[0] if self._periods else None

    def index_of(self, period_id: str) -> int | None:
        for i, p in enumerate(self._periods):
            if p.id == period_id:
                return i
        return None

    def find(self, period_id: str) -> Period | None:
        i = self.index_of(period_id)
        return None if i is None else self._periods[i]

    def enqueue_many(self, name: str, count: int) -> list[Period]:
        """Append *count* new periods named *name*. Non-positive counts add nothing."""
        added = [Period(name=name) for _ in range(max(0, count))]
        self._periods.extend(added)
        log.debug("Queued %d x %r", len(added), name)
        return added

    def remove(self, period_id: str) -> bool:
        i = self.index_of(period_id)
        if i is None:
            return False
        del self._periods[i]
        return True

    def move_to_front(self, period_id: str) -> bool:
        i = self.index_of(period_id)
        if i is None:
            return False
        if i > 0:
            period = self._periods[i]
            del self._periods[i]
            self._periods.appendleft(period)
        return True

    def move_up(self, period_id: str) -> bool:
        """Swap with the immediate predecessor; the head stays put."""
        i = self.index_of(period_id)
        if i is None:
            return False
        if i > 0:
            self._periods[i - 1], self._periods[i] = self._periods[i], self._periods[i - 1]
        return True

    def pop_front(self) -> Period | None:
        if not self._periods:
            return None
        return self._periods.popleft()

    def to_list(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self._periods]
