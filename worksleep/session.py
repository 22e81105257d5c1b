"""Session state and command handling for WorkSleep.

A Session is owned by one event loop. Every user action is expressed as a
command dataclass and applied with ``Session.handle``; the view reads the
query methods afterwards. Bad text in an input never raises: the command
is logged and the previous state is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

from worksleep.models import (
    Bedtime,
    BedtimeInput,
    NewTask,
    Period,
    Profile,
    WorkSleep,
    WorkSleepGoals,
)
from worksleep.parsing import parse_bounded_int, parse_quantity, parse_time_of_day
from worksleep.scoring import score_breakdown
from worksleep.store import WorkSleepData
from worksleep.tasks import TaskQueue

log = logging.getLogger(__name__)


# ── Commands ──────────────────────────────────────────────────


@dataclass(frozen=True)
class SetCurrentDate:
    date: date


@dataclass(frozen=True)
class AddTask:
    name: str
    quantity: str = "1"


@dataclass(frozen=True)
class NewTaskNameChanged:
    text: str


@dataclass(frozen=True)
class NewTaskQuantityChanged:
    text: str


@dataclass(frozen=True)
class AddNewTask:
    pass


@dataclass(frozen=True)
class DeleteTask:
    id: str


@dataclass(frozen=True)
class MoveTaskToTop:
    id: str


@dataclass(frozen=True)
class MoveTaskUp:
    id: str


@dataclass(frozen=True)
class FinishedTopTask:
    pass


@dataclass(frozen=True)
class SetBedtime:
    text: str
    next_day: bool = False


@dataclass(frozen=True)
class BedtimeTextChanged:
    text: str


@dataclass(frozen=True)
class BedtimeNextDayChanged:
    next_day: bool


@dataclass(frozen=True)
class SubmitBedtime:
    pass


@dataclass(frozen=True)
class ViewNextWeek:
    pass


@dataclass(frozen=True)
class ViewPreviousWeek:
    pass


@dataclass(frozen=True)
class SetWorkSleepBalance:
    text: str


@dataclass(frozen=True)
class SetTargetWorkCount:
    text: str


@dataclass(frozen=True)
class SetTargetBedtime:
    text: str
    next_day: bool = False


@dataclass(frozen=True)
class SetBedtimeHalflife:
    text: str


# ── Session ───────────────────────────────────────────────────


class Session:
    def __init__(
        self,
        current_date: date,
        goals: WorkSleepGoals | None = None,
    ) -> None:
        self.current_date = current_date
        self.new_task = NewTask()
        self.bedtime_input = BedtimeInput()
        self.queue = TaskQueue()
        self.goals = goals if goals is not None else WorkSleepGoals()
        self.data = WorkSleepData()
        self.data.recompute_week_start(current_date)

        self._handlers: dict[type, Callable[[Any], None]] = {
            SetCurrentDate: self._set_current_date,
            AddTask: self._add_task,
            NewTaskNameChanged: self._new_task_name_changed,
            NewTaskQuantityChanged: self._new_task_quantity_changed,
            AddNewTask: self._add_new_task,
            DeleteTask: self._delete_task,
            MoveTaskToTop: self._move_task_to_top,
            MoveTaskUp: self._move_task_up,
            FinishedTopTask: self._finished_top_task,
            SetBedtime: self._set_bedtime,
            BedtimeTextChanged: self._bedtime_text_changed,
            BedtimeNextDayChanged: self._bedtime_next_day_changed,
            SubmitBedtime: self._submit_bedtime,
            ViewNextWeek: self._view_next_week,
            ViewPreviousWeek: self._view_previous_week,
            SetWorkSleepBalance: self._set_work_sleep_balance,
            SetTargetWorkCount: self._set_target_work_count,
            SetTargetBedtime: self._set_target_bedtime,
            SetBedtimeHalflife: self._set_bedtime_halflife,
        }

    @classmethod
    def from_profile(cls, profile: Profile, today: date) -> Session:
        return cls(current_date=today, goals=profile.goals.copy())

    def handle(self, command: object) -> None:
        """Apply a single command. Unknown command types raise TypeError."""
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unknown command: {command!r}")
        log.debug("Command %r", command)
        handler(command)

    # ── Queries ──────────────────────────────────────────────

    def week(self) -> list[tuple[date, WorkSleep | None]]:
        return self.data.current_week()

    def tasks(self) -> list[Period]:
        return list(self.queue)

    def current_task(self) -> Period | None:
        return self.queue.front()

    def current_record(self) -> WorkSleep | None:
        return self.data.get(self.current_date)

    def score_breakdown(self) -> str:
        record = self.current_record()
        if record is None:
            return f"No data for {self.current_date.isoformat()}"
        return score_breakdown(record)

    def snapshot(self) -> dict[str, Any]:
        """Everything the view renders, as plain data."""
        return {
            "current_date": self.current_date.isoformat(),
            "week_start": self.data.week_start.isoformat(),
            "week": [
                {"date": d.isoformat(), "record": r.to_dict() if r else None}
                for d, r in self.week()
            ],
            "tasks": self.queue.to_list(),
            "current_task": self.current_task().to_dict() if self.current_task() else None,
            "goals": self.goals.to_dict(),
            "score_breakdown": self.score_breakdown(),
            "new_task": {"name": self.new_task.name, "quantity": self.new_task.quantity},
            "bedtime_input": {"time": self.bedtime_input.time, "next_day": self.bedtime_input.next_day},
        }

    # ── Date & week navigation ───────────────────────────────

    def _set_current_date(self, cmd: SetCurrentDate) -> None:
        self.current_date = cmd.date
        self.data.recompute_week_start(cmd.date)

    def _view_next_week(self, cmd: ViewNextWeek) -> None:
        self.data.advance_week()

    def _view_previous_week(self, cmd: ViewPreviousWeek) -> None:
        self.data.retreat_week()

    # ── Tasks ────────────────────────────────────────────────

    def _add_task(self, cmd: AddTask) -> None:
        count = parse_quantity(cmd.quantity)
        self.queue.enqueue_many(cmd.name, count)

    def _new_task_name_changed(self, cmd: NewTaskNameChanged) -> None:
        self.new_task.name = cmd.text

    def _new_task_quantity_changed(self, cmd: NewTaskQuantityChanged) -> None:
        self.new_task.quantity = cmd.text

    def _add_new_task(self, cmd: AddNewTask) -> None:
        self._add_task(AddTask(self.new_task.name, self.new_task.quantity))

    def _delete_task(self, cmd: DeleteTask) -> None:
        self.queue.remove(cmd.id)

    def _move_task_to_top(self, cmd: MoveTaskToTop) -> None:
        self.queue.move_to_front(cmd.id)

    def _move_task_up(self, cmd: MoveTaskUp) -> None:
        self.queue.move_up(cmd.id)

    def _finished_top_task(self, cmd: FinishedTopTask) -> None:
        period = self.queue.pop_front()
        if period is None:
            return
        record = self.data.get_mut_or_create(self.current_date, self.goals)
        record.actual_work_count += 1
        log.info(
            "Finished %r on %s (work count %d)",
            period.name, self.current_date.isoformat(), record.actual_work_count,
        )

    # ── Bedtime ──────────────────────────────────────────────

    def _set_bedtime(self, cmd: SetBedtime) -> None:
        parsed = parse_time_of_day(cmd.text)
        if parsed is None:
            log.debug("Ignoring bedtime %r", cmd.text)
            return
        record = self.data.get_mut_or_create(self.current_date, self.goals)
        record.actual_bedtime = Bedtime(parsed, cmd.next_day)

    def _bedtime_text_changed(self, cmd: BedtimeTextChanged) -> None:
        self.bedtime_input.time = cmd.text

    def _bedtime_next_day_changed(self, cmd: BedtimeNextDayChanged) -> None:
        self.bedtime_input.next_day = cmd.next_day

    def _submit_bedtime(self, cmd: SubmitBedtime) -> None:
        self._set_bedtime(SetBedtime(self.bedtime_input.time, self.bedtime_input.next_day))

    # ── Goals ────────────────────────────────────────────────

    def _update_goal(self, name: str, value: Any) -> None:
        setattr(self.goals, name, value)
        self.data.resync_goals(self.current_date, self.goals)
        log.info("Goal %s set to %s for %s", name, value, self.current_date.isoformat())

    def _set_work_sleep_balance(self, cmd: SetWorkSleepBalance) -> None:
        value = parse_bounded_int(cmd.text, 0, 100)
        if value is None:
            log.debug("Ignoring work/sleep balance %r", cmd.text)
            return
        self._update_goal("work_sleep_balance", value)

    def _set_target_work_count(self, cmd: SetTargetWorkCount) -> None:
        value = parse_bounded_int(cmd.text, 1)
        if value is None:
            log.debug("Ignoring target work count %r", cmd.text)
            return
        self._update_goal("target_work_count", value)

    def _set_target_bedtime(self, cmd: SetTargetBedtime) -> None:
        parsed = parse_time_of_day(cmd.text)
        if parsed is None:
            log.debug("Ignoring target bedtime %r", cmd.text)
            return
        self._update_goal("target_bedtime", Bedtime(parsed, cmd.next_day))

    def _set_bedtime_halflife(self, cmd: SetBedtimeHalflife) -> None:
        value = parse_bounded_int(cmd.text, 1)
        if value is None:
            log.debug("Ignoring bedtime half-life %r", cmd.text)
            return
        self._update_goal("bedtime_pts_halflife", value)
