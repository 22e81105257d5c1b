"""Daily score arithmetic for WorkSleep.

A day's score blends two parts that together top out at 100 points:

- work: ``actual_work_count * balance / target_work_count``
- sleep: ``(100 - balance) * 0.5 ** (deviation / halflife)`` where
  *deviation* is the distance in minutes between the recorded and the
  target bedtime. No recorded bedtime means zero sleep points.

The sum is rounded half away from zero.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from worksleep.models import WorkSleep


def work_points(actual_work_count: int, balance: int, target_work_count: int) -> float:
    """Points earned for completed work units."""
    if target_work_count <= 0:
        raise ValueError(f"target_work_count must be >= 1, got {target_work_count}")
    return actual_work_count * balance / target_work_count


def sleep_points(deviation_minutes: int, balance: int, halflife: int) -> float:
    """Points earned for a bedtime *deviation_minutes* away from target.

    Full ``100 - balance`` points on target, halving every *halflife* minutes.
    """
    if halflife <= 0:
        raise ValueError(f"bedtime_pts_halflife must be >= 1, got {halflife}")
    return (100 - balance) * 0.5 ** (deviation_minutes / halflife)


def round_score(value: float) -> int:
    """Round half away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def calc_score(record: WorkSleep) -> int:
    """Compute the rounded score of a single day record."""
    goals = record.goals
    total = work_points(record.actual_work_count, goals.work_sleep_balance, goals.target_work_count)
    if record.actual_bedtime is not None:
        total += sleep_points(
            record.actual_bedtime.abs_diff(goals.target_bedtime),
            goals.work_sleep_balance,
            goals.bedtime_pts_halflife,
        )
    return round_score(total)


def score_breakdown(record: WorkSleep) -> str:
    """Describe how a day's score was derived, with live numbers substituted.

    'work 6 * 70 / 6 = 70.00; sleep (100 - 70) * 0.5 ^ (90 / 30) = 3.75; score round(73.75) = 74'
    """
    goals = record.goals
    balance = goals.work_sleep_balance
    work = work_points(record.actual_work_count, balance, goals.target_work_count)
    parts = [f"work {record.actual_work_count} * {balance} / {goals.target_work_count} = {work:.2f}"]

    total = work
    if record.actual_bedtime is None:
        parts.append("sleep 0 (no bedtime)")
    else:
        deviation = record.actual_bedtime.abs_diff(goals.target_bedtime)
        sleep = sleep_points(deviation, balance, goals.bedtime_pts_halflife)
        total += sleep
        parts.append(
            f"sleep (100 - {balance}) * 0.5 ^ ({deviation} / {goals.bedtime_pts_halflife}) = {sleep:.2f}"
        )

    parts.append(f"score round({total:.2f}) = {round_score(total)}")
    return "; ".join(parts)
