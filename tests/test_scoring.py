"""Tests for worksleep/scoring.py — score formula and breakdown text."""

from datetime import time

import pytest

from worksleep.models import Bedtime, WorkSleep, WorkSleepGoals
from worksleep.scoring import (
    calc_score,
    round_score,
    score_breakdown,
    sleep_points,
    work_points,
)


def _record(actual_work=6, bedtime=None, **goal_kwargs):
    return WorkSleep(goals=WorkSleepGoals(**goal_kwargs), actual_work_count=actual_work, actual_bedtime=bedtime)


def test_score_without_bedtime():
    assert calc_score(_record(actual_work=6)) == 70


def test_score_bedtime_on_target():
    assert calc_score(_record(actual_work=6, bedtime=Bedtime(time(23, 0)))) == 100


def test_score_sleep_only():
    assert calc_score(_record(actual_work=0, bedtime=Bedtime(time(23, 0)))) == 30


def test_sleep_points_halve_every_halflife():
    assert sleep_points(0, 70, 30) == 30
    assert sleep_points(30, 70, 30) == 15
    assert sleep_points(60, 70, 30) == 7.5


def test_sleep_points_never_negative():
    assert sleep_points(24 * 60, 70, 30) > 0
    assert calc_score(_record(actual_work=0, bedtime=Bedtime(time(12, 0)))) == 0


def test_score_past_midnight_bedtime():
    # 90 minutes late -> 30 * 0.125 = 3.75
    record = _record(actual_work=6, bedtime=Bedtime(time(0, 30), next_day=True))
    assert calc_score(record) == 74


def test_work_points_can_exceed_target():
    assert work_points(9, 70, 6) == 105
    assert calc_score(_record(actual_work=9)) == 105


def test_round_half_away_from_zero():
    assert round_score(0.5) == 1
    assert round_score(2.5) == 3
    assert round_score(1.49) == 1
    assert round_score(-2.5) == -3


def test_score_rounds_half_up():
    # 1 * 50 / 4 = 12.5
    assert calc_score(_record(actual_work=1, work_sleep_balance=50, target_work_count=4)) == 13


def test_zero_target_work_count_rejected():
    with pytest.raises(ValueError, match="target_work_count"):
        calc_score(_record(target_work_count=0))


def test_zero_halflife_rejected():
    with pytest.raises(ValueError, match="halflife"):
        sleep_points(10, 70, 0)


def test_record_calc_score_method():
    record = _record(actual_work=3)
    assert record.calc_score() == calc_score(record) == 35


def test_score_breakdown_with_bedtime():
    record = _record(actual_work=6, bedtime=Bedtime(time(0, 30), next_day=True))
    assert score_breakdown(record) == (
        "work 6 * 70 / 6 = 70.00; "
        "sleep (100 - 70) * 0.5 ^ (90 / 30) = 3.75; "
        "score round(73.75) = 74"
    )


def test_score_breakdown_without_bedtime():
    text = score_breakdown(_record(actual_work=2))
    assert "sleep 0 (no bedtime)" in text
    assert text.endswith("score round(23.33) = 23")
