"""Tests for worksleep/models.py — bedtimes, goals, day records."""

from datetime import time

import pytest

from worksleep.models import (
    Bedtime,
    Period,
    Profile,
    WorkSleep,
    WorkSleepGoals,
    validate_goals,
)


def test_bedtime_from_str():
    bt = Bedtime.from_str("23:30")
    assert bt.time == time(23, 30)
    assert bt.next_day is False
    assert Bedtime.from_str(" 00:30 ", next_day=True).next_day is True


def test_bedtime_from_str_invalid():
    with pytest.raises(ValueError):
        Bedtime.from_str("25:00")


@pytest.mark.parametrize("text", ["23:00Z", "23:00+05:00", "T2300", "2300"])
def test_bedtime_from_str_rejects_non_clock_text(text):
    with pytest.raises(ValueError, match="HH:MM"):
        Bedtime.from_str(text)


def test_abs_diff_same_time_is_zero():
    assert Bedtime(time(23, 0)).abs_diff(Bedtime(time(23, 0))) == 0


def test_abs_diff_past_midnight():
    late = Bedtime(time(0, 30), next_day=True)
    target = Bedtime(time(23, 0))
    assert late.abs_diff(target) == 90
    assert target.abs_diff(late) == 90


def test_abs_diff_without_next_day_flag_is_same_day():
    early_morning = Bedtime(time(0, 30))
    target = Bedtime(time(23, 0))
    assert early_morning.abs_diff(target) == 22 * 60 + 30


def test_abs_diff_both_next_day():
    a = Bedtime(time(0, 10), next_day=True)
    b = Bedtime(time(1, 40), next_day=True)
    assert a.abs_diff(b) == 90


def test_abs_diff_truncates_seconds():
    assert Bedtime(time(23, 0, 59)).abs_diff(Bedtime(time(23, 0))) == 0
    assert Bedtime(time(23, 2, 30)).abs_diff(Bedtime(time(23, 0))) == 2


def test_abs_diff_symmetric():
    samples = [
        Bedtime(time(21, 45)),
        Bedtime(time(23, 59, 59)),
        Bedtime(time(0, 0), next_day=True),
        Bedtime(time(2, 15), next_day=True),
        Bedtime(time(6, 0)),
    ]
    for a in samples:
        for b in samples:
            assert a.abs_diff(b) == b.abs_diff(a)


def test_bedtime_to_str():
    assert Bedtime(time(23, 5)).to_str() == "23:05"
    assert Bedtime(time(0, 30), next_day=True).to_str() == "00:30 (+1d)"


def test_goals_defaults():
    g = WorkSleepGoals()
    assert g.work_sleep_balance == 70
    assert g.target_work_count == 6
    assert g.target_bedtime == Bedtime(time(23, 0))
    assert g.bedtime_pts_halflife == 30
    assert g.sleep_weight == 30


def test_goals_from_dict():
    g = WorkSleepGoals.from_dict({
        "work_sleep_balance": 50,
        "target_work_count": 8,
        "target_bedtime": "00:15",
        "target_bedtime_next_day": True,
        "bedtime_pts_halflife": 20,
        "unknown": "ignored",
    })
    assert g.work_sleep_balance == 50
    assert g.target_work_count == 8
    assert g.target_bedtime == Bedtime(time(0, 15), next_day=True)
    assert g.bedtime_pts_halflife == 20


def test_goals_from_dict_partial_uses_defaults():
    g = WorkSleepGoals.from_dict({"target_work_count": 3})
    assert g.target_work_count == 3
    assert g.work_sleep_balance == 70
    assert g.target_bedtime.time == time(23, 0)


def test_goals_from_dict_invalid():
    with pytest.raises(ValueError, match="target_work_count"):
        WorkSleepGoals.from_dict({"target_work_count": 0})


def test_validate_goals_collects_all_errors():
    errors = validate_goals({
        "work_sleep_balance": 120,
        "target_work_count": 0,
        "bedtime_pts_halflife": 0,
        "target_bedtime": "late",
    })
    assert len(errors) == 4


def test_validate_goals_rejects_bool():
    assert validate_goals({"target_work_count": True})


def test_validate_goals_requires_quoted_bedtime():
    errors = validate_goals({"target_bedtime": 1350})
    assert errors == ["target_bedtime must be a quoted 'HH:MM' string, got 1350"]
    assert validate_goals({"target_bedtime": "23:00+01:00"})
    assert validate_goals({"target_bedtime": "22:30"}) == []


def test_goals_copy_is_independent():
    g = WorkSleepGoals()
    c = g.copy()
    c.work_sleep_balance = 10
    c.target_bedtime = Bedtime(time(22, 0))
    assert g.work_sleep_balance == 70
    assert g.target_bedtime.time == time(23, 0)


def test_goals_to_dict_from_dict():
    g = WorkSleepGoals(work_sleep_balance=40, target_bedtime=Bedtime(time(0, 45), next_day=True))
    assert WorkSleepGoals.from_dict(g.to_dict()) == g


def test_work_sleep_defaults_and_to_dict():
    ws = WorkSleep()
    assert ws.actual_work_count == 0
    assert ws.actual_bedtime is None
    d = ws.to_dict()
    assert d["actual_bedtime"] is None
    assert d["score"] == 0


def test_period_ids_are_unique():
    ids = {Period(name="x").id for _ in range(50)}
    assert len(ids) == 50


def test_profile_from_dict():
    p = Profile.from_dict({"timezone": "Europe/Berlin", "log_level": "debug", "goals": {"work_sleep_balance": 55}})
    assert p.timezone == "Europe/Berlin"
    assert p.log_level == "DEBUG"
    assert p.goals.work_sleep_balance == 55


def test_profile_from_empty():
    p = Profile.from_dict({})
    assert p.timezone == "UTC"
    assert p.goals == WorkSleepGoals()
