"""Tests for worksleep/parsing.py — free-text inputs."""

from datetime import time

from worksleep.parsing import parse_bounded_int, parse_int, parse_quantity, parse_time_of_day


def test_parse_int():
    assert parse_int("6") == 6
    assert parse_int(" -2 ") == -2
    assert parse_int("6.5") is None
    assert parse_int("") is None
    assert parse_int("six") is None


def test_parse_int_ascii_digits_only():
    assert parse_int("1_0") is None
    assert parse_int("\u0663") is None  # Arabic-Indic three
    assert parse_int("\uff16") is None  # fullwidth six
    assert parse_int("+4") == 4
    assert parse_int("- 4") is None


def test_parse_quantity_fallback():
    assert parse_quantity("3") == 3
    assert parse_quantity("abc") == 1
    assert parse_quantity("") == 1
    assert parse_quantity("x", default=2) == 2


def test_parse_time_of_day():
    assert parse_time_of_day("23:00") == time(23, 0)
    assert parse_time_of_day(" 00:30 ") == time(0, 30)
    assert parse_time_of_day("23:15:30") == time(23, 15, 30)


def test_parse_time_of_day_invalid():
    assert parse_time_of_day("25:00") is None
    assert parse_time_of_day("") is None
    assert parse_time_of_day("late") is None


def test_parse_time_of_day_rejects_offsets_and_compact_forms():
    assert parse_time_of_day("23:00Z") is None
    assert parse_time_of_day("23:00+05:00") is None
    assert parse_time_of_day("T2300") is None
    assert parse_time_of_day("2300") is None
    assert parse_time_of_day("23:00:00.5") is None
    assert parse_time_of_day("9:30") is None


def test_parse_bounded_int():
    assert parse_bounded_int("50", 0, 100) == 50
    assert parse_bounded_int("0", 0, 100) == 0
    assert parse_bounded_int("101", 0, 100) is None
    assert parse_bounded_int("0", 1) is None
    assert parse_bounded_int("999", 1) == 999
    assert parse_bounded_int("x", 1) is None
