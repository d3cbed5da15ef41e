"""core/day_of_week.py のテスト"""

from datetime import date, datetime

import pytest

from koyomi.core.day_of_week import DayOfWeek


class TestDayOfWeek:
    def test_values(self):
        assert DayOfWeek.SUNDAY == 1
        assert DayOfWeek.SATURDAY == 7
        assert [d.value for d in DayOfWeek] == [1, 2, 3, 4, 5, 6, 7]

    def test_label(self):
        assert DayOfWeek.SUNDAY.label == '日'
        assert DayOfWeek.WEDNESDAY.label == '水'
        assert DayOfWeek.SATURDAY.label == '土'


class TestRebase:
    def test_monday_from_zero(self):
        assert DayOfWeek.MONDAY.rebase(0) == 1

    def test_sunday_is_start(self):
        assert DayOfWeek.SUNDAY.rebase(0) == 0
        assert DayOfWeek.SUNDAY.rebase(10) == 10

    def test_saturday(self):
        assert DayOfWeek.SATURDAY.rebase(1) == 7
        assert DayOfWeek.SATURDAY.rebase(0) == 6


class TestMatch:
    @pytest.mark.parametrize('value', range(1, 8))
    def test_in_range(self, value):
        assert DayOfWeek.match(value).value == value

    @pytest.mark.parametrize('value', [0, 8, -1])
    def test_out_of_range(self, value):
        assert DayOfWeek.match(value) is None


class TestFromDate:
    def test_date(self):
        assert DayOfWeek.from_date(date(2024, 3, 3)) is DayOfWeek.SUNDAY
        assert DayOfWeek.from_date(date(2024, 3, 4)) is DayOfWeek.MONDAY

    def test_datetime(self):
        assert DayOfWeek.from_date(datetime(2024, 3, 9, 23, 59)) is DayOfWeek.SATURDAY
