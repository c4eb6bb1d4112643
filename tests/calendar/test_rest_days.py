"""
tests/calendar/test_rest_days.py

Covers:
  - Default rest day (Sunday) flagging
  - Substituting another rest day
  - Parsing weekday names
"""

from datetime import date

import pytest

from leavecalc.calendar import REST_DAY, CalendarError, RestDay, flag_rest_day


class TestFlagRestDay:

    def test_default_is_sunday(self):
        assert REST_DAY is RestDay.SUNDAY

    def test_sunday_is_flagged(self):
        assert flag_rest_day(date(2024, 1, 7))

    @pytest.mark.parametrize("day", range(1, 7))
    def test_monday_to_saturday_are_not_flagged(self, day):
        assert not flag_rest_day(date(2024, 1, day))

    def test_other_rest_day(self):
        assert flag_rest_day(date(2024, 1, 6), RestDay.SATURDAY)
        assert not flag_rest_day(date(2024, 1, 7), RestDay.SATURDAY)

    def test_numbering_matches_weekday(self):
        assert [d.value for d in RestDay] == list(range(7))
        assert RestDay(date(2024, 1, 1).weekday()) is RestDay.MONDAY


class TestParse:

    @pytest.mark.parametrize("name", ["sunday", "SUNDAY", " Sunday "])
    def test_case_and_whitespace_insensitive(self, name):
        assert RestDay.parse(name) is RestDay.SUNDAY

    def test_unknown_name_raises(self):
        with pytest.raises(CalendarError, match="Unknown day"):
            RestDay.parse("someday")
