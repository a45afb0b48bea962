"""Tests for collapsing weekly schedules into availability rows."""

from datetime import time

from booking_fixtures.services.availability import (
    DEFAULT_SCHEDULE,
    TimeRange,
    get_availability_from_schedule,
)


def test_default_schedule_is_weekday_working_hours():
    rows = get_availability_from_schedule(DEFAULT_SCHEDULE)

    assert len(rows) == 1
    assert rows[0].days == [1, 2, 3, 4, 5]
    assert rows[0].start_time == time(9, 0)
    assert rows[0].end_time == time(17, 0)


def test_days_with_identical_ranges_share_a_row():
    morning = TimeRange(time(8, 0), time(12, 0))
    afternoon = TimeRange(time(13, 0), time(18, 0))
    schedule = [
        [],
        [morning, afternoon],
        [morning],
        [],
        [afternoon],
        [morning],
        [],
    ]

    rows = get_availability_from_schedule(schedule)

    assert [(row.days, row.start_time, row.end_time) for row in rows] == [
        ([1, 2, 5], time(8, 0), time(12, 0)),
        ([1, 4], time(13, 0), time(18, 0)),
    ]


def test_empty_schedule_has_no_rows():
    assert get_availability_from_schedule([[] for _ in range(7)]) == []
