"""Weekly availability templates.

A schedule is seven lists of time ranges indexed by weekday (Sunday=0).
Availability rows group together every weekday that shares an identical
start/end pair, so the default Monday-Friday 09:00-17:00 week becomes a
single row with days [1, 2, 3, 4, 5].
"""

from datetime import time
from typing import NamedTuple, Sequence


class TimeRange(NamedTuple):
    """A start/end pair within one day."""
    start: time
    end: time


class AvailabilityData(NamedTuple):
    """Column values for one Availability row."""
    days: list[int]
    start_time: time
    end_time: time


Schedule = Sequence[Sequence[TimeRange]]

DEFAULT_START_TIME = time(9, 0)
DEFAULT_END_TIME = time(17, 0)

_WORKDAY = (TimeRange(DEFAULT_START_TIME, DEFAULT_END_TIME),)

DEFAULT_SCHEDULE: tuple[tuple[TimeRange, ...], ...] = (
    (),  # Sunday
    _WORKDAY,
    _WORKDAY,
    _WORKDAY,
    _WORKDAY,
    _WORKDAY,
    (),  # Saturday
)


def get_availability_from_schedule(schedule: Schedule) -> list[AvailabilityData]:
    """Collapse a weekly schedule into availability rows, first-seen order."""
    availability: list[AvailabilityData] = []
    for day, ranges in enumerate(schedule):
        for time_range in ranges:
            existing = next(
                (
                    row
                    for row in availability
                    if row.start_time == time_range.start and row.end_time == time_range.end
                ),
                None,
            )
            if existing is not None:
                if day not in existing.days:
                    existing.days.append(day)
                continue
            availability.append(AvailabilityData([day], time_range.start, time_range.end))
    return availability
