"""Enum definitions for application constants."""

from booking_fixtures.db.enums.auth import (
    DEFAULT_TIME_ZONE,
    MembershipRole,
    TimeZone,
    UserPermissionRole,
)
from booking_fixtures.db.enums.scheduling import (
    DEFAULT_TEAM_SCHEDULING_TYPE,
    SchedulingType,
)
from booking_fixtures.db.enums.workflows import TimeUnit, WorkflowTriggerEvents

__all__ = [
    "DEFAULT_TEAM_SCHEDULING_TYPE",
    "DEFAULT_TIME_ZONE",
    "MembershipRole",
    "SchedulingType",
    "TimeUnit",
    "TimeZone",
    "UserPermissionRole",
    "WorkflowTriggerEvents",
]
