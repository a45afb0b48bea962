"""Workflow-related enums."""

from enum import Enum


class WorkflowTriggerEvents(str, Enum):
    """Booking events that can trigger a reminder workflow."""

    BEFORE_EVENT = "BEFORE_EVENT"
    EVENT_CANCELLED = "EVENT_CANCELLED"
    NEW_EVENT = "NEW_EVENT"
    AFTER_EVENT = "AFTER_EVENT"
    RESCHEDULE_EVENT = "RESCHEDULE_EVENT"


class TimeUnit(str, Enum):
    """Unit for a workflow's time offset."""

    DAY = "DAY"
    HOUR = "HOUR"
    MINUTE = "MINUTE"
