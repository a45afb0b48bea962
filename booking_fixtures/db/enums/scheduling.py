"""Event type and scheduling enums."""

from enum import Enum


class SchedulingType(str, Enum):
    """
    Host assignment policy for team event types.

    COLLECTIVE requires every host, so every host is fixed.
    """

    ROUND_ROBIN = "ROUND_ROBIN"
    COLLECTIVE = "COLLECTIVE"
    MANAGED = "MANAGED"


DEFAULT_TEAM_SCHEDULING_TYPE = SchedulingType.COLLECTIVE
