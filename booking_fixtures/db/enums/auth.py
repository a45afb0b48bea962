"""User and membership enums."""

from enum import Enum


class UserPermissionRole(str, Enum):
    """Platform-wide role stored on the user row."""

    USER = "USER"
    ADMIN = "ADMIN"


class MembershipRole(str, Enum):
    """
    Role of a user inside a team or organization.

    Every team has at least one OWNER, created together with the team.
    """

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class TimeZone(str, Enum):
    """Time zones used by fixture users."""

    USA = "America/New_York"
    UK = "Europe/London"


DEFAULT_TIME_ZONE = TimeZone.UK
