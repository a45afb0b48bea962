"""SQLAlchemy ORM models."""

from booking_fixtures.db.models.auth import (
    Membership,
    OrganizationSettings,
    Profile,
    Team,
    User,
    UserPassword,
)
from booking_fixtures.db.models.forms import RoutingForm
from booking_fixtures.db.models.integrations import Credential
from booking_fixtures.db.models.scheduling import (
    Availability,
    EventType,
    Host,
    Schedule,
    event_type_users,
)
from booking_fixtures.db.models.workflows import Workflow

__all__ = [
    "Availability",
    "Credential",
    "EventType",
    "Host",
    "Membership",
    "OrganizationSettings",
    "Profile",
    "RoutingForm",
    "Schedule",
    "Team",
    "User",
    "UserPassword",
    "Workflow",
    "event_type_users",
]
