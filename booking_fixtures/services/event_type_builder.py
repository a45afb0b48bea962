"""Event types for fixture users and teams."""

import logging
from enum import Enum
from typing import Any, Iterable, Mapping

from sqlalchemy.orm import Session

from booking_fixtures.core.structured_logging import build_log_context
from booking_fixtures.db.enums import DEFAULT_TEAM_SCHEDULING_TYPE, SchedulingType
from booking_fixtures.db.models import EventType, Host, Team, User

logger = logging.getLogger(__name__)

TEAM_EVENT_TITLE = "Team Event - 30min"
TEAM_EVENT_SLUG = "team-event-30min"
DEFAULT_TEAM_EVENT_LENGTH = 30

# Created for every fixture user, in this order, before any extras
DEFAULT_EVENT_TYPES: tuple[Mapping[str, Any], ...] = (
    {"title": "30 min", "slug": "30-min", "length": 30},
    {"title": "Paid", "slug": "paid", "length": 30, "price": 1000},
    {"title": "Opt in", "slug": "opt-in", "length": 30, "requires_confirmation": True},
    {"title": "Seated", "slug": "seated", "length": 30, "seats_per_time_slot": 2},
)


def is_fixed_host(scheduling_type: SchedulingType | str | None) -> bool:
    """Hosts are fixed exactly when every host must attend (COLLECTIVE)."""
    if isinstance(scheduling_type, Enum):
        scheduling_type = scheduling_type.value
    return scheduling_type == SchedulingType.COLLECTIVE.value


def build_user_event_type(user: User, data: Mapping[str, Any]) -> EventType:
    """Event type owned by and associated with user, on the user's first profile if any."""
    event_type = EventType(**dict(data))
    event_type.owner_id = user.id
    event_type.users.append(user)
    if user.profiles:
        event_type.profile_id = user.profiles[0].id
    return event_type


def create_user_event_types(
    db: Session,
    user: User,
    extra: Iterable[Mapping[str, Any]] | None = None,
) -> list[EventType]:
    """Create the default event types then any extras, one commit each."""
    created = []
    for data in [*DEFAULT_EVENT_TYPES, *(extra or [])]:
        event_type = build_user_event_type(user, data)
        db.add(event_type)
        db.commit()
        created.append(event_type)

    logger.info(
        f"Created {len(created)} event types for user {user.id}",
        extra=build_log_context(user_id=user.id),
    )
    return created


def create_team_event_type(
    db: Session,
    user: User,
    team: Team,
    *,
    scheduling_type: SchedulingType | None = None,
    title: str | None = None,
    slug: str | None = None,
    length: int | None = None,
) -> EventType:
    """
    Create a team event type hosted by user.

    Title and slug default to the team-id-suffixed template; scheduling type
    defaults to COLLECTIVE.
    """
    effective_type = scheduling_type or DEFAULT_TEAM_SCHEDULING_TYPE
    event_type = EventType(
        title=title or f"{TEAM_EVENT_TITLE}-team-id-{team.id}",
        slug=slug or f"{TEAM_EVENT_SLUG}-team-id-{team.id}",
        length=length or DEFAULT_TEAM_EVENT_LENGTH,
        scheduling_type=effective_type.value,
        team_id=team.id,
        owner_id=user.id,
    )
    event_type.users.append(user)
    event_type.hosts.append(Host(user_id=user.id, is_fixed=is_fixed_host(effective_type)))
    db.add(event_type)
    db.commit()
    db.refresh(event_type)

    logger.info(
        f"Created team event type {event_type.slug}",
        extra=build_log_context(user_id=user.id, team_id=team.id, event_type_id=event_type.id),
    )
    return event_type


def add_team_host(db: Session, user_id: int, event_type: EventType) -> Host:
    """Add a host to a team event type, fixed per the event's scheduling type."""
    host = Host(
        user_id=user_id,
        event_type_id=event_type.id,
        is_fixed=is_fixed_host(event_type.scheduling_type),
    )
    db.add(host)
    db.commit()
    return host
