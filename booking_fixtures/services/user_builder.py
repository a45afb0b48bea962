"""Fixture user payloads.

build_user returns an unsaved User graph (password, working-hours schedule,
organization profile and membership) that a single ``db.add`` persists.
"""

from datetime import datetime, timezone
from enum import Enum

from booking_fixtures.core.config import settings
from booking_fixtures.core.security import hash_password
from booking_fixtures.db.enums import (
    DEFAULT_TIME_ZONE,
    MembershipRole,
    UserPermissionRole,
)
from booking_fixtures.db.models import (
    Availability,
    Membership,
    Profile,
    Schedule,
    User,
    UserPassword,
)
from booking_fixtures.schemas.fixtures import UserOptions
from booking_fixtures.services.availability import (
    DEFAULT_SCHEDULE,
    get_availability_from_schedule,
)
from booking_fixtures.services.identity_defaults import (
    default_username,
    generate_profile_uid,
)

WORKING_HOURS_SCHEDULE_NAME = "Working Hours"
DEFAULT_LOCALE = "en"


class MissingOrganizationRoleError(ValueError):
    """Organization attachment requested without a role."""

    def __init__(self, organization_id: int):
        self.organization_id = organization_id
        super().__init__("Missing role for user in organization")


def _enum_value(value):
    return value.value if isinstance(value, Enum) else value


def _pick(value, default):
    return default if value is None else value


def build_user(worker_name: str, opts: UserOptions | None = None) -> User:
    """
    Build a fixture user ready to be added to a session.

    Raises:
        MissingOrganizationRoleError: organization_id given without role_in_organization
    """
    opts = opts or UserOptions()

    username = default_username(worker_name, opts.username, opts.use_exact_username)
    domain = _pick(opts.email_domain, settings.DEFAULT_EMAIL_DOMAIN)
    time_zone = _enum_value(_pick(opts.time_zone, DEFAULT_TIME_ZONE))
    completed_onboarding = _pick(opts.completed_onboarding, True)

    user = User(
        username=username,
        name=opts.name,
        email=_pick(opts.email, f"{username}@{domain}"),
        email_verified=datetime.now(timezone.utc),
        completed_onboarding=completed_onboarding,
        time_zone=time_zone,
        locale=_pick(opts.locale, DEFAULT_LOCALE),
        role=_enum_value(_pick(opts.role, UserPermissionRole.USER)),
        two_factor_enabled=_pick(opts.two_factor_enabled, False),
        disable_impersonation=_pick(opts.disable_impersonation, False),
    )
    user.password = UserPassword(hash=hash_password(opts.password or username))

    _attach_organization(user, opts)

    if completed_onboarding:
        user.schedules.append(build_working_hours(time_zone, opts.schedule))

    return user


def build_working_hours(time_zone: str, schedule=None) -> Schedule:
    """Working-hours schedule from a weekly template (DEFAULT_SCHEDULE when omitted)."""
    rows = get_availability_from_schedule(_pick(schedule, DEFAULT_SCHEDULE))
    return Schedule(
        name=WORKING_HOURS_SCHEDULE_NAME,
        time_zone=time_zone,
        availability=[
            Availability(days=list(row.days), start_time=row.start_time, end_time=row.end_time)
            for row in rows
        ],
    )


def _attach_organization(user: User, opts: UserOptions) -> None:
    """Add organization reference, profile and ADMIN membership when organization_id is set."""
    if not opts.organization_id:
        return
    if not opts.role_in_organization:
        raise MissingOrganizationRoleError(opts.organization_id)

    user.organization_id = opts.organization_id
    user.profiles.append(
        Profile(
            uid=generate_profile_uid(),
            username=user.username,
            organization_id=opts.organization_id,
        )
    )
    user.memberships.append(
        Membership(
            team_id=opts.organization_id,
            role=MembershipRole.ADMIN.value,
            accepted=True,
        )
    )
