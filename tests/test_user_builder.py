"""Tests for the unsaved fixture user graph."""

import re
from datetime import time

import pytest

from booking_fixtures.core.security import verify_password
from booking_fixtures.db.enums import MembershipRole, TimeZone, UserPermissionRole
from booking_fixtures.schemas.fixtures import UserOptions
from booking_fixtures.services.availability import TimeRange
from booking_fixtures.services.user_builder import (
    WORKING_HOURS_SCHEDULE_NAME,
    MissingOrganizationRoleError,
    build_user,
)


def test_defaults():
    user = build_user("69")

    assert re.fullmatch(r"user-69-\d+", user.username)
    assert user.email == f"{user.username}@example.com"
    assert user.email_verified is not None
    assert user.completed_onboarding is True
    assert user.time_zone == TimeZone.UK.value
    assert user.locale == "en"
    assert user.role == UserPermissionRole.USER.value
    assert user.two_factor_enabled is False
    assert user.organization_id is None
    assert user.profiles == []
    assert user.memberships == []


def test_password_defaults_to_username():
    user = build_user("69")

    assert verify_password(user.username, user.password.hash)


def test_explicit_password_is_hashed():
    user = build_user("69", UserOptions(password="hunter2"))

    assert verify_password("hunter2", user.password.hash)
    assert not verify_password(user.username, user.password.hash)


def test_overrides():
    user = build_user(
        "69",
        UserOptions(
            username="pro",
            use_exact_username=True,
            name="Pro Example",
            email_domain="acme.test",
            time_zone=TimeZone.USA,
            locale="fr",
            role=UserPermissionRole.ADMIN,
        ),
    )

    assert user.username == "pro"
    assert user.name == "Pro Example"
    assert user.email == "pro@acme.test"
    assert user.time_zone == "America/New_York"
    assert user.locale == "fr"
    assert user.role == "ADMIN"


def test_explicit_email_wins_over_domain():
    user = build_user("69", UserOptions(email="someone@else.test", email_domain="acme.test"))

    assert user.email == "someone@else.test"


def test_working_hours_schedule():
    user = build_user("69")

    assert len(user.schedules) == 1
    schedule = user.schedules[0]
    assert schedule.name == WORKING_HOURS_SCHEDULE_NAME
    assert schedule.time_zone == "Europe/London"
    assert [(a.days, a.start_time, a.end_time) for a in schedule.availability] == [
        ([1, 2, 3, 4, 5], time(9, 0), time(17, 0)),
    ]


def test_custom_schedule():
    early = TimeRange(time(7, 0), time(11, 0))
    user = build_user("69", UserOptions(schedule=[[early], [], [], [], [], [], [early]]))

    availability = user.schedules[0].availability
    assert [(a.days, a.start_time, a.end_time) for a in availability] == [
        ([0, 6], time(7, 0), time(11, 0)),
    ]


def test_no_schedule_until_onboarding_completed():
    early = TimeRange(time(7, 0), time(11, 0))
    user = build_user(
        "69",
        UserOptions(completed_onboarding=False, schedule=[[early]] * 7),
    )

    assert user.completed_onboarding is False
    assert user.schedules == []


def test_organization_requires_role():
    with pytest.raises(MissingOrganizationRoleError) as exc_info:
        build_user("69", UserOptions(organization_id=5))

    assert str(exc_info.value) == "Missing role for user in organization"
    assert exc_info.value.organization_id == 5


def test_organization_attachment():
    user = build_user(
        "69",
        UserOptions(organization_id=5, role_in_organization=MembershipRole.MEMBER),
    )

    assert user.organization_id == 5
    assert len(user.profiles) == 1
    assert user.profiles[0].organization_id == 5
    assert user.profiles[0].username == user.username
    assert user.profiles[0].uid
    [membership] = user.memberships
    assert membership.team_id == 5
    assert membership.role == MembershipRole.ADMIN.value
    assert membership.accepted is True


def test_role_without_organization_is_ignored():
    user = build_user("69", UserOptions(role_in_organization=MembershipRole.OWNER))

    assert user.organization_id is None
    assert user.memberships == []


def test_empty_schedule_is_kept():
    user = build_user("69", UserOptions(schedule=[]))

    [schedule] = user.schedules
    assert schedule.name == WORKING_HOURS_SCHEDULE_NAME
    assert schedule.availability == []
