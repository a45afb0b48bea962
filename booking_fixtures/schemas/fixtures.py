"""Fixture option schemas - what a test may ask create_test_user for."""

from typing import Any

from pydantic import BaseModel, Field

from booking_fixtures.db.enums import (
    MembershipRole,
    SchedulingType,
    TimeZone,
    UserPermissionRole,
)
from booking_fixtures.services.availability import TimeRange


class UserOptions(BaseModel):
    """Overrides for a fixture user; anything left as None gets a default."""
    username: str | None = None
    use_exact_username: bool = False  # skip the worker/timestamp suffix
    name: str | None = None
    email: str | None = None
    email_domain: str | None = None
    password: str | None = None  # plaintext; defaults to the username
    completed_onboarding: bool | None = None
    locale: str | None = None
    time_zone: TimeZone | str | None = None
    role: UserPermissionRole | None = None
    two_factor_enabled: bool | None = None
    disable_impersonation: bool | None = None
    organization_id: int | None = None
    role_in_organization: MembershipRole | None = None
    schedule: list[list[TimeRange]] | None = None
    # Extra rows appended after the defaults, as EventType / Workflow column kwargs
    event_types: list[dict[str, Any]] = Field(default_factory=list)
    workflows: list[dict[str, Any]] = Field(default_factory=list)


class ScenarioOptions(BaseModel):
    """Optional structure built around the fixture user."""
    seed_routing_forms: bool = False
    has_team: bool = False
    team_role: MembershipRole | None = None
    teammates: list[UserOptions] | None = None
    scheduling_type: SchedulingType | None = None
    team_event_title: str | None = None
    team_event_slug: str | None = None
    team_event_length: int | None = Field(None, ge=1)
    is_org: bool = False
    is_org_verified: bool = False
    has_subteam: bool = False  # organizations only, one level deep
    is_unpublished: bool = False
