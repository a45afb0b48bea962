"""Fixture teams and organizations."""

import logging

from sqlalchemy.orm import Session

from booking_fixtures.core.structured_logging import build_log_context
from booking_fixtures.db.enums import MembershipRole
from booking_fixtures.db.models import (
    Membership,
    OrganizationSettings,
    Profile,
    Team,
    User,
)
from booking_fixtures.services import event_type_builder, workflow_builder
from booking_fixtures.services.identity_defaults import (
    email_domain,
    generate_profile_uid,
    profile_username,
    team_slug,
)

logger = logging.getLogger(__name__)

REQUESTED_SLUG_KEY = "requestedSlug"


def create_team_and_add_user(
    db: Session,
    user: User,
    *,
    worker_name: str,
    role: MembershipRole = MembershipRole.OWNER,
    is_unpublished: bool = False,
    is_org: bool = False,
    is_org_verified: bool = False,
    has_subteam: bool = False,
    organization_id: int | None = None,
) -> Team:
    """
    Create a team (or organization) and make user a member with role.

    Unpublished teams keep their slug in metadata["requestedSlug"] instead of
    the slug column. An organization with has_subteam first gets one child
    team, carrying a team event type and a team workflow; the child is created
    without has_subteam so nesting stops at one level. has_subteam is ignored
    for plain teams.
    """
    slug = team_slug(worker_name, is_org)
    team = Team(
        name=f"user-id-{user.id}'s {'Org' if is_org else 'Team'}",
        is_organization=is_org,
        slug=None if is_unpublished else slug,
        team_metadata={REQUESTED_SLUG_KEY: slug} if is_unpublished else {},
        parent_id=organization_id or None,
    )

    if is_org:
        team.organization_settings = OrganizationSettings(
            is_organization_verified=bool(is_org_verified),
            org_auto_accept_email=email_domain(user.email),
            is_organization_configured=False,
        )
        if has_subteam:
            team.children.append(_create_subteam(db, user, role=role, worker_name=worker_name))
        team.org_profiles.append(
            Profile(
                uid=generate_profile_uid(),
                username=profile_username(user.username, user.email),
                user_id=user.id,
            )
        )

    db.add(team)
    db.commit()

    db.add(
        Membership(
            team_id=team.id,
            user_id=user.id,
            role=MembershipRole(role).value,
            accepted=True,
        )
    )
    db.commit()
    db.refresh(team)

    logger.info(
        f"Created {'organization' if is_org else 'team'} {team.id}",
        extra=build_log_context(worker_name=worker_name, user_id=user.id, team_id=team.id),
    )
    return team


def _create_subteam(
    db: Session,
    user: User,
    *,
    role: MembershipRole,
    worker_name: str,
) -> Team:
    """Child team for an organization, with its own event type and workflow."""
    subteam = create_team_and_add_user(db, user, worker_name=worker_name, role=role)
    event_type_builder.create_team_event_type(db, user, subteam)
    workflow_builder.create_team_workflow(db, user, subteam)
    return subteam
