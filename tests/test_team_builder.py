"""Tests for fixture teams and organizations."""

from sqlalchemy.orm import Session

from booking_fixtures.db.enums import MembershipRole
from booking_fixtures.db.models import EventType, Membership, Profile, Team, Workflow
from booking_fixtures.schemas.fixtures import UserOptions
from booking_fixtures.services import team_builder
from booking_fixtures.services.scenario_service import create_user


def _membership(db: Session, user_id: int, team_id: int) -> Membership:
    return (
        db.query(Membership)
        .filter(Membership.user_id == user_id, Membership.team_id == team_id)
        .one()
    )


def test_team_with_owner(db: Session):
    user = create_user(db, "69")

    team = team_builder.create_team_and_add_user(db, user, worker_name="69")

    assert team.name == f"user-id-{user.id}'s Team"
    assert team.slug.startswith("team-69-")
    assert team.team_metadata == {}
    assert team.is_organization is False
    assert team.parent_id is None
    assert team.organization_settings is None
    membership = _membership(db, user.id, team.id)
    assert membership.role == MembershipRole.OWNER.value
    assert membership.accepted is True


def test_team_role(db: Session):
    user = create_user(db, "69")

    team = team_builder.create_team_and_add_user(
        db, user, worker_name="69", role=MembershipRole.ADMIN
    )

    assert _membership(db, user.id, team.id).role == "ADMIN"


def test_unpublished_team_keeps_requested_slug(db: Session):
    user = create_user(db, "69")

    team = team_builder.create_team_and_add_user(db, user, worker_name="69", is_unpublished=True)

    assert team.slug is None
    assert team.team_metadata["requestedSlug"].startswith("team-69-")


def test_organization(db: Session):
    user = create_user(db, "69", UserOptions(email_domain="acme.test"))

    org = team_builder.create_team_and_add_user(
        db, user, worker_name="69", is_org=True, is_org_verified=True
    )

    assert org.is_organization is True
    assert org.name == f"user-id-{user.id}'s Org"
    assert org.slug.startswith("org-69-")
    settings = org.organization_settings
    assert settings.is_organization_verified is True
    assert settings.org_auto_accept_email == "acme.test"
    assert settings.is_organization_configured is False
    [profile] = org.org_profiles
    assert profile.user_id == user.id
    assert profile.username == user.username
    assert org.children == []


def test_organization_with_subteam(db: Session):
    user = create_user(db, "69")

    org = team_builder.create_team_and_add_user(
        db, user, worker_name="69", is_org=True, has_subteam=True
    )

    [subteam] = org.children
    assert subteam.parent_id == org.id
    assert subteam.is_organization is False
    assert subteam.children == []
    assert _membership(db, user.id, subteam.id).role == MembershipRole.OWNER.value
    assert _membership(db, user.id, org.id).role == MembershipRole.OWNER.value
    assert db.query(EventType).filter(EventType.team_id == subteam.id).count() == 1
    [workflow] = db.query(Workflow).filter(Workflow.team_id == subteam.id).all()
    assert workflow.name == "Team Workflow"
    assert db.query(Team).count() == 2
    # The subteam is written before its parent organization
    assert subteam.id < org.id


def test_subteam_ignored_for_plain_team(db: Session):
    user = create_user(db, "69")

    team = team_builder.create_team_and_add_user(db, user, worker_name="69", has_subteam=True)

    assert team.children == []
    assert db.query(Team).count() == 1
    assert db.query(Profile).count() == 0


def test_team_inside_organization(db: Session):
    user = create_user(db, "69")
    org = team_builder.create_team_and_add_user(db, user, worker_name="69", is_org=True)

    team = team_builder.create_team_and_add_user(db, user, worker_name="69", organization_id=org.id)

    assert team.parent_id == org.id
    db.refresh(org)
    assert [child.id for child in org.children] == [team.id]
