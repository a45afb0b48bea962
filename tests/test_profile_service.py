"""Tests for organization profile reconciliation."""

from sqlalchemy.orm import Session

from booking_fixtures.db.models import Profile, Team
from booking_fixtures.services import profile_service
from booking_fixtures.services.scenario_service import create_user


def _org(db: Session) -> Team:
    org = Team(name="Org", slug="org", is_organization=True)
    db.add(org)
    db.commit()
    return org


def test_creates_missing_profiles(db: Session):
    org = _org(db)
    users = [create_user(db, "69"), create_user(db, "69")]

    profiles = profile_service.ensure_org_profiles(db, org.id, users)

    assert [p.user_id for p in profiles] == [u.id for u in users]
    assert [p.username for p in profiles] == [u.username for u in users]
    assert all(p.organization_id == org.id for p in profiles)
    assert len({p.uid for p in profiles}) == 2


def test_existing_profiles_are_left_alone(db: Session):
    org = _org(db)
    user = create_user(db, "69")
    first = profile_service.ensure_org_profiles(db, org.id, [user])

    second = profile_service.ensure_org_profiles(db, org.id, [user, user])

    assert [p.id for p in second] == [first[0].id]
    assert db.query(Profile).filter(Profile.organization_id == org.id).count() == 1


def test_get_profile(db: Session):
    org = _org(db)
    user = create_user(db, "69")

    assert profile_service.get_profile(db, user.id, org.id) is None
    profile_service.ensure_org_profiles(db, org.id, [user])
    assert profile_service.get_profile(db, user.id, org.id).user_id == user.id
