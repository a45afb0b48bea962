"""Organization profile service."""

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from booking_fixtures.core.structured_logging import build_log_context
from booking_fixtures.db.models import Profile, User
from booking_fixtures.services.identity_defaults import (
    generate_profile_uid,
    profile_username,
)

logger = logging.getLogger(__name__)


def get_profile(db: Session, user_id: int, organization_id: int) -> Profile | None:
    """Get a user's profile in an organization."""
    return (
        db.query(Profile)
        .filter(Profile.user_id == user_id, Profile.organization_id == organization_id)
        .first()
    )


def ensure_org_profiles(
    db: Session,
    organization_id: int,
    users: Iterable[User],
) -> list[Profile]:
    """
    Give every user a profile in the organization (upsert on user + organization).

    Existing profiles are returned untouched; missing ones are created with a
    fresh uid and the user's username (or email local part).
    """
    profiles: list[Profile] = []
    created = 0
    seen: set[int] = set()
    for user in users:
        if user.id in seen:
            continue
        seen.add(user.id)
        profile = get_profile(db, user.id, organization_id)
        if profile is None:
            profile = Profile(
                uid=generate_profile_uid(),
                username=profile_username(user.username, user.email),
                user_id=user.id,
                organization_id=organization_id,
            )
            db.add(profile)
            created += 1
        profiles.append(profile)

    db.commit()
    logger.info(
        f"Reconciled {len(profiles)} profiles ({created} created) in organization {organization_id}",
        extra=build_log_context(team_id=organization_id),
    )
    return profiles
