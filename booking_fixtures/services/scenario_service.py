"""Scenario orchestration - the create_test_user entry point.

Builds a fixture user and everything hanging off it, one committed write at
a time:

1. the user (password, working hours, optional organization profile)
2. default + extra event types
3. default + extra workflows
4. the seeded routing form, when asked for
5. a re-fetch of the user with event types, workflows, credentials and
   routing forms loaded
6. an optional team or organization with a team event type and teammates
7. organization profiles for teammates and owner

Nothing wraps the whole scenario in a transaction; a failure part-way leaves
the rows written so far.
"""

import logging

from sqlalchemy.orm import Session, selectinload

from booking_fixtures.core.config import settings
from booking_fixtures.core.structured_logging import build_log_context
from booking_fixtures.db.enums import MembershipRole
from booking_fixtures.db.models import EventType, Membership, Team, User
from booking_fixtures.schemas.fixtures import ScenarioOptions, UserOptions
from booking_fixtures.services import (
    event_type_builder,
    profile_service,
    routing_form_seeder,
    team_builder,
    workflow_builder,
)
from booking_fixtures.services.user_builder import build_user

logger = logging.getLogger(__name__)

# Relations loaded on the returned user
USER_INCLUDES = (
    User.event_types,
    User.workflows,
    User.credentials,
    User.routing_forms,
)


def create_user(db: Session, worker_name: str, opts: UserOptions | None = None) -> User:
    """Build and persist a single fixture user."""
    user = build_user(worker_name, opts)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_user_with_includes(db: Session, user_id: int) -> User:
    """
    Load a user with USER_INCLUDES.

    Raises:
        NoResultFound: If the user does not exist
    """
    return (
        db.query(User)
        .options(*(selectinload(relation) for relation in USER_INCLUDES))
        .populate_existing()
        .filter(User.id == user_id)
        .one()
    )


def create_test_user(
    db: Session,
    opts: UserOptions | None = None,
    scenario: ScenarioOptions | None = None,
    worker_name: str | None = None,
) -> User:
    """
    Create a fixture user and the scenario around it.

    The returned user is the instance loaded before any team is created. Team
    commits expire it, so relations read afterwards reflect the finished
    scenario: in team scenarios event_types also lists the team event types.

    Raises:
        MissingOrganizationRoleError: organization_id given without role_in_organization
        sqlalchemy.exc.IntegrityError: colliding usernames, emails or slugs
    """
    opts = opts or UserOptions()
    scenario = scenario or ScenarioOptions()
    worker_name = worker_name or settings.DEFAULT_WORKER_NAME

    created = create_user(db, worker_name, opts)
    log_context = build_log_context(
        worker_name=worker_name,
        user_id=created.id,
        scenario=_scenario_name(scenario),
    )
    logger.info(f"Created fixture user {created.username}", extra=log_context)

    event_type_builder.create_user_event_types(db, created, opts.event_types)
    workflow_builder.create_user_workflows(db, created, opts.workflows)

    if scenario.seed_routing_forms:
        routing_form_seeder.seed_routing_form(db, created)

    user = get_user_with_includes(db, created.id)

    if scenario.has_team:
        _create_team_scenario(db, user, opts, scenario, worker_name)

    return user


def _scenario_name(scenario: ScenarioOptions) -> str:
    if not scenario.has_team:
        return "user"
    return "org" if scenario.is_org else "team"


def _create_team_scenario(
    db: Session,
    user: User,
    opts: UserOptions,
    scenario: ScenarioOptions,
    worker_name: str,
) -> Team:
    team = team_builder.create_team_and_add_user(
        db,
        user,
        worker_name=worker_name,
        role=scenario.team_role or MembershipRole.OWNER,
        is_unpublished=scenario.is_unpublished,
        is_org=scenario.is_org,
        is_org_verified=scenario.is_org_verified,
        has_subteam=scenario.has_subteam,
        organization_id=opts.organization_id,
    )

    team_event = event_type_builder.create_team_event_type(
        db,
        user,
        team,
        scheduling_type=scenario.scheduling_type,
        title=scenario.team_event_title,
        slug=scenario.team_event_slug,
        length=scenario.team_event_length,
    )

    if scenario.teammates is None:
        return team

    teammates = [
        _add_teammate(db, team, team_event, teammate_opts, worker_name)
        for teammate_opts in scenario.teammates
    ]

    if scenario.is_org:
        profile_service.ensure_org_profiles(db, team.id, [*teammates, user])

    logger.info(
        f"Added {len(teammates)} teammates to team {team.id}",
        extra=build_log_context(worker_name=worker_name, user_id=user.id, team_id=team.id),
    )
    return team


def _add_teammate(
    db: Session,
    team: Team,
    team_event: EventType,
    teammate_opts: UserOptions,
    worker_name: str,
) -> User:
    """Create a teammate, add them as an accepted MEMBER and as a host of team_event."""
    teammate = create_user(db, worker_name, teammate_opts)

    db.add(
        Membership(
            team_id=team.id,
            user_id=teammate.id,
            role=MembershipRole.MEMBER.value,
            accepted=True,
        )
    )
    db.commit()

    event_type_builder.add_team_host(db, teammate.id, team_event)
    return teammate
