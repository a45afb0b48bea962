"""Reminder/notification workflows for fixture users and teams."""

import logging
from typing import Any, Iterable, Mapping

from sqlalchemy.orm import Session

from booking_fixtures.core.structured_logging import build_log_context
from booking_fixtures.db.enums import TimeUnit, WorkflowTriggerEvents
from booking_fixtures.db.models import Team, User, Workflow

logger = logging.getLogger(__name__)

DEFAULT_WORKFLOWS: tuple[Mapping[str, Any], ...] = (
    {"name": "Default Workflow", "trigger": WorkflowTriggerEvents.NEW_EVENT.value},
    {"name": "Test Workflow", "trigger": WorkflowTriggerEvents.EVENT_CANCELLED.value},
)

TEAM_WORKFLOW_NAME = "Team Workflow"
TEAM_WORKFLOW_OFFSET_HOURS = 24


def create_user_workflows(
    db: Session,
    user: User,
    extra: Iterable[Mapping[str, Any]] | None = None,
) -> list[Workflow]:
    """Create the two default workflows then any extras, all owned by user."""
    created = []
    for data in [*DEFAULT_WORKFLOWS, *(extra or [])]:
        workflow = Workflow(**dict(data))
        workflow.user_id = user.id
        db.add(workflow)
        db.commit()
        created.append(workflow)

    logger.info(
        f"Created {len(created)} workflows for user {user.id}",
        extra=build_log_context(user_id=user.id),
    )
    return created


def create_team_workflow(db: Session, user: User, team: Team) -> Workflow:
    """Create the 24-hours-before-event team workflow."""
    workflow = Workflow(
        name=TEAM_WORKFLOW_NAME,
        trigger=WorkflowTriggerEvents.BEFORE_EVENT.value,
        time=TEAM_WORKFLOW_OFFSET_HOURS,
        time_unit=TimeUnit.HOUR.value,
        user_id=user.id,
        team_id=team.id,
    )
    db.add(workflow)
    db.commit()
    return workflow
