"""Tests for user and team workflows."""

from sqlalchemy.orm import Session

from booking_fixtures.db.enums import TimeUnit, WorkflowTriggerEvents
from booking_fixtures.db.models import Team, Workflow
from booking_fixtures.services import workflow_builder
from booking_fixtures.services.scenario_service import create_user


def test_default_workflows(db: Session):
    user = create_user(db, "69")

    created = workflow_builder.create_user_workflows(db, user)

    assert [(w.name, w.trigger) for w in created] == [
        ("Default Workflow", WorkflowTriggerEvents.NEW_EVENT.value),
        ("Test Workflow", WorkflowTriggerEvents.EVENT_CANCELLED.value),
    ]
    assert all(w.user_id == user.id for w in created)


def test_extra_workflows(db: Session):
    user = create_user(db, "69")

    created = workflow_builder.create_user_workflows(
        db,
        user,
        [{"name": "Reminder", "trigger": "AFTER_EVENT", "time": 1, "time_unit": "DAY"}],
    )

    assert [w.name for w in created] == ["Default Workflow", "Test Workflow", "Reminder"]
    assert db.query(Workflow).filter(Workflow.user_id == user.id).count() == 3


def test_team_workflow(db: Session):
    user = create_user(db, "69")
    team = Team(name="Team", slug="team")
    db.add(team)
    db.commit()

    workflow = workflow_builder.create_team_workflow(db, user, team)

    assert workflow.name == "Team Workflow"
    assert workflow.trigger == WorkflowTriggerEvents.BEFORE_EVENT.value
    assert workflow.time == 24
    assert workflow.time_unit == TimeUnit.HOUR.value
    assert workflow.user_id == user.id
    assert workflow.team_id == team.id
