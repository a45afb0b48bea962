"""Tests for the fixture CLI."""

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from booking_fixtures import cli as cli_module
from booking_fixtures.db.models import Membership, Team, User


@pytest.fixture
def runner(monkeypatch, session_factory: sessionmaker) -> CliRunner:
    monkeypatch.setattr(cli_module, "SessionLocal", session_factory)
    return CliRunner()


def test_seed_user(runner: CliRunner, db: Session):
    result = runner.invoke(cli_module.cli, ["seed-user", "--worker-name", "4"])

    assert result.exit_code == 0, result.output
    assert "✓ Created user: user-4-" in result.output
    assert "Event types: 4" in result.output
    assert db.query(User).count() == 1


def test_seed_user_with_org_and_teammates(runner: CliRunner, db: Session):
    result = runner.invoke(
        cli_module.cli,
        ["seed-user", "--team", "--org", "--teammates", "2", "--scheduling-type", "ROUND_ROBIN"],
    )

    assert result.exit_code == 0, result.output
    assert "Org (id" in result.output
    assert db.query(User).count() == 3
    org = db.query(Team).one()
    assert org.is_organization is True
    assert db.query(Membership).filter(Membership.team_id == org.id).count() == 3


def test_seed_user_reports_errors(runner: CliRunner, db: Session):
    args = ["seed-user", "--username", "pro", "--exact-username"]
    assert runner.invoke(cli_module.cli, args).exit_code == 0

    result = runner.invoke(cli_module.cli, args)

    assert result.exit_code == 1
    assert "Error" in result.output


def test_init_db(monkeypatch, engine: Engine):
    monkeypatch.setattr("booking_fixtures.db.session.engine", engine)

    result = CliRunner().invoke(cli_module.cli, ["init-db"])

    assert result.exit_code == 0, result.output
    assert "tables" in result.output
