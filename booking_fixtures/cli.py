"""CLI tools for seeding fixture data."""

import click

from booking_fixtures.core.config import settings
from booking_fixtures.core.structured_logging import configure_logging
from booking_fixtures.db.enums import SchedulingType
from booking_fixtures.db.session import SessionLocal
from booking_fixtures.schemas.fixtures import ScenarioOptions, UserOptions


@click.group()
def cli():
    """Booking fixture CLI tools."""
    configure_logging()


@cli.command()
def init_db():
    """Create all tables on the configured database (no migrations)."""
    from booking_fixtures.db.base import Base
    from booking_fixtures.db import models  # noqa: F401 - register tables
    from booking_fixtures.db.session import engine

    Base.metadata.create_all(engine)
    click.echo(f"✓ Created {len(Base.metadata.tables)} tables")


@cli.command()
@click.option("--worker-name", default=settings.DEFAULT_WORKER_NAME, show_default=True,
              help="Parallel worker id used to keep generated values unique")
@click.option("--username", default=None, help="Username base (suffixed unless --exact-username)")
@click.option("--exact-username", is_flag=True, help="Use --username as-is")
@click.option("--team/--no-team", default=False, help="Create a team owned by the user")
@click.option("--org", is_flag=True, help="Make the team an organization")
@click.option("--unpublished", is_flag=True, help="Leave the team slug unset")
@click.option("--subteam", is_flag=True, help="Add a subteam under the organization")
@click.option("--teammates", type=click.IntRange(min=0), default=None,
              help="Number of default teammates to add to the team")
@click.option("--scheduling-type", type=click.Choice([t.value for t in SchedulingType]),
              default=None, help="Scheduling type of the team event (default COLLECTIVE)")
@click.option("--routing-forms", is_flag=True, help="Seed the demo routing form")
def seed_user(
    worker_name: str,
    username: str | None,
    exact_username: bool,
    team: bool,
    org: bool,
    unpublished: bool,
    subteam: bool,
    teammates: int | None,
    scheduling_type: str | None,
    routing_forms: bool,
):
    """
    Create a fixture user and, optionally, a team scenario around it.

    Example:
        booking-fixtures seed-user --team --org --teammates 2
    """
    from booking_fixtures.services import scenario_service

    opts = UserOptions(username=username, use_exact_username=exact_username)
    scenario = ScenarioOptions(
        has_team=team,
        is_org=org,
        is_unpublished=unpublished,
        has_subteam=subteam,
        teammates=[UserOptions() for _ in range(teammates)] if teammates is not None else None,
        scheduling_type=SchedulingType(scheduling_type) if scheduling_type else None,
        seed_routing_forms=routing_forms,
    )

    db = SessionLocal()
    try:
        user = scenario_service.create_test_user(db, opts, scenario, worker_name=worker_name)

        click.echo(f"✓ Created user: {user.username}")
        click.echo(f"  ID: {user.id}")
        click.echo(f"  Email: {user.email}")
        click.echo(f"  Event types: {len(user.event_types)}")
        click.echo(f"  Workflows: {len(user.workflows)}")
        for membership in user.memberships:
            click.echo(f"✓ Team {membership.team.name} (id {membership.team_id}) role: {membership.role}")
    except Exception as e:
        db.rollback()
        raise click.ClickException(str(e)) from e
    finally:
        db.close()


if __name__ == "__main__":
    cli()
