"""Structured logging helpers for fixture creation."""

import logging
from typing import Any

from booking_fixtures.core.config import settings


def build_log_context(
    *,
    worker_name: str | None = None,
    user_id: int | None = None,
    team_id: int | None = None,
    event_type_id: int | None = None,
    scenario: str | None = None,
) -> dict[str, Any]:
    """Return a log context dict for the ``extra=`` argument."""
    context: dict[str, Any] = {}
    if worker_name:
        context["worker_name"] = worker_name
    if user_id is not None:
        context["user_id"] = user_id
    if team_id is not None:
        context["team_id"] = team_id
    if event_type_id is not None:
        context["event_type_id"] = event_type_id
    if scenario:
        context["scenario"] = scenario
    return context


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the CLI and the dev server."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
