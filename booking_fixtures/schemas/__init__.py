"""Pydantic schemas for fixture options and API responses."""

from booking_fixtures.schemas.fixtures import ScenarioOptions, UserOptions
from booking_fixtures.schemas.user import (
    CredentialRead,
    EventTypeRead,
    RoutingFormRead,
    UserCreatedResponse,
    UserRead,
    WorkflowRead,
)
