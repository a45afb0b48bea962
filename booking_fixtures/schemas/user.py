"""User schemas - Pydantic models for the fixture endpoint response."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EventTypeRead(BaseModel):
    """Schema for reading an event type."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    length: int
    price: int
    requires_confirmation: bool
    seats_per_time_slot: int | None
    scheduling_type: str | None
    owner_id: int | None
    team_id: int | None


class WorkflowRead(BaseModel):
    """Schema for reading a workflow."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    trigger: str
    time: int | None
    time_unit: str | None
    user_id: int | None
    team_id: int | None


class CredentialRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    app_id: str | None


class RoutingFormRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    routes: list | None
    fields: list | None


class UserRead(BaseModel):
    """Fixture user with the relations loaded by create_test_user."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str | None
    name: str | None
    email: str
    email_verified: datetime | None
    completed_onboarding: bool
    time_zone: str
    locale: str | None
    role: str
    two_factor_enabled: bool
    disable_impersonation: bool
    organization_id: int | None
    event_types: list[EventTypeRead]
    workflows: list[WorkflowRead]
    credentials: list[CredentialRead]
    routing_forms: list[RoutingFormRead]


class UserCreatedResponse(BaseModel):
    message: str
    user: UserRead
