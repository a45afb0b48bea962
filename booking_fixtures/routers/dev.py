"""Development-only endpoints for end-to-end test setup."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from booking_fixtures.core.deps import get_db
from booking_fixtures.schemas.user import UserCreatedResponse, UserRead
from booking_fixtures.services import scenario_service

router = APIRouter()


@router.get("/usr", response_model=UserCreatedResponse)
def create_fixture_user(db: Session = Depends(get_db)):
    """
    Create a default fixture user and return it.

    Takes no parameters: the user gets default event types, workflows and
    working hours, and no team.
    """
    user = scenario_service.create_test_user(db)
    return UserCreatedResponse(message="User created", user=UserRead.model_validate(user))
