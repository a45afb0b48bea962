"""SQLAlchemy ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_fixtures.db.base import Base

if TYPE_CHECKING:
    from booking_fixtures.db.models import Team, User


class Workflow(Base):
    """
    Reminder/notification workflow.

    Triggered by a booking event, optionally offset by time + time_unit
    (e.g. 24 HOUR BEFORE_EVENT). Owned by a user and optionally a team.
    """

    __tablename__ = "workflows"
    __table_args__ = (
        Index("idx_workflows_user", "user_id"),
        Index("idx_workflows_team", "team_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    trigger: Mapped[str] = mapped_column(String(50), nullable=False)
    time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time_unit: Mapped[str | None] = mapped_column(String(20), nullable=True)
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    )
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    # Relationships
    user: Mapped["User | None"] = relationship(back_populates="workflows")
    team: Mapped["Team | None"] = relationship()
