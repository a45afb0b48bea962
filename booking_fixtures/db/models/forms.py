"""SQLAlchemy ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from datetime import datetime

from sqlalchemy import ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_fixtures.db.base import Base
from booking_fixtures.db.types import JSONType

if TYPE_CHECKING:
    from booking_fixtures.db.models import Team, User


class RoutingForm(Base):
    """
    Rule-driven form that redirects submitters based on field values.

    routes are evaluated top to bottom; a route flagged isFallback has no
    rule and matches when nothing else does.
    """

    __tablename__ = "routing_forms"
    __table_args__ = (Index("idx_routing_forms_user", "user_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    routes: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    fields: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    user: Mapped["User"] = relationship(back_populates="routing_forms")
    team: Mapped["Team | None"] = relationship()
