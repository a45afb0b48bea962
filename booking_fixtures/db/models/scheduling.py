"""SQLAlchemy ORM models for schedules, event types and hosts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from datetime import datetime, time

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    Time,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_fixtures.db.base import Base
from booking_fixtures.db.types import JSONType

if TYPE_CHECKING:
    from booking_fixtures.db.models import Profile, Team, User


# Generic user <-> event type association (separate from ownership)
event_type_users = Table(
    "event_type_users",
    Base.metadata,
    Column("event_type_id", Integer, ForeignKey("event_types.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Schedule(Base):
    """Named weekly availability template (e.g. "Working Hours")."""

    __tablename__ = "schedules"
    __table_args__ = (Index("idx_schedules_user", "user_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    time_zone: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Relationships
    user: Mapped["User"] = relationship(back_populates="schedules")
    availability: Mapped[list["Availability"]] = relationship(
        back_populates="schedule", cascade="all, delete-orphan", order_by="Availability.id"
    )


class Availability(Base):
    """
    Weekly availability row.

    days holds weekday numbers (Sunday=0, Saturday=6) sharing the same
    start/end time range.
    """

    __tablename__ = "availabilities"
    __table_args__ = (Index("idx_availabilities_schedule", "schedule_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    schedule_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("schedules.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    )
    days: Mapped[list] = mapped_column(JSONType, default=list, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)

    schedule: Mapped["Schedule"] = relationship(back_populates="availability")


class EventType(Base):
    """
    Bookable meeting template.

    Individual event types are owned by a user; team event types also carry
    team_id, a scheduling_type and a list of hosts.
    """

    __tablename__ = "event_types"
    __table_args__ = (
        UniqueConstraint("owner_id", "slug", name="uq_event_types_owner_slug"),
        UniqueConstraint("team_id", "slug", name="uq_event_types_team_slug"),
        Index("idx_event_types_team", "team_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    length: Mapped[int] = mapped_column(Integer, nullable=False)
    hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    price: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # minor units
    currency: Mapped[str] = mapped_column(String(3), default="usd", nullable=False)
    requires_confirmation: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    seats_per_time_slot: Mapped[int | None] = mapped_column(Integer, nullable=True)
    scheduling_type: Mapped[str | None] = mapped_column(String(20), nullable=True)

    owner_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    )
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=True
    )
    profile_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    # Relationships
    owner: Mapped["User | None"] = relationship(
        back_populates="owned_event_types", foreign_keys=[owner_id]
    )
    users: Mapped[list["User"]] = relationship(
        secondary=event_type_users, back_populates="event_types"
    )
    team: Mapped["Team | None"] = relationship()
    profile: Mapped["Profile | None"] = relationship()
    hosts: Mapped[list["Host"]] = relationship(
        back_populates="event_type", cascade="all, delete-orphan"
    )


class Host(Base):
    """
    A user assigned to staff a team event type.

    Fixed hosts must attend every booking (COLLECTIVE scheduling).
    """

    __tablename__ = "hosts"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    event_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("event_types.id", ondelete="CASCADE"), primary_key=True
    )
    is_fixed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship()
    event_type: Mapped["EventType"] = relationship(back_populates="hosts")
