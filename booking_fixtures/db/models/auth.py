"""SQLAlchemy ORM models for users, teams, organizations and memberships."""

from __future__ import annotations

from typing import TYPE_CHECKING

from datetime import datetime

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_fixtures.db.base import Base
from booking_fixtures.db.enums import (
    DEFAULT_TIME_ZONE,
    MembershipRole,
    UserPermissionRole,
)
from booking_fixtures.db.types import JSONType

if TYPE_CHECKING:
    from booking_fixtures.db.models import (
        Credential,
        EventType,
        RoutingForm,
        Schedule,
        Workflow,
    )


class User(Base):
    """
    Application user.

    Usernames are unique per tenant (organization_id); emails are globally
    unique, so two fixture users with the same exact username collide.
    """

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", "organization_id", name="uq_users_username_org"),
        Index("idx_users_organization", "organization_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    email_verified: Mapped[datetime | None] = mapped_column(nullable=True)
    completed_onboarding: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    time_zone: Mapped[str] = mapped_column(
        String(100), default=DEFAULT_TIME_ZONE.value, nullable=False
    )
    locale: Mapped[str | None] = mapped_column(String(20), nullable=True)
    role: Mapped[str] = mapped_column(
        String(20), default=UserPermissionRole.USER.value, nullable=False
    )
    two_factor_enabled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    disable_impersonation: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    organization_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    # Relationships
    organization: Mapped["Team | None"] = relationship(foreign_keys=[organization_id])
    password: Mapped["UserPassword | None"] = relationship(
        back_populates="user", cascade="all, delete-orphan", uselist=False
    )
    profiles: Mapped[list["Profile"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", order_by="Profile.id"
    )
    memberships: Mapped[list["Membership"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    schedules: Mapped[list["Schedule"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    event_types: Mapped[list["EventType"]] = relationship(
        secondary="event_type_users", back_populates="users", order_by="EventType.id"
    )
    owned_event_types: Mapped[list["EventType"]] = relationship(
        back_populates="owner", foreign_keys="EventType.owner_id"
    )
    workflows: Mapped[list["Workflow"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", order_by="Workflow.id"
    )
    credentials: Mapped[list["Credential"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    routing_forms: Mapped[list["RoutingForm"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


class UserPassword(Base):
    """Password hash for a user (bcrypt)."""

    __tablename__ = "user_passwords"

    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    hash: Mapped[str] = mapped_column(Text, nullable=False)

    user: Mapped["User"] = relationship(back_populates="password")


class Team(Base):
    """
    A team, or an organization when is_organization is set.

    Unpublished teams have no slug; the intended slug waits in
    metadata["requestedSlug"] until the team is published.
    """

    __tablename__ = "teams"
    __table_args__ = (Index("idx_teams_parent", "parent_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    is_organization: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=True
    )
    team_metadata: Mapped[dict | None] = mapped_column("metadata", JSONType, nullable=True)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    # Relationships
    parent: Mapped["Team | None"] = relationship(
        back_populates="children", remote_side="Team.id"
    )
    children: Mapped[list["Team"]] = relationship(back_populates="parent")
    organization_settings: Mapped["OrganizationSettings | None"] = relationship(
        back_populates="organization", cascade="all, delete-orphan", uselist=False
    )
    org_profiles: Mapped[list["Profile"]] = relationship(
        back_populates="organization", order_by="Profile.id"
    )
    members: Mapped[list["Membership"]] = relationship(
        back_populates="team", cascade="all, delete-orphan"
    )


class OrganizationSettings(Base):
    """Organization-only settings (verification, auto-accept email domain)."""

    __tablename__ = "organization_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    organization_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    is_organization_verified: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    org_auto_accept_email: Mapped[str] = mapped_column(String(255), nullable=False)
    is_organization_configured: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    organization: Mapped["Team"] = relationship(back_populates="organization_settings")


class Membership(Base):
    """
    Links a user to a team with a role.

    Constraint: UNIQUE(user_id, team_id) - one membership per team.
    """

    __tablename__ = "memberships"
    __table_args__ = (
        UniqueConstraint("user_id", "team_id", name="uq_memberships_user_team"),
        Index("idx_memberships_team", "team_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    team_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[str] = mapped_column(
        String(20), default=MembershipRole.MEMBER.value, nullable=False
    )
    accepted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship(back_populates="memberships")
    team: Mapped["Team"] = relationship(back_populates="members")


class Profile(Base):
    """
    A user's identity inside one organization.

    Constraint: UNIQUE(user_id, organization_id) - at most one profile per
    organization, so reconciling profiles is an upsert on that pair.
    """

    __tablename__ = "profiles"
    __table_args__ = (
        UniqueConstraint("user_id", "organization_id", name="uq_profiles_user_org"),
        Index("idx_profiles_organization", "organization_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uid: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    organization_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now(), nullable=False)

    # Relationships
    user: Mapped["User"] = relationship(back_populates="profiles")
    organization: Mapped["Team"] = relationship(back_populates="org_profiles")
