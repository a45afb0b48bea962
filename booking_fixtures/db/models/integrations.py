"""SQLAlchemy ORM models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_fixtures.db.base import Base
from booking_fixtures.db.types import JSONType

if TYPE_CHECKING:
    from booking_fixtures.db.models import User


class Credential(Base):
    """Installed app credential (calendar, video, payment) for a user."""

    __tablename__ = "credentials"
    __table_args__ = (Index("idx_credentials_user", "user_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    key: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    app_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    )

    user: Mapped["User | None"] = relationship(back_populates="credentials")
