"""Event ORM model. Child of an organization (org_id FK, ON DELETE CASCADE)."""

from datetime import date as date_type

from sqlalchemy import Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin
from app.shared.utils.generators import generate_cuid


class Event(TimestampMixin, Base):
    """Event. Table: events. Owns its tickets exclusively."""

    __tablename__ = "events"

    event_id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    org_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("organizations.org_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[date_type] = mapped_column(Date, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
