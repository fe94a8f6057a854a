"""Ticket ORM model. Child of an event (event_id FK, ON DELETE CASCADE)."""

from sqlalchemy import CheckConstraint, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin
from app.shared.utils.generators import generate_cuid


class Ticket(TimestampMixin, Base):
    """Ticket type offered for an event. Table: tickets. Price and quantity never negative."""

    __tablename__ = "tickets"

    ticket_id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    event_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("events.event_id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    quantity_available: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_tickets_price_non_negative"),
        CheckConstraint(
            "quantity_available >= 0", name="ck_tickets_quantity_non_negative"
        ),
    )
