"""Organization ORM model. Root of the organization -> event -> ticket hierarchy."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin
from app.shared.utils.generators import generate_cuid


class Organization(TimestampMixin, Base):
    """Organization. Table: organizations. Owns its events exclusively."""

    __tablename__ = "organizations"

    org_id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    contact_email: Mapped[str] = mapped_column(String(254), nullable=False)
