"""Event record model."""
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, DateTime, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from eventbudget.database import Base


class Event(Base):
    """Event metadata plus its budget total in the event's own currency.

    currency_code is a loose reference to currencies.code, not a foreign key.
    """

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    client_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    venue_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    venue_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    accommodation_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    accommodation_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    drive_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    base_total: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    currency_code: Mapped[str] = mapped_column(String(10), nullable=False, default="THB")
    # Kept for rows written before base_total existed; mirrors base_total
    total_budget: Mapped[Decimal | None] = mapped_column(Numeric(18, 2), nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
