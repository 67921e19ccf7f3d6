"""Reservation table linking a customer to a booked time slot."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lunchly.db.base import Base


class Reservation(Base):
    """Represents a table booked by a customer for a party of guests."""

    __tablename__ = "reservations"
    __table_args__ = (
        CheckConstraint("num_guests > 0", name="reservations_num_guests_check"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.id"), nullable=False, index=True
    )
    start_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    num_guests: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, server_default="")

    customer = relationship("Customer", back_populates="reservations")

    def __repr__(self) -> str:
        return f"<Reservation {self.id} customer={self.customer_id}>"
