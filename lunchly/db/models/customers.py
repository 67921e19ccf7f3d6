"""Customer table for restaurant guests."""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lunchly.db.base import Base


class Customer(Base):
    """Represents a guest who books tables at the restaurant."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, server_default="")

    reservations = relationship("Reservation", back_populates="customer")

    def __repr__(self) -> str:
        return f"<Customer {self.id} {self.first_name} {self.last_name}>"
