"""Reservation records for Lunchly."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


def _ordinal(day: int) -> str:
    """Return a day of the month with its English ordinal suffix."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


class ReservationFields(BaseModel):
    """Mutable fields shared by every reservation record."""

    model_config = ConfigDict(from_attributes=True)

    customer_id: int
    num_guests: int
    start_at: datetime
    notes: str = ""

    @property
    def formatted_start_at(self) -> str:
        """Return the start time as e.g. "October 18th 2026, 7:30 pm"."""
        start = self.start_at
        hour = start.hour % 12 or 12
        meridiem = "am" if start.hour < 12 else "pm"
        return (
            f"{start:%B} {_ordinal(start.day)} {start.year}, "
            f"{hour}:{start:%M} {meridiem}"
        )


class NewReservation(ReservationFields):
    """A reservation that has not been saved yet."""


class PersistedReservation(ReservationFields):
    """A reservation stored in the database."""

    id: int = Field(frozen=True)
