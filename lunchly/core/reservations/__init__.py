"""Reservation records and data access."""

from .models import NewReservation, PersistedReservation, ReservationFields
from .repository import ReservationRepository, SQLReservationRepository

__all__ = [
    "NewReservation",
    "PersistedReservation",
    "ReservationFields",
    "ReservationRepository",
    "SQLReservationRepository",
]
