"""ORM model exports."""

from lunchly.db.models.customers import Customer
from lunchly.db.models.reservations import Reservation

__all__ = [
    "Customer",
    "Reservation",
]
