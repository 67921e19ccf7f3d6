"""Reservation data access."""

import logging
from typing import Protocol

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Insert, Select, Update

from lunchly.core.reservations.models import (
    NewReservation,
    PersistedReservation,
    ReservationFields,
)
from lunchly.db.models import Reservation

logger = logging.getLogger(__name__)

# Columns written by save()
_WRITABLE_FIELDS = set(ReservationFields.model_fields)


class ReservationRepository(Protocol):
    """Operations available on stored reservations."""

    async def get_reservations_for_customer(
        self, customer_id: int
    ) -> list[PersistedReservation]: ...

    async def save(
        self, reservation: NewReservation | PersistedReservation
    ) -> PersistedReservation: ...


class SQLReservationRepository:
    """Reservation repository backed by a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_reservations_for_customer(
        self, customer_id: int
    ) -> list[PersistedReservation]:
        """Return the customer's reservations, earliest first."""
        logger.debug(f"Loading reservations for customer {customer_id}")
        result = await self.session.execute(for_customer_statement(customer_id))
        return [PersistedReservation.model_validate(row) for row in result.scalars()]

    async def save(
        self, reservation: NewReservation | PersistedReservation
    ) -> PersistedReservation:
        """
        Insert a new reservation or overwrite a stored one.

        Returns:
            The persisted reservation. For a new reservation this carries the
            identifier assigned by the database.
        """
        if isinstance(reservation, PersistedReservation):
            await self.session.execute(update_statement(reservation))
            return reservation

        result = await self.session.execute(insert_statement(reservation))
        reservation_id = result.scalar_one()
        logger.info(
            f"Created reservation {reservation_id} for customer {reservation.customer_id}"
        )
        return PersistedReservation(
            id=reservation_id, **reservation.model_dump(include=_WRITABLE_FIELDS)
        )


# -----------------------------
# Statements
# -----------------------------


def for_customer_statement(customer_id: int) -> Select:
    """SELECT the reservations belonging to one customer."""
    return (
        select(Reservation)
        .where(Reservation.customer_id == customer_id)
        .order_by(Reservation.start_at)
    )


def insert_statement(reservation: NewReservation) -> Insert:
    """INSERT a reservation and return its generated id."""
    return (
        insert(Reservation)
        .values(**reservation.model_dump(include=_WRITABLE_FIELDS))
        .returning(Reservation.id)
    )


def update_statement(reservation: PersistedReservation) -> Update:
    """UPDATE every mutable column of a stored reservation."""
    return (
        update(Reservation)
        .where(Reservation.id == reservation.id)
        .values(**reservation.model_dump(include=_WRITABLE_FIELDS))
    )
