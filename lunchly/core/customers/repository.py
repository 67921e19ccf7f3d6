"""
Customer data access for Lunchly.

Every operation issues exactly one statement against the session and maps
the resulting rows to customer records. Nothing is cached between calls.
Transaction boundaries belong to the caller (see ``lunchly.db.session``).
"""

import logging
from typing import Protocol

from sqlalchemy import func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Insert, Select, Update

from lunchly.core.constants import PREFIX_WILDCARD, TOP_CUSTOMERS_LIMIT
from lunchly.core.customers.models import (
    CustomerFields,
    NewCustomer,
    PersistedCustomer,
    RankedCustomer,
)
from lunchly.core.errors import CustomerNotFoundError
from lunchly.core.reservations.models import PersistedReservation
from lunchly.core.reservations.repository import ReservationRepository
from lunchly.db.models import Customer, Reservation

logger = logging.getLogger(__name__)

# Columns written by save()
_WRITABLE_FIELDS = set(CustomerFields.model_fields)


class CustomerRepository(Protocol):
    """Operations available on stored customers."""

    async def list_all(self) -> list[PersistedCustomer]: ...

    async def search(self, term: str) -> list[PersistedCustomer]: ...

    async def get(self, customer_id: int) -> PersistedCustomer: ...

    async def top_ten(self) -> list[RankedCustomer]: ...

    async def get_reservations(
        self, customer: PersistedCustomer
    ) -> list[PersistedReservation]: ...

    async def save(
        self, customer: NewCustomer | PersistedCustomer
    ) -> PersistedCustomer: ...


class SQLCustomerRepository:
    """Customer repository backed by a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession, reservations: ReservationRepository):
        self.session = session
        self.reservations = reservations

    async def list_all(self) -> list[PersistedCustomer]:
        """Return every customer ordered by last name, then first name."""
        result = await self.session.execute(list_all_statement())
        return [PersistedCustomer.model_validate(row) for row in result.scalars()]

    async def search(self, term: str) -> list[PersistedCustomer]:
        """
        Find customers whose full, first, or last name starts with ``term``.

        Matching is case-insensitive. An empty term matches every customer.
        The term is bound as a parameter; ``%`` and ``_`` inside it still act
        as wildcards.
        """
        logger.debug(f"Searching customers for prefix '{term}'")
        result = await self.session.execute(search_statement(term))
        return [PersistedCustomer.model_validate(row) for row in result.scalars()]

    async def get(self, customer_id: int) -> PersistedCustomer:
        """
        Get a customer by id.

        Raises:
            CustomerNotFoundError: If no customer has this id.
        """
        result = await self.session.execute(get_statement(customer_id))
        row = result.scalar_one_or_none()

        if row is None:
            raise CustomerNotFoundError(customer_id)

        return PersistedCustomer.model_validate(row)

    async def top_ten(self) -> list[RankedCustomer]:
        """
        Return the customers with the most reservations.

        Customers without any reservation are not ranked. Ties are broken by
        last name, then first name.
        """
        result = await self.session.execute(top_ten_statement())
        return [
            RankedCustomer(
                **PersistedCustomer.model_validate(row).model_dump(),
                reservation_count=count,
            )
            for row, count in result.all()
        ]

    async def get_reservations(
        self, customer: PersistedCustomer
    ) -> list[PersistedReservation]:
        """Get all reservations for this customer, loaded fresh."""
        return await self.reservations.get_reservations_for_customer(customer.id)

    async def save(
        self, customer: NewCustomer | PersistedCustomer
    ) -> PersistedCustomer:
        """
        Insert a new customer or overwrite a stored one.

        A stored customer is updated in place with all of its fields
        (last write wins). Updating an id with no row changes nothing.

        Returns:
            The persisted customer. For a new customer this carries the
            identifier assigned by the database.
        """
        if isinstance(customer, PersistedCustomer):
            await self.session.execute(update_statement(customer))
            return customer

        result = await self.session.execute(insert_statement(customer))
        customer_id = result.scalar_one()
        logger.info(f"Created customer {customer_id}")
        return PersistedCustomer(
            id=customer_id, **customer.model_dump(include=_WRITABLE_FIELDS)
        )


# -----------------------------
# Statements
# -----------------------------


def _by_name(statement: Select) -> Select:
    return statement.order_by(Customer.last_name, Customer.first_name)


def list_all_statement() -> Select:
    """SELECT every customer."""
    return _by_name(select(Customer))


def search_statement(term: str) -> Select:
    """SELECT customers whose full, first, or last name has ``term`` as prefix."""
    pattern = term + PREFIX_WILDCARD
    full_name = Customer.first_name + " " + Customer.last_name
    return _by_name(
        select(Customer).where(
            or_(
                full_name.ilike(pattern),
                Customer.first_name.ilike(pattern),
                Customer.last_name.ilike(pattern),
            )
        )
    )


def get_statement(customer_id: int) -> Select:
    """SELECT a single customer by id."""
    return select(Customer).where(Customer.id == customer_id)


def top_ten_statement() -> Select:
    """SELECT customers with their reservation counts, most reservations first."""
    reservation_count = func.count(Reservation.id).label("reservation_count")
    return (
        select(Customer, reservation_count)
        .join(Reservation, Customer.id == Reservation.customer_id)
        .group_by(Customer.id)
        .order_by(reservation_count.desc(), Customer.last_name, Customer.first_name)
        .limit(TOP_CUSTOMERS_LIMIT)
    )


def insert_statement(customer: NewCustomer) -> Insert:
    """INSERT a customer and return its generated id."""
    return (
        insert(Customer)
        .values(**customer.model_dump(include=_WRITABLE_FIELDS))
        .returning(Customer.id)
    )


def update_statement(customer: PersistedCustomer) -> Update:
    """UPDATE every mutable column of a stored customer."""
    return (
        update(Customer)
        .where(Customer.id == customer.id)
        .values(**customer.model_dump(include=_WRITABLE_FIELDS))
    )
