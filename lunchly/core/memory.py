"""
In-memory repositories for Lunchly.

These implement the same protocols as the SQL repositories over plain
dicts, mirroring their ordering, prefix matching, ranking, and not-found
behaviour. Records are copied on the way in and out, so callers never share
state with the store.
"""

import re
from collections import Counter
from itertools import count

from lunchly.core.constants import PREFIX_WILDCARD, TOP_CUSTOMERS_LIMIT
from lunchly.core.customers.models import (
    CustomerFields,
    NewCustomer,
    PersistedCustomer,
    RankedCustomer,
)
from lunchly.core.errors import CustomerNotFoundError
from lunchly.core.reservations.models import (
    NewReservation,
    PersistedReservation,
    ReservationFields,
)


def like_to_regex(pattern: str) -> re.Pattern:
    """Translate a SQL ILIKE pattern into an equivalent case-insensitive regex."""
    parts = []
    chars = iter(pattern)
    for char in chars:
        if char == "\\":
            # Backslash is the default escape: the next character is literal
            parts.append(re.escape(next(chars, "\\")))
        elif char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def _name_key(customer: CustomerFields) -> tuple[str, str]:
    return (customer.last_name, customer.first_name)


class InMemoryReservationRepository:
    """Reservation repository holding records in a dict."""

    def __init__(self):
        self._rows: dict[int, PersistedReservation] = {}
        self._ids = count(1)

    async def get_reservations_for_customer(
        self, customer_id: int
    ) -> list[PersistedReservation]:
        rows = [r for r in self._rows.values() if r.customer_id == customer_id]
        return [r.model_copy() for r in sorted(rows, key=lambda r: r.start_at)]

    async def save(
        self, reservation: NewReservation | PersistedReservation
    ) -> PersistedReservation:
        fields = reservation.model_dump(include=set(ReservationFields.model_fields))
        if isinstance(reservation, PersistedReservation):
            if reservation.id in self._rows:
                self._rows[reservation.id] = PersistedReservation(
                    id=reservation.id, **fields
                )
            return reservation

        stored = PersistedReservation(id=next(self._ids), **fields)
        self._rows[stored.id] = stored
        return stored.model_copy()

    def count_by_customer(self) -> Counter:
        """Return the number of reservations held by each customer id."""
        return Counter(r.customer_id for r in self._rows.values())


class InMemoryCustomerRepository:
    """Customer repository holding records in a dict."""

    def __init__(self, reservations: InMemoryReservationRepository | None = None):
        self.reservations = reservations or InMemoryReservationRepository()
        self._rows: dict[int, PersistedCustomer] = {}
        self._ids = count(1)

    async def list_all(self) -> list[PersistedCustomer]:
        return [c.model_copy() for c in sorted(self._rows.values(), key=_name_key)]

    async def search(self, term: str) -> list[PersistedCustomer]:
        matcher = like_to_regex(term + PREFIX_WILDCARD)
        return [
            c
            for c in await self.list_all()
            if matcher.fullmatch(c.full_name)
            or matcher.fullmatch(c.first_name)
            or matcher.fullmatch(c.last_name)
        ]

    async def get(self, customer_id: int) -> PersistedCustomer:
        customer = self._rows.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer.model_copy()

    async def top_ten(self) -> list[RankedCustomer]:
        counts = self.reservations.count_by_customer()
        ranked = [
            RankedCustomer(**c.model_dump(), reservation_count=counts[c.id])
            for c in self._rows.values()
            if counts[c.id] > 0
        ]
        ranked.sort(key=lambda c: (-c.reservation_count, *_name_key(c)))
        return ranked[:TOP_CUSTOMERS_LIMIT]

    async def get_reservations(
        self, customer: PersistedCustomer
    ) -> list[PersistedReservation]:
        return await self.reservations.get_reservations_for_customer(customer.id)

    async def save(
        self, customer: NewCustomer | PersistedCustomer
    ) -> PersistedCustomer:
        fields = customer.model_dump(include=set(CustomerFields.model_fields))
        if isinstance(customer, PersistedCustomer):
            if customer.id in self._rows:
                self._rows[customer.id] = PersistedCustomer(id=customer.id, **fields)
            return customer

        stored = PersistedCustomer(id=next(self._ids), **fields)
        self._rows[stored.id] = stored
        return stored.model_copy()
