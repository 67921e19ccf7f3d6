"""
Customer records for Lunchly.

A customer is either new (never saved, no identifier) or persisted
(loaded from or written to storage, carrying an immutable identifier).
The two are separate types so insert and update paths cannot be confused.
"""

from pydantic import BaseModel, ConfigDict, Field


class CustomerFields(BaseModel):
    """Mutable fields shared by every customer record."""

    model_config = ConfigDict(from_attributes=True)

    first_name: str
    last_name: str
    phone: str | None = None
    notes: str = ""

    @property
    def full_name(self) -> str:
        """Return the customer's full name, "first_name last_name"."""
        return f"{self.first_name} {self.last_name}"


class NewCustomer(CustomerFields):
    """A customer that has not been saved yet."""


class PersistedCustomer(CustomerFields):
    """A customer stored in the database."""

    id: int = Field(frozen=True)


class RankedCustomer(PersistedCustomer):
    """A persisted customer annotated with its reservation count at retrieval time."""

    reservation_count: int
