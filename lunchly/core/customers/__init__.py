"""Customer records and data access."""

from .models import CustomerFields, NewCustomer, PersistedCustomer, RankedCustomer
from .repository import CustomerRepository, SQLCustomerRepository

__all__ = [
    "CustomerFields",
    "CustomerRepository",
    "NewCustomer",
    "PersistedCustomer",
    "RankedCustomer",
    "SQLCustomerRepository",
]
