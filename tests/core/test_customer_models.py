"""
Tests for customer records.

Tests the new/persisted split, derived full name, and ORM row mapping.
"""

import pytest
from pydantic import ValidationError

from lunchly.core.customers.models import (
    NewCustomer,
    PersistedCustomer,
    RankedCustomer,
)
from lunchly.db.models import Customer


class TestFullName:
    """Tests for the derived full name."""

    def test_full_name_joins_with_single_space(self) -> None:
        """Full name should be first and last name separated by one space."""
        customer = NewCustomer(first_name="Ann", last_name="Lee")
        assert customer.full_name == "Ann Lee"

    def test_full_name_on_persisted_customer(self) -> None:
        customer = PersistedCustomer(id=1, first_name="Bob", last_name="Lane")
        assert customer.full_name == "Bob Lane"

    def test_full_name_tracks_mutation(self) -> None:
        """Full name is computed on access, not stored."""
        customer = PersistedCustomer(id=1, first_name="Bob", last_name="Lane")
        customer.last_name = "Lee"
        assert customer.full_name == "Bob Lee"


class TestCustomerVariants:
    """Tests for new vs persisted customers."""

    def test_new_customer_has_no_id(self) -> None:
        customer = NewCustomer(first_name="Ann", last_name="Lee")
        assert not hasattr(customer, "id")

    def test_optional_fields_default(self) -> None:
        customer = NewCustomer(first_name="Ann", last_name="Lee")
        assert customer.phone is None
        assert customer.notes == ""

    def test_persisted_customer_requires_id(self) -> None:
        with pytest.raises(ValidationError):
            PersistedCustomer(first_name="Ann", last_name="Lee")

    def test_persisted_id_is_immutable(self) -> None:
        """Assigning a new id to a stored customer should fail."""
        customer = PersistedCustomer(id=5, first_name="Ann", last_name="Lee")
        with pytest.raises(ValidationError):
            customer.id = 6
        assert customer.id == 5

    def test_persisted_fields_are_mutable(self) -> None:
        customer = PersistedCustomer(id=5, first_name="Ann", last_name="Lee")
        customer.phone = "555-0100"
        customer.notes = "Window seat"
        assert customer.phone == "555-0100"
        assert customer.notes == "Window seat"

    def test_ranked_customer_is_persisted_customer(self) -> None:
        ranked = RankedCustomer(
            id=2, first_name="Ann", last_name="Lee", reservation_count=4
        )
        assert isinstance(ranked, PersistedCustomer)
        assert ranked.reservation_count == 4


class TestRowMapping:
    """Tests for building records from ORM rows."""

    def test_model_validate_from_orm_row(self) -> None:
        row = Customer(
            id=9, first_name="Ann", last_name="Lee", phone="555-0100", notes="VIP"
        )
        customer = PersistedCustomer.model_validate(row)
        assert customer.id == 9
        assert customer.full_name == "Ann Lee"
        assert customer.phone == "555-0100"
        assert customer.notes == "VIP"
