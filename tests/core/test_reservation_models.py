"""Tests for reservation records."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from lunchly.core.reservations.models import NewReservation, PersistedReservation


def make_reservation(start_at: datetime) -> NewReservation:
    return NewReservation(customer_id=1, num_guests=2, start_at=start_at)


class TestFormattedStartAt:
    """Tests for the human-readable start time."""

    @pytest.mark.parametrize(
        "start_at,expected",
        [
            (datetime(2026, 10, 18, 19, 30), "October 18th 2026, 7:30 pm"),
            (datetime(2026, 1, 1, 0, 5), "January 1st 2026, 12:05 am"),
            (datetime(2026, 3, 2, 12, 0), "March 2nd 2026, 12:00 pm"),
            (datetime(2026, 5, 3, 11, 45), "May 3rd 2026, 11:45 am"),
            (datetime(2026, 6, 11, 13, 0), "June 11th 2026, 1:00 pm"),
            (datetime(2026, 6, 12, 13, 0), "June 12th 2026, 1:00 pm"),
            (datetime(2026, 6, 13, 13, 0), "June 13th 2026, 1:00 pm"),
            (datetime(2026, 7, 21, 18, 15), "July 21st 2026, 6:15 pm"),
            (datetime(2026, 7, 22, 18, 15), "July 22nd 2026, 6:15 pm"),
        ],
    )
    def test_formatting(self, start_at: datetime, expected: str) -> None:
        assert make_reservation(start_at).formatted_start_at == expected


class TestReservationVariants:
    """Tests for new vs persisted reservations."""

    def test_notes_default_to_empty(self) -> None:
        reservation = make_reservation(datetime(2026, 10, 18, 19, 30))
        assert reservation.notes == ""

    def test_persisted_id_is_immutable(self) -> None:
        reservation = PersistedReservation(
            id=3, customer_id=1, num_guests=2, start_at=datetime(2026, 10, 18)
        )
        with pytest.raises(ValidationError):
            reservation.id = 4
