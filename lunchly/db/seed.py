"""Seed script for local development data."""

from __future__ import annotations

from datetime import datetime, timedelta
from random import choice, randint

from faker import Faker

from lunchly.db.base import Base, get_engine
from lunchly.db.models import Customer, Reservation
from lunchly.db.session import SessionLocal

fake = Faker()

SEATING_HOURS = [11, 12, 13, 17, 18, 19, 20]
SEATING_MINUTES = [0, 15, 30, 45]


def seed_customers(session, count: int = 50) -> list[Customer]:
    customers = []
    for _ in range(count):
        customer = Customer(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            phone=choice([fake.phone_number(), None]),
            notes=choice(["", fake.sentence()]),
        )
        customers.append(customer)
    session.add_all(customers)
    session.flush()
    return customers


def seed_reservations(session, customers: list[Customer], count: int = 200) -> None:
    reservations = []
    start_date = datetime.now().replace(second=0, microsecond=0) - timedelta(days=180)
    for _ in range(count):
        day = start_date + timedelta(days=randint(0, 364))
        reservation = Reservation(
            customer_id=choice(customers).id,
            start_at=day.replace(hour=choice(SEATING_HOURS), minute=choice(SEATING_MINUTES)),
            num_guests=randint(1, 10),
            notes=choice(["", "", fake.sentence()]),
        )
        reservations.append(reservation)
    session.add_all(reservations)


def main() -> None:
    engine = get_engine()
    Base.metadata.create_all(engine)

    session = SessionLocal()
    try:
        customers = seed_customers(session)
        seed_reservations(session, customers)
        session.commit()
        print("Seeded database with fake customers and reservations.")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


if __name__ == "__main__":
    main()
