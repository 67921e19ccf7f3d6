#!/usr/bin/env python
"""Script to create the Lunchly database tables."""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from lunchly.db.base import Base, get_engine

# Import ALL models so their tables are registered with Base.metadata
from lunchly.db.models import Customer, Reservation  # noqa: F401


def create_tables(drop_existing: bool = False, seed: bool = False):
    """Create all database tables."""
    engine = get_engine()

    if drop_existing:
        print("Dropping existing tables...")
        Base.metadata.drop_all(engine)
        print("✓ Existing tables dropped")

    Base.metadata.create_all(engine)
    print(f"✓ Created tables: {', '.join(sorted(Base.metadata.tables))}")

    if seed:
        from lunchly.db.seed import main as seed_main

        seed_main()
        print("✓ Sample data loaded")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create Lunchly database tables")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before creating",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Load fake customers and reservations after creating",
    )
    args = parser.parse_args()

    create_tables(drop_existing=args.drop, seed=args.seed)
