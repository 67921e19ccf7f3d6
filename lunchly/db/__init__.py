"""Database base, engines and ORM tables."""

from lunchly.db.base import Base, get_async_engine, get_engine

__all__ = ["Base", "get_async_engine", "get_engine"]
