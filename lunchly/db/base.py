"""SQLAlchemy base and engine configuration."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from lunchly.config import get_settings


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def get_async_engine() -> AsyncEngine:
    """Create an async SQLAlchemy engine for the configured database."""

    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.sql_echo,
        pool_pre_ping=True,
    )


def get_engine() -> Engine:
    """Create a sync SQLAlchemy engine for scripts and seeding."""

    settings = get_settings()
    return create_engine(
        settings.database_url_sync,
        echo=settings.sql_echo,
        pool_pre_ping=True,
    )
