"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and a reusable creation
timestamp helper.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase


def utc_now() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """
    Convert a datetime to an aware UTC datetime.

    Naive values are taken to already be UTC. SQLite drops the offset on
    write, so every timestamp must be normalized before insert.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# JSONB on PostgreSQL, plain JSON on SQLite and others
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass
