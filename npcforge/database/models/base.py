"""Declarative base and timestamp mixin for the save store."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from npcforge.clock import utc_now


class Base(DeclarativeBase):
    """Base class for save store models."""

    pass


class TimestampMixin:
    """Creation and last-write times, stamped in UTC.

    ``updated_at`` moves on every overwrite, which is what slot listings
    sort by.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
