"""SQLAlchemy ORM mixins – FlagModelMixin, TimestampMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

NAME_LENGTH = 256


class FlagModelMixin:
    """Adds the ``name`` primary key and the required ``value`` column.

    The primary key is what keeps one row per flag name. Stores with
    non-string values override ``value`` on the concrete model::

        class IntFlag(FlagModelMixin, Base):
            __tablename__ = "int_flags"
            value: Mapped[int] = mapped_column(Integer, nullable=False)
    """

    name: Mapped[str] = mapped_column(String(NAME_LENGTH), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)


class TimestampMixin:
    """Adds ``created_at`` and ``updated_at`` timestamp columns.

    Both default to the database server's current time; ``updated_at`` is
    refreshed on every UPDATE, so it records the last ``set`` of a flag.
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


__all__ = ["FlagModelMixin", "NAME_LENGTH", "TimestampMixin"]
