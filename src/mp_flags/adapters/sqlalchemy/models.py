"""SQLAlchemy adapter – default flag model and model builder."""
from __future__ import annotations

import functools
from typing import Any

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, mapped_column

from mp_flags.adapters.sqlalchemy.mixins import NAME_LENGTH, FlagModelMixin, TimestampMixin


class FlagBase(DeclarativeBase):
    pass


class DefaultFlagModel(TimestampMixin, FlagModelMixin, FlagBase):
    """String-valued flags in the ``flags`` table."""

    __tablename__ = "flags"

    def __repr__(self) -> str:
        return f"DefaultFlagModel(name={self.name!r})"


def make_flag_model(
    table_name: str = "flags",
    value_type: Any = None,
    *,
    timestamps: bool = True,
) -> type[Any]:
    """Build a flag model on its own declarative base.

    Use it when the table name comes from configuration or when values are
    not text. Create the table with ``model.metadata``::

        IntFlag = make_flag_model("int_flags", Integer)
        await sessions.create_all(IntFlag.metadata)

    *value_type* defaults to :class:`~sqlalchemy.Text`.
    """

    class Base(DeclarativeBase):
        pass

    attrs: dict[str, Any] = {
        "__module__": __name__,
        "__tablename__": table_name,
        "name": mapped_column(String(NAME_LENGTH), primary_key=True),
        "value": mapped_column(value_type if value_type is not None else Text, nullable=False),
    }
    bases: tuple[type, ...] = (TimestampMixin, Base) if timestamps else (Base,)
    class_name = "".join(part.capitalize() for part in table_name.split("_")) + "Model"
    return type(class_name, bases, attrs)


@functools.cache
def model_for_table(table_name: str) -> type[Any]:
    """Return the string-valued flag model mapped to *table_name*.

    ``"flags"`` maps to :class:`DefaultFlagModel`; any other name gets one
    model from :func:`make_flag_model`, reused on later calls.
    """
    if table_name == DefaultFlagModel.__tablename__:
        return DefaultFlagModel
    return make_flag_model(table_name)


__all__ = ["DefaultFlagModel", "FlagBase", "make_flag_model", "model_for_table"]
