"""SQLAlchemy adapter – sessions, unit of work and flag models."""
from mp_flags.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_flags.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork
from mp_flags.adapters.sqlalchemy.mixins import FlagModelMixin, TimestampMixin
from mp_flags.adapters.sqlalchemy.models import DefaultFlagModel, FlagBase, make_flag_model, model_for_table
from mp_flags.adapters.sqlalchemy.flags import SqlAlchemyFlagUnitOfWork

__all__ = [
    "DefaultFlagModel",
    "FlagBase",
    "FlagModelMixin",
    "SqlAlchemyFlagUnitOfWork",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "TimestampMixin",
    "make_flag_model",
    "model_for_table",
]
