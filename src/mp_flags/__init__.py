"""
mp_flags – persisted feature flags on top of an async ORM.

Import path convention::

    from mp_flags.application.flags import FlagStore, StringFlagStore
    from mp_flags.adapters.sqlalchemy import SqlAlchemyFlagUnitOfWork
    from mp_flags.kernel.errors import InvalidArgumentError, FlagFormatError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
