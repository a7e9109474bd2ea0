"""Application flags – store, backend port and in-memory backend."""
from mp_flags.application.flags.flag import Flag
from mp_flags.application.flags.backend import FlagUnitOfWork, FlagUnitOfWorkFactory
from mp_flags.application.flags.store import Converter, FlagStore, StringFlagStore
from mp_flags.application.flags.in_memory import InMemoryFlagBackend, InMemoryFlagUnitOfWork

__all__ = [
    "Converter",
    "Flag",
    "FlagStore",
    "FlagUnitOfWork",
    "FlagUnitOfWorkFactory",
    "InMemoryFlagBackend",
    "InMemoryFlagUnitOfWork",
    "StringFlagStore",
]
