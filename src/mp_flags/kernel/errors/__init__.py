"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidArgumentError
    │   └── FlagFormatError
    └── ApplicationError         (application.py)
        └── ConfigError          (mp_flags.config.validation)

Backend exceptions (e.g. ``sqlalchemy.exc.SQLAlchemyError``) are not part of
this hierarchy and propagate unchanged.
"""

from mp_flags.kernel.errors.application import ApplicationError
from mp_flags.kernel.errors.base import BaseError
from mp_flags.kernel.errors.domain import (
    DomainError,
    FlagFormatError,
    InvalidArgumentError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FlagFormatError",
    "InvalidArgumentError",
    "ValidationError",
]
