"""Application-layer errors – wiring and configuration problems."""

from __future__ import annotations

from mp_flags.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The library was wired or configured incorrectly."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
