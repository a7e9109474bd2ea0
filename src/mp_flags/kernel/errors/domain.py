"""Domain errors – rejected arguments and unreadable flag values."""

from __future__ import annotations

from typing import Any

from mp_flags.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A flag operation was refused before or after reaching the backend."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(ValidationError):
    """A required argument was ``None``, empty or whitespace only.

    Raised for a missing flag name, a ``None`` value passed to ``set`` and a
    missing conversion function. Never retried.
    """

    default_code = "invalid_argument"

    def __init__(self, argument: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Argument '{argument}' {reason}",
            errors=[{"field": argument, "reason": reason}],
            **kwargs,
        )
        self.argument = argument
        self.reason = reason


class FlagFormatError(DomainError):
    """The conversion function could not parse a stored flag value.

    The original exception is kept on ``cause`` and ``__cause__``.
    """

    default_code = "flag_format_error"

    def __init__(self, flag_name: str, *, cause: BaseException | None = None, **kwargs: Any) -> None:
        super().__init__(
            f"Flag '{flag_name}' cannot be converted by the given conversion function",
            detail={"flag": flag_name},
            cause=cause,
            **kwargs,
        )
        self.flag_name = flag_name


__all__ = [
    "DomainError",
    "FlagFormatError",
    "InvalidArgumentError",
    "ValidationError",
]
