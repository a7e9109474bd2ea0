"""Config settings – Settings base class and FlagStoreSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_flags.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    ``_prefix`` names the environment variable prefix read by
    :class:`~mp_flags.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FlagStoreSettings(Settings):
    """Where flags live. Read from ``FLAGS_*`` environment variables."""

    _prefix: ClassVar[str] = "FLAGS"

    database_url: str
    table_name: str = "flags"
    echo: bool = False
    # One connection per unit of work, nothing kept between calls.
    null_pool: bool = False

    def _validate(self) -> None:
        if not self.database_url or not self.database_url.strip():
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if not self.table_name or not self.table_name.strip():
            raise InvalidSettingValueError("table_name", self.table_name, "must not be empty")


__all__ = ["FlagStoreSettings", "Settings"]
