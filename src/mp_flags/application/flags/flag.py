"""Application flags – Flag value object."""
from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclasses.dataclass(frozen=True)
class Flag(Generic[V]):
    """A named, persisted setting as it crosses the backend port."""
    name: str
    value: V


__all__ = ["Flag"]
