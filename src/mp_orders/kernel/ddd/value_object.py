"""ValueObject base class."""

from __future__ import annotations

import dataclasses
from typing import Any, Self


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Base class for value objects.

    Subclasses should be ``@dataclass(frozen=True)``; equality and hashing
    come from the field values. ``__post_init__`` runs :meth:`_validate`.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field invariant checks."""

    def copy_with(self, **changes: Any) -> Self:
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)

    def __composite_values__(self) -> tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))


__all__ = ["ValueObject"]
