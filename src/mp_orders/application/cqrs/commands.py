"""Application CQRS: Command, CommandHandler."""
from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from mp_orders.kernel.types.result import Result

C = TypeVar("C", bound="Command")


class Command:
    """Marker base for commands (intent to change state).

    Commands run inside a unit-of-work transaction. Override
    :meth:`validate` to reject malformed input before the transaction opens.
    """

    def validate(self) -> None:
        """Raise :class:`~mp_orders.kernel.errors.ValidationError` when invalid."""


class CommandHandler(abc.ABC, Generic[C]):
    """Handle a single command type."""

    @abc.abstractmethod
    async def handle(self, command: C) -> Result[Any]: ...


__all__ = ["Command", "CommandHandler"]
