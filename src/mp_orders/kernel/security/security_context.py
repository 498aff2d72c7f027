"""Kernel security: SecurityContext using contextvars."""

from __future__ import annotations

import contextlib
import contextvars
from typing import Iterator

from mp_orders.kernel.security.principal import Principal

SYSTEM_ACTOR = "system"

_VAR: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_security_context", default=None
)


class SecurityContext:
    """Store and retrieve the current :class:`Principal` via :mod:`contextvars`
    so each asyncio task has its own isolated context."""

    @staticmethod
    def get_current() -> Principal | None:
        """Return the current principal, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(principal: Principal) -> contextvars.Token[Principal | None]:
        """Set the current principal and return a reset token."""
        return _VAR.set(principal)

    @staticmethod
    def reset(token: contextvars.Token[Principal | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current principal from context."""
        _VAR.set(None)

    @staticmethod
    @contextlib.contextmanager
    def acting_as(principal: Principal) -> Iterator[Principal]:
        """Run a block with *principal* installed, restoring the previous one."""
        token = _VAR.set(principal)
        try:
            yield principal
        finally:
            _VAR.reset(token)


def current_actor() -> str:
    """Subject of the current principal, or ``"system"`` when nobody is signed in."""
    principal = _VAR.get()
    return principal.subject if principal is not None else SYSTEM_ACTOR


__all__ = ["SYSTEM_ACTOR", "SecurityContext", "current_actor"]
