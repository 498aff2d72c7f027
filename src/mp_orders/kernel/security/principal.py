"""Kernel security: the authenticated Principal."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Principal:
    """Authenticated identity; ``subject`` is what audit columns record."""
    subject: str
    roles: frozenset[str] = frozenset()

    def has_role(self, role: str) -> bool:
        return role in self.roles


__all__ = ["Principal"]
