"""Application CQRS: request validation rules."""
from __future__ import annotations

from typing import Any

from mp_orders.kernel.errors import ValidationError


class Rules:
    """Collects field failures and raises them together.

    Example::

        Rules().require(bool(self.name.strip()), "name", "Name is required.").check()
    """

    def __init__(self) -> None:
        self.errors: list[dict[str, Any]] = []

    def require(self, condition: bool, field: str, message: str) -> "Rules":
        if not condition:
            self.errors.append({"field": field, "message": message})
        return self

    def check(self) -> None:
        if self.errors:
            raise ValidationError(
                "; ".join(e["message"] for e in self.errors),
                errors=list(self.errors),
            )


__all__ = ["Rules"]
