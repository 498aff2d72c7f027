"""Typed UUID identifiers for aggregates and entities."""

from __future__ import annotations

import uuid
from typing import NewType

from mp_orders.kernel.errors.domain import ValidationError

OrderId = NewType("OrderId", uuid.UUID)
OrderItemId = NewType("OrderItemId", uuid.UUID)
ProductId = NewType("ProductId", uuid.UUID)


def new_id() -> uuid.UUID:
    """Return a fresh random identifier."""
    return uuid.uuid4()


def parse_id(value: "str | uuid.UUID", name: str = "id") -> uuid.UUID:
    """Coerce *value* to a UUID, raising ``ValidationError`` on garbage."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError as exc:
        raise ValidationError(
            f"{name} is not a valid identifier: {value!r}",
            errors=[{"field": name, "message": "must be a UUID"}],
            cause=exc,
        ) from exc


__all__ = ["OrderId", "OrderItemId", "ProductId", "new_id", "parse_id"]
