"""Infrastructure errors: persistence and messaging failures."""

from __future__ import annotations

from typing import Any

from mp_orders.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize an event payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class UnknownEventTypeError(InfrastructureError):
    """An event type or discriminator has no entry in the event registry."""

    default_code = "unknown_event_type"

    def __init__(self, discriminator: str, **kwargs: Any) -> None:
        super().__init__(f"Could not resolve type: {discriminator}", **kwargs)
        self.discriminator = discriminator


__all__ = [
    "InfrastructureError",
    "SerializationError",
    "UnknownEventTypeError",
]
