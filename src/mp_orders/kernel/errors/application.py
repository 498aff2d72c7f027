"""Application-layer errors."""

from __future__ import annotations

from mp_orders.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer failure (wiring, configuration)."""

    default_code = "application_error"


class HandlerNotFoundError(ApplicationError):
    """No handler is registered for a dispatched request type."""

    default_code = "handler_not_found"

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


__all__ = ["ApplicationError", "HandlerNotFoundError"]
