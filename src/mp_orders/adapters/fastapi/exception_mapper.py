"""FastAPI adapter: FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mp_orders.kernel.errors import (
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from mp_orders.observability.correlation import CorrelationContext
from mp_orders.observability.logging import get_logger

logger = get_logger(__name__)


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "not_found", "message": "...", "correlation_id": "..."}

    Mappings
    --------
    ``ValidationError``     → 400
    ``NotFoundError``       → 404
    ``ConflictError``       → 409
    ``DomainError``         → 422
    ``InfrastructureError`` → 503
    """

    def __init__(self) -> None:
        # more specific subtypes first
        self._map: list[tuple[type[BaseError], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (ConflictError, 409),
            (DomainError, 422),
            (InfrastructureError, 503),
        ]

    def status_for(self, exc: BaseException) -> int:
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def register(self, app: FastAPI) -> None:
        """Register all error handlers on *app*."""
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._make_handler(status))

    def _make_handler(self, status: int) -> Callable[[Request, Any], Any]:
        async def handler(request: Request, exc: BaseError) -> JSONResponse:
            if status >= 500:
                logger.error("http.request_failed", path=request.url.path, code=exc.code, error=exc.message)
            body = exc.to_dict()
            ctx = CorrelationContext.get()
            body["correlation_id"] = ctx.correlation_id if ctx is not None else None
            return JSONResponse(status_code=status, content=body)

        return handler


__all__ = ["FastAPIExceptionMapper"]
