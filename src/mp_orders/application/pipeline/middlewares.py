"""Application pipeline: logging, validation and transaction middleware."""
from __future__ import annotations

import time
from typing import Any

from mp_orders.application.cqrs.commands import Command
from mp_orders.application.pipeline.middleware import Middleware, Next
from mp_orders.kernel.ddd.unit_of_work import UnitOfWork
from mp_orders.kernel.errors import ValidationError
from mp_orders.kernel.types.result import Err, Error
from mp_orders.observability.logging import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(Middleware):
    """Log request completion or failure with timing."""

    async def __call__(self, request: Any, next_: Next) -> Any:
        name = type(request).__name__
        start = time.perf_counter()
        logger.info("use_case.started", request=name)
        try:
            result = await next_(request)
        except Exception:
            duration = (time.perf_counter() - start) * 1000
            logger.exception("use_case.failed", request=name, duration_ms=round(duration, 2))
            raise
        duration = (time.perf_counter() - start) * 1000
        if isinstance(result, Err):
            logger.warning(
                "use_case.rejected",
                request=name,
                duration_ms=round(duration, 2),
                error_code=result.error.code,
                error=result.error.message,
            )
        else:
            logger.info("use_case.completed", request=name, duration_ms=round(duration, 2))
        return result


class ValidationMiddleware(Middleware):
    """Run ``request.validate()``; a ``ValidationError`` short-circuits to ``Err``."""

    async def __call__(self, request: Any, next_: Next) -> Any:
        validate = getattr(request, "validate", None)
        if validate is not None:
            try:
                validate()
            except ValidationError as exc:
                logger.warning(
                    "use_case.validation_failed",
                    request=type(request).__name__,
                    errors=exc.errors,
                )
                return Err(Error.validation("validation.failed", exc.message))
        return await next_(request)


class TransactionMiddleware(Middleware):
    """Wrap each command in one unit-of-work transaction.

    ``Ok`` results commit; ``Err`` results and exceptions roll back. Queries
    pass straight through.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def __call__(self, request: Any, next_: Next) -> Any:
        if not isinstance(request, Command):
            return await next_(request)

        name = type(request).__name__
        await self._uow.begin_transaction()
        logger.debug("transaction.begun", request=name)
        try:
            result = await next_(request)
            if isinstance(result, Err):
                await self._uow.rollback_transaction()
                logger.debug("transaction.rolled_back", request=name, error_code=result.error.code)
                return result
            await self._uow.commit_transaction()
            logger.debug("transaction.committed", request=name)
            return result
        except BaseException:
            await self._uow.rollback_transaction()
            logger.error("transaction.failed", request=name)
            raise


__all__ = ["LoggingMiddleware", "TransactionMiddleware", "ValidationMiddleware"]
