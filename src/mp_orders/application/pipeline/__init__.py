"""Application pipeline: middleware chain around use-case handlers."""
from mp_orders.application.pipeline.middleware import Handler, Middleware, Next
from mp_orders.application.pipeline.middlewares import (
    LoggingMiddleware,
    TransactionMiddleware,
    ValidationMiddleware,
)
from mp_orders.application.pipeline.pipeline import Pipeline

__all__ = [
    "Handler",
    "LoggingMiddleware",
    "Middleware",
    "Next",
    "Pipeline",
    "TransactionMiddleware",
    "ValidationMiddleware",
]
