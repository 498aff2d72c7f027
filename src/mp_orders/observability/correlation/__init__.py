"""Observability: correlation context."""
from mp_orders.observability.correlation.context import (
    CORRELATION_HEADER,
    CorrelationContext,
    RequestContext,
)

__all__ = ["CORRELATION_HEADER", "CorrelationContext", "RequestContext"]
