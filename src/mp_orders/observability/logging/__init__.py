"""Observability: structured logging helpers."""
from mp_orders.observability.logging.factory import configure_logging
from mp_orders.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = ["CorrelationProcessor", "configure_logging", "get_logger"]
