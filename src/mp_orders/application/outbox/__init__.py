"""Outbox processing: background publisher and its settings."""
from mp_orders.application.outbox.processor import OutboxBatchReport, OutboxProcessor, StoreScope
from mp_orders.application.outbox.settings import OutboxSettings

__all__ = ["OutboxBatchReport", "OutboxProcessor", "OutboxSettings", "StoreScope"]
