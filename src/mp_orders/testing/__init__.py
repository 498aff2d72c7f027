"""Test support: in-memory fakes and domain builders."""
from mp_orders.testing.builders import OrderBuilder, ProductBuilder, default_address
from mp_orders.testing.database import in_memory_database
from mp_orders.testing.fakes import FlakyEventBus, FrozenClock, RecordingEventBus

__all__ = [
    "FlakyEventBus",
    "FrozenClock",
    "OrderBuilder",
    "ProductBuilder",
    "RecordingEventBus",
    "default_address",
    "in_memory_database",
]
