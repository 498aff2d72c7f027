"""Shared fixtures: event registry, clock, buses and ambient context cleanup."""
from __future__ import annotations

from typing import Iterator

import pytest

from mp_orders.adapters.sqlalchemy import start_mappers
from mp_orders.domain.orders import register_order_events
from mp_orders.kernel.messaging import EventRegistry
from mp_orders.kernel.security import SecurityContext
from mp_orders.observability.correlation import CorrelationContext
from mp_orders.testing import FrozenClock, RecordingEventBus

start_mappers()


@pytest.fixture
def registry() -> EventRegistry:
    return register_order_events(EventRegistry())


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def immediate_bus() -> RecordingEventBus:
    return RecordingEventBus()


@pytest.fixture(autouse=True)
def _clean_context() -> Iterator[None]:
    yield
    CorrelationContext.clear()
    SecurityContext.clear()
