"""Testing fakes."""
from mp_orders.kernel.time.clock import FrozenClock
from mp_orders.testing.fakes.event_bus import FlakyEventBus, RecordingEventBus

__all__ = ["FlakyEventBus", "FrozenClock", "RecordingEventBus"]
