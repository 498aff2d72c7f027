"""Outbox processor settings (``OUTBOX_*`` environment variables)."""
from __future__ import annotations

import dataclasses

from mp_orders.config.settings.base import Settings
from mp_orders.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class OutboxSettings(Settings):
    _prefix = "OUTBOX"

    polling_interval_seconds: float = 10.0
    batch_size: int = 20
    max_retries: int = 3

    def _validate(self) -> None:
        if self.polling_interval_seconds <= 0:
            raise InvalidSettingValueError(
                "OUTBOX_POLLING_INTERVAL_SECONDS", self.polling_interval_seconds, "must be positive"
            )
        if self.batch_size < 1:
            raise InvalidSettingValueError("OUTBOX_BATCH_SIZE", self.batch_size, "must be at least 1")
        if self.max_retries < 1:
            raise InvalidSettingValueError("OUTBOX_MAX_RETRIES", self.max_retries, "must be at least 1")


__all__ = ["OutboxSettings"]
