"""Config settings: application-wide settings."""
from __future__ import annotations

import dataclasses
import logging

from mp_orders.config.settings.base import Settings
from mp_orders.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class AppSettings(Settings):
    """``APP_*`` environment variables."""

    _prefix = "APP"

    database_url: str = "sqlite+aiosqlite:///:memory:"
    log_level: str = "INFO"
    log_json: bool = True
    create_schema: bool = True
    run_outbox_processor: bool = True

    def _validate(self) -> None:
        if not self.database_url.strip():
            raise InvalidSettingValueError("APP_DATABASE_URL", self.database_url, "must not be empty")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("APP_LOG_LEVEL", self.log_level, "unknown log level")


__all__ = ["AppSettings"]
