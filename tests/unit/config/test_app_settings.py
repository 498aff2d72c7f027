"""Unit tests for EnvSettingsLoader with the application and outbox settings."""
from __future__ import annotations

import pytest

from mp_orders.application.outbox import OutboxSettings
from mp_orders.config.settings import AppSettings, EnvSettingsLoader
from mp_orders.config.validation import ConfigError, InvalidSettingValueError


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings.database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.run_outbox_processor is True

    def test_reads_prefixed_variables(self) -> None:
        settings = EnvSettingsLoader(
            {
                "APP_DATABASE_URL": "sqlite+aiosqlite:///orders.db",
                "APP_LOG_LEVEL": "debug",
                "APP_LOG_JSON": "false",
                "APP_RUN_OUTBOX_PROCESSOR": "0",
            }
        ).load(AppSettings)
        assert settings.database_url == "sqlite+aiosqlite:///orders.db"
        assert settings.log_level == "debug"
        assert settings.log_json is False
        assert settings.run_outbox_processor is False

    def test_bad_boolean(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader({"APP_LOG_JSON": "maybe"}).load(AppSettings)
        assert info.value.setting_name == "APP_LOG_JSON"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"APP_LOG_LEVEL": "LOUD"}).load(AppSettings)


class TestOutboxSettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader({}).load(OutboxSettings)
        assert settings.polling_interval_seconds == 10.0
        assert settings.batch_size == 20
        assert settings.max_retries == 3

    def test_coerces_numbers(self) -> None:
        settings = EnvSettingsLoader(
            {
                "OUTBOX_POLLING_INTERVAL_SECONDS": "2.5",
                "OUTBOX_BATCH_SIZE": "50",
                "OUTBOX_MAX_RETRIES": "5",
            }
        ).load(OutboxSettings)
        assert settings.polling_interval_seconds == 2.5
        assert settings.batch_size == 50
        assert settings.max_retries == 5

    def test_non_numeric_value(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"OUTBOX_BATCH_SIZE": "lots"}).load(OutboxSettings)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"polling_interval_seconds": 0},
            {"batch_size": 0},
            {"max_retries": 0},
        ],
    )
    def test_range_checks(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(InvalidSettingValueError):
            OutboxSettings(**kwargs)
