"""Config settings: Settings base, loaders and application settings."""
from mp_orders.config.settings.app import AppSettings
from mp_orders.config.settings.base import Settings
from mp_orders.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["AppSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
