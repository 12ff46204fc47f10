"""Persistence of Lockbox application and vault settings."""

from lockbox.codec import SettingsCodec, VaultSettingsCodec
from lockbox.environment import Environment
from lockbox.errors import SettingsDecodeError, SettingsError
from lockbox.settings import Settings, VaultSettings
from lockbox.store import SettingsStore

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "Settings",
    "SettingsCodec",
    "SettingsDecodeError",
    "SettingsError",
    "SettingsStore",
    "VaultSettings",
    "VaultSettingsCodec",
]
