"""Loading and saving the settings file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Optional

from lockbox.codec import SettingsCodec
from lockbox.environment import Environment
from lockbox.errors import SettingsDecodeError
from lockbox.settings import Settings
from lockbox.utils import atomic_write

logger: Final = logging.getLogger(__name__)


class SettingsStore:
    """Persists ``Settings`` to the first of the environment's settings paths.

    Loading looks at every configured path in order and reads the first
    file that exists, so settings written by an older layout are still
    found. Saving always goes to the first path.
    """

    def __init__(self, env: Environment, codec: Optional[SettingsCodec] = None):
        """Initialize the store.

        Args:
            env: Environment supplying the settings paths and defaults
            codec: Optional custom codec
        """
        self.env = env
        self.codec = codec or SettingsCodec(env)

    @property
    def path(self) -> Path:
        """File settings are saved to."""
        return self.env.settings_paths[0]

    def find_existing(self) -> Optional[Path]:
        for candidate in self.env.settings_paths:
            if candidate.is_file():
                return candidate
        return None

    def load(self, strict: bool = False) -> Settings:
        """Load settings, falling back to defaults.

        Args:
            strict: Re-raise decode errors instead of returning defaults

        Returns:
            Settings read from disk, or the environment's defaults if no
            settings file exists (or it is corrupt and ``strict`` is off)

        Raises:
            SettingsDecodeError: If the file is malformed and ``strict`` is set
            OSError: If an existing file cannot be read
        """
        path = self.find_existing()
        if path is None:
            logger.info("No settings file found, using defaults")
            return Settings.from_environment(self.env)

        logger.debug("Loading settings from %s", path)
        try:
            with path.open(encoding="utf-8") as f:
                return self.codec.read(f)
        except SettingsDecodeError as err:
            if strict:
                raise
            logger.warning("Failed to load settings from %s: %s. Using defaults.", path, err)
            return Settings.from_environment(self.env)

    def save(self, settings: Settings) -> Path:
        """Write settings to ``self.path``, replacing the file atomically.

        Args:
            settings: Settings to persist

        Returns:
            Path that was written
        """
        target = self.path
        with atomic_write(target) as f:
            self.codec.write(f, settings)
        logger.debug("Saved settings to %s", target)
        return target
