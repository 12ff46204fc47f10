"""Runtime environment the settings are created in."""

from __future__ import annotations

import logging
import os
import platform
from pathlib import Path
from typing import ClassVar, Final

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger: Final = logging.getLogger(__name__)

SETTINGS_PATH_VAR: Final = "LOCKBOX_SETTINGS_PATH"
SHOW_TRAY_ICON_VAR: Final = "LOCKBOX_SHOW_TRAY_ICON"


def _default_settings_paths() -> list[Path]:
    return [Path("~/.config/lockbox/settings.json").expanduser()]


class Environment(BaseModel):
    """Context needed to build a default ``Settings`` instance.

    Holds the platform-dependent defaults and the locations the settings
    file is read from. The first entry of ``settings_paths`` is where
    settings are saved.
    """

    KEYCHAIN_PROVIDERS: ClassVar[dict[str, str]] = {
        "Windows": "windows.protected-storage",
        "Darwin": "macos.keychain",
        "Linux": "linux.secret-service",
    }

    os_name: str = Field(default_factory=platform.system, description="Result of platform.system()")
    settings_paths: list[Path] = Field(
        default_factory=_default_settings_paths,
        min_length=1,
        description="Candidate settings files, in lookup order",
    )
    show_tray_icon: bool = Field(False, description="Whether a tray icon is shown by default")

    @property
    def is_windows(self) -> bool:
        return self.os_name == "Windows"

    @property
    def is_mac(self) -> bool:
        return self.os_name == "Darwin"

    @property
    def is_linux(self) -> bool:
        return self.os_name == "Linux"

    @property
    def default_keychain_provider(self) -> str:
        """Identifier of the keychain backend native to this platform.

        Returns:
            Provider id, or an empty string on unknown platforms
        """
        return self.KEYCHAIN_PROVIDERS.get(self.os_name, "")

    @classmethod
    def from_env(cls) -> Environment:
        """Build an environment from process environment variables.

        A ``.env`` file in the working directory is loaded first. Recognised
        variables are ``LOCKBOX_SETTINGS_PATH`` (one or more paths separated
        by ``os.pathsep``) and ``LOCKBOX_SHOW_TRAY_ICON``.

        Returns:
            Environment for the current process
        """
        load_dotenv()

        data: dict[str, object] = {}
        raw_paths = os.environ.get(SETTINGS_PATH_VAR)
        if raw_paths:
            data["settings_paths"] = [
                Path(p).expanduser() for p in raw_paths.split(os.pathsep) if p
            ]
        raw_tray = os.environ.get(SHOW_TRAY_ICON_VAR)
        if raw_tray is not None:
            data["show_tray_icon"] = raw_tray.strip().lower() in ("true", "1", "yes")

        env = cls.model_validate(data)
        logger.debug("Environment: os=%s, settings paths=%s", env.os_name, env.settings_paths)
        return env
