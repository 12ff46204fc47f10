"""Application-wide user settings."""

from __future__ import annotations

import sys
from typing import Final, Optional

from pydantic import BaseModel, ConfigDict, Field

from lockbox.environment import Environment
from lockbox.settings.enums import NodeOrientation, UiTheme, VolumeImpl, WebDavUrlScheme
from lockbox.settings.vault import VaultSettings

DEFAULT_PORT: Final = 42427
DEFAULT_NUM_TRAY_NOTIFICATIONS: Final = 3
DEFAULT_GVFS_SCHEME: Final = WebDavUrlScheme.DAV
DEFAULT_PREFERRED_VOLUME_IMPL: Final = (
    VolumeImpl.DOKANY if sys.platform.startswith("win") else VolumeImpl.FUSE
)
DEFAULT_THEME: Final = UiTheme.LIGHT
DEFAULT_USER_INTERFACE_ORIENTATION: Final = NodeOrientation.LEFT_TO_RIGHT


class Settings(BaseModel):
    """User-configurable settings of the application.

    Every field always holds a value of its declared type; assignments are
    validated strictly, so e.g. ``settings.port = "80"`` raises a
    ``pydantic.ValidationError``.

    Use ``Settings.from_environment`` rather than the bare constructor so the
    platform-dependent defaults are filled in.

    Examples:
        env = Environment.from_env()
        settings = Settings.from_environment(env)
        settings.theme = UiTheme.DARK
    """

    model_config = ConfigDict(strict=True, validate_assignment=True)

    # Vaults, in display order
    directories: list[VaultSettings] = Field(default_factory=list)

    # Updates and startup
    asked_for_update_check: bool = False
    check_for_updates_enabled: bool = False
    start_hidden: bool = False
    auto_close_vaults: bool = False

    # Mounting
    port: int = DEFAULT_PORT
    num_tray_notifications: int = DEFAULT_NUM_TRAY_NOTIFICATIONS
    preferred_gvfs_scheme: WebDavUrlScheme = DEFAULT_GVFS_SCHEME
    debug_mode: bool = False
    preferred_volume_impl: VolumeImpl = DEFAULT_PREFERRED_VOLUME_IMPL

    # Appearance
    theme: UiTheme = DEFAULT_THEME
    ui_orientation: NodeOrientation = DEFAULT_USER_INTERFACE_ORIENTATION

    keychain_provider: str = ""
    license_key: str = ""
    show_minimize_button: bool = False
    show_tray_icon: bool = False

    # Main window geometry
    window_x_position: int = 0
    window_y_position: int = 0
    window_width: int = 0
    window_height: int = 0
    display_configuration: str = ""

    # None means "use the system locale"
    language: Optional[str] = None

    @classmethod
    def from_environment(cls, env: Environment) -> Settings:
        """Create settings holding the defaults for the given environment.

        Args:
            env: Runtime environment supplying platform-dependent defaults

        Returns:
            Fresh Settings with an empty ``directories`` list
        """
        return cls(
            keychain_provider=env.default_keychain_provider,
            show_tray_icon=env.show_tray_icon,
        )
