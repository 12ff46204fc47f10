"""Settings models.

This package provides:
- Settings: application-wide user settings
- VaultSettings: settings of one configured vault
- The closed enums both of them use
"""

from lockbox.settings.application import (
    DEFAULT_GVFS_SCHEME,
    DEFAULT_PREFERRED_VOLUME_IMPL,
    DEFAULT_THEME,
    DEFAULT_USER_INTERFACE_ORIENTATION,
    Settings,
)
from lockbox.settings.enums import (
    NodeOrientation,
    UiTheme,
    VolumeImpl,
    WebDavUrlScheme,
    WhenUnlocked,
)
from lockbox.settings.vault import DEFAULT_ACTION_AFTER_UNLOCK, VaultSettings

__all__ = [
    "DEFAULT_ACTION_AFTER_UNLOCK",
    "DEFAULT_GVFS_SCHEME",
    "DEFAULT_PREFERRED_VOLUME_IMPL",
    "DEFAULT_THEME",
    "DEFAULT_USER_INTERFACE_ORIENTATION",
    "NodeOrientation",
    "Settings",
    "UiTheme",
    "VaultSettings",
    "VolumeImpl",
    "WebDavUrlScheme",
    "WhenUnlocked",
]
