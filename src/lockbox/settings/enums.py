"""Closed value sets used by the settings models.

Members are persisted by their symbolic ``name``; the ``value`` carries
whatever the UI needs to show or use.
"""

from enum import Enum


class WebDavUrlScheme(Enum):
    """URL scheme handed to GVFS when mounting a WebDAV volume."""

    DAV = "dav"
    WEBDAV = "webdav"

    @property
    def prefix(self) -> str:
        return f"{self.value}://"

    @property
    def display_name(self) -> str:
        if self is WebDavUrlScheme.DAV:
            return f"{self.prefix} (Gnome, Nautilus, ...)"
        return f"{self.prefix} (Dolphin, ...)"


class VolumeImpl(Enum):
    """Mechanism used to expose an unlocked vault as a drive."""

    WEBDAV = "WebDAV"
    FUSE = "FUSE"
    DOKANY = "Dokany"

    @property
    def display_name(self) -> str:
        return self.value


class UiTheme(Enum):
    """Colour scheme of the user interface."""

    LIGHT = "Light"
    DARK = "Dark"
    AUTOMATIC = "Automatic"  # follow the OS setting

    @property
    def display_name(self) -> str:
        return self.value


class NodeOrientation(Enum):
    """Reading direction of the user interface."""

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"
    INHERIT = "inherit"


class WhenUnlocked(Enum):
    """What to do with a vault's drive right after unlocking it."""

    IGNORE = "ignore"
    REVEAL = "reveal"
    ASK = "ask"
