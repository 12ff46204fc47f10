# src/lockbox/codec/settings.py
"""JSON codec for the application-wide settings."""

from __future__ import annotations

from typing import Any, Optional

from lockbox.codec.fields import (
    JsonMember,
    ObjectCodec,
    boolean,
    enumerated,
    integer,
    optional_string,
    parse_enum,
    read_array,
    string,
)
from lockbox.codec.vault import VaultSettingsCodec
from lockbox.environment import Environment
from lockbox.settings.application import (
    DEFAULT_GVFS_SCHEME,
    DEFAULT_PREFERRED_VOLUME_IMPL,
    DEFAULT_THEME,
    DEFAULT_USER_INTERFACE_ORIENTATION,
    Settings,
)
from lockbox.settings.enums import NodeOrientation, UiTheme, VolumeImpl, WebDavUrlScheme
from lockbox.settings.vault import VaultSettings

# ─────────────────────────── enum fallbacks ──────────────────────────────────


def parse_web_dav_url_scheme(text: str) -> WebDavUrlScheme:
    return parse_enum(WebDavUrlScheme, text, DEFAULT_GVFS_SCHEME, "WebDAV url scheme")


def parse_volume_impl(text: str) -> VolumeImpl:
    return parse_enum(VolumeImpl, text, DEFAULT_PREFERRED_VOLUME_IMPL, "volume type")


def parse_ui_theme(text: str) -> UiTheme:
    return parse_enum(UiTheme, text, DEFAULT_THEME, "ui theme")


def parse_ui_orientation(text: str) -> NodeOrientation:
    return parse_enum(NodeOrientation, text, DEFAULT_USER_INTERFACE_ORIENTATION, "ui orientation")


def _extend(settings: Settings, attribute: str, vaults: list[VaultSettings]) -> None:
    getattr(settings, attribute).extend(vaults)


# ─────────────────────────── codec ───────────────────────────────────────────


class SettingsCodec(ObjectCodec[Settings]):
    """Reads and writes ``Settings`` as one JSON object.

    Writing always emits every member, in a fixed order, with the vaults
    nested as an array under ``directories``. Reading starts from the
    defaults of the given environment and overlays whatever members the
    document contains:

    - stale or misspelled enum values fall back to the field's default
    - unknown members are skipped
    - a value of the wrong JSON kind raises ``SettingsDecodeError``

    Examples:
        codec = SettingsCodec(Environment.from_env())
        with path.open(encoding="utf-8") as f:
            settings = codec.read(f)
    """

    def __init__(self, env: Environment, vault_codec: Optional[VaultSettingsCodec] = None):
        """Initialize the codec.

        Args:
            env: Environment used to build the default ``Settings`` on read
            vault_codec: Codec for the ``directories`` entries; one shared
                instance is used for every element
        """
        self.env = env
        self.vault_codec = vault_codec or VaultSettingsCodec()
        super().__init__(
            [
                JsonMember("directories", "directories", self._read_vaults, self._write_vaults, _extend),
                boolean("askedForUpdateCheck", "asked_for_update_check"),
                boolean("checkForUpdatesEnabled", "check_for_updates_enabled"),
                boolean("startHidden", "start_hidden"),
                boolean("autoCloseVaults", "auto_close_vaults"),
                integer("port", "port"),
                integer("numTrayNotifications", "num_tray_notifications"),
                enumerated("preferredGvfsScheme", "preferred_gvfs_scheme", parse_web_dav_url_scheme),
                boolean("debugMode", "debug_mode"),
                enumerated("preferredVolumeImpl", "preferred_volume_impl", parse_volume_impl),
                enumerated("theme", "theme", parse_ui_theme),
                enumerated("uiOrientation", "ui_orientation", parse_ui_orientation),
                string("keychainProvider", "keychain_provider"),
                string("licenseKey", "license_key"),
                boolean("showMinimizeButton", "show_minimize_button"),
                boolean("showTrayIcon", "show_tray_icon"),
                integer("windowXPosition", "window_x_position"),
                integer("windowYPosition", "window_y_position"),
                integer("windowWidth", "window_width"),
                integer("windowHeight", "window_height"),
                string("displayConfiguration", "display_configuration"),
                optional_string("language", "language"),
            ]
        )

    def create(self) -> Settings:
        return Settings.from_environment(self.env)

    def _write_vaults(self, vaults: list[VaultSettings]) -> list[dict[str, Any]]:
        return [self.vault_codec.encode(vault) for vault in vaults]

    def _read_vaults(self, member: str, value: Any) -> list[VaultSettings]:
        return [
            self.vault_codec.decode(element, f"{member}[{index}]")
            for index, element in enumerate(read_array(member, value))
        ]
