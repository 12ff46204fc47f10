from pathlib import Path

import pytest

from lockbox.codec import SettingsCodec, VaultSettingsCodec
from lockbox.environment import Environment
from lockbox.settings import (
    NodeOrientation,
    Settings,
    UiTheme,
    VaultSettings,
    VolumeImpl,
    WebDavUrlScheme,
    WhenUnlocked,
)


@pytest.fixture
def env(tmp_path: Path) -> Environment:
    """Linux environment saving to a temporary directory."""
    return Environment(os_name="Linux", settings_paths=[tmp_path / "settings.json"])


@pytest.fixture
def codec(env: Environment) -> SettingsCodec:
    return SettingsCodec(env)


@pytest.fixture
def vault_codec() -> VaultSettingsCodec:
    return VaultSettingsCodec()


@pytest.fixture
def vault() -> VaultSettings:
    """Vault with every field set to something other than its default."""
    return VaultSettings(
        id="aBcDeFgHiJkL",
        path=Path("/home/user/Vaults/Work"),
        display_name="Work",
        win_drive_letter="W",
        unlock_after_startup=True,
        reveal_after_mount=False,
        use_custom_mount_path=True,
        custom_mount_path="/mnt/work",
        uses_read_only_mode=True,
        mount_flags="-ouid=1000",
        max_cleartext_filename_length=220,
        action_after_unlock=WhenUnlocked.REVEAL,
        auto_lock_when_idle=True,
        auto_lock_idle_seconds=600,
    )


@pytest.fixture
def settings(vault: VaultSettings) -> Settings:
    """Settings with every field set to something other than its default."""
    return Settings(
        directories=[vault, VaultSettings(id="mNoPqRsTuVwX", display_name="Private")],
        asked_for_update_check=True,
        check_for_updates_enabled=True,
        start_hidden=True,
        auto_close_vaults=True,
        port=8080,
        num_tray_notifications=7,
        preferred_gvfs_scheme=WebDavUrlScheme.WEBDAV,
        debug_mode=True,
        preferred_volume_impl=VolumeImpl.WEBDAV,
        theme=UiTheme.DARK,
        ui_orientation=NodeOrientation.RIGHT_TO_LEFT,
        keychain_provider="custom.keychain",
        license_key="LICENSE-1234",
        show_minimize_button=True,
        show_tray_icon=True,
        window_x_position=-10,
        window_y_position=25,
        window_width=1024,
        window_height=768,
        display_configuration="[0,0,1920,1080]",
        language="de-DE",
    )
