from pathlib import Path

import pytest
from pydantic import ValidationError

from lockbox.environment import Environment
from lockbox.settings import (
    DEFAULT_THEME,
    Settings,
    UiTheme,
    VaultSettings,
    WebDavUrlScheme,
)
from lockbox.settings.vault import generate_id


def test_from_environment_seeds_platform_defaults(tmp_path: Path) -> None:
    env = Environment(os_name="Darwin", settings_paths=[tmp_path / "s.json"], show_tray_icon=True)
    settings = Settings.from_environment(env)
    assert settings.keychain_provider == "macos.keychain"
    assert settings.show_tray_icon is True
    assert settings.theme == DEFAULT_THEME
    assert settings.directories == []


def test_default_directories_are_not_shared(env: Environment) -> None:
    first = Settings.from_environment(env)
    second = Settings.from_environment(env)
    first.directories.append(VaultSettings.with_random_id())
    assert second.directories == []


@pytest.mark.parametrize(
    "attribute, value",
    [
        ("port", "80"),
        ("port", True),
        ("start_hidden", 1),
        ("theme", "DARK"),
        ("license_key", None),
    ],
)
def test_assignment_is_strictly_validated(env: Environment, attribute: str, value: object) -> None:
    settings = Settings.from_environment(env)
    with pytest.raises(ValidationError):
        setattr(settings, attribute, value)


def test_assignment_accepts_members(env: Environment) -> None:
    settings = Settings.from_environment(env)
    settings.theme = UiTheme.AUTOMATIC
    settings.language = None
    assert settings.theme is UiTheme.AUTOMATIC


def test_generated_ids_are_url_safe() -> None:
    ids = {generate_id() for _ in range(50)}
    assert len(ids) == 50
    for vault_id in ids:
        assert len(vault_id) == 12
        assert "+" not in vault_id and "/" not in vault_id


def test_vault_defaults() -> None:
    vault = VaultSettings.with_random_id()
    assert vault.path is None
    assert vault.reveal_after_mount is True
    assert vault.max_cleartext_filename_length == -1
    assert vault.auto_lock_idle_seconds == 1800


def test_web_dav_scheme_prefix() -> None:
    assert WebDavUrlScheme.DAV.prefix == "dav://"
    assert WebDavUrlScheme.WEBDAV.display_name.startswith("webdav://")
