"""JSON codec for a single vault's settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from lockbox.codec.fields import (
    JsonMember,
    ObjectCodec,
    boolean,
    enumerated,
    integer,
    optional_string,
    parse_enum,
    read_optional_str,
    string,
)
from lockbox.settings.enums import WhenUnlocked
from lockbox.settings.vault import DEFAULT_ACTION_AFTER_UNLOCK, VaultSettings


def parse_when_unlocked(text: str) -> WhenUnlocked:
    return parse_enum(WhenUnlocked, text, DEFAULT_ACTION_AFTER_UNLOCK, "unlock action")


def _read_path(member: str, value: Any) -> Optional[Path]:
    text = read_optional_str(member, value)
    return Path(text) if text else None


def _write_path(path: Optional[Path]) -> Optional[str]:
    return str(path) if path is not None else None


class VaultSettingsCodec(ObjectCodec[VaultSettings]):
    """Reads and writes one ``VaultSettings`` as one JSON object.

    A vault entry without an ``id`` member gets a fresh random id.
    """

    label = "vault setting"

    def __init__(self) -> None:
        super().__init__(
            [
                string("id", "id"),
                JsonMember("path", "path", _read_path, _write_path),
                string("displayName", "display_name"),
                optional_string("winDriveLetter", "win_drive_letter"),
                boolean("unlockAfterStartup", "unlock_after_startup"),
                boolean("revealAfterMount", "reveal_after_mount"),
                boolean("useCustomMountPath", "use_custom_mount_path"),
                optional_string("customMountPath", "custom_mount_path"),
                boolean("usesReadOnlyMode", "uses_read_only_mode"),
                string("mountFlags", "mount_flags"),
                integer("maxCleartextFilenameLength", "max_cleartext_filename_length"),
                enumerated("actionAfterUnlock", "action_after_unlock", parse_when_unlocked),
                boolean("autoLockWhenIdle", "auto_lock_when_idle"),
                integer("autoLockIdleSeconds", "auto_lock_idle_seconds"),
            ]
        )

    def create(self) -> VaultSettings:
        return VaultSettings.with_random_id()
