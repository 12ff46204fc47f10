"""Settings of a single configured vault."""

from __future__ import annotations

import base64
import secrets
from pathlib import Path
from typing import Final, Optional

from pydantic import BaseModel, ConfigDict, Field

from lockbox.settings.enums import WhenUnlocked

DEFAULT_REVEAL_AFTER_MOUNT: Final = True
DEFAULT_MAX_CLEARTEXT_FILENAME_LENGTH: Final = -1  # unlimited
DEFAULT_ACTION_AFTER_UNLOCK: Final = WhenUnlocked.ASK
DEFAULT_AUTO_LOCK_IDLE_SECONDS: Final = 30 * 60


def generate_id() -> str:
    """Return a random, URL-safe 12 character vault id."""
    return base64.urlsafe_b64encode(secrets.token_bytes(9)).decode("ascii")


class VaultSettings(BaseModel):
    """Per-vault settings, one entry per vault in ``Settings.directories``."""

    model_config = ConfigDict(strict=True, validate_assignment=True)

    id: str = Field(default_factory=generate_id)
    path: Optional[Path] = None
    display_name: str = ""
    win_drive_letter: Optional[str] = None
    unlock_after_startup: bool = False
    reveal_after_mount: bool = DEFAULT_REVEAL_AFTER_MOUNT
    use_custom_mount_path: bool = False
    custom_mount_path: Optional[str] = None
    uses_read_only_mode: bool = False
    mount_flags: str = ""
    max_cleartext_filename_length: int = DEFAULT_MAX_CLEARTEXT_FILENAME_LENGTH
    action_after_unlock: WhenUnlocked = DEFAULT_ACTION_AFTER_UNLOCK
    auto_lock_when_idle: bool = False
    auto_lock_idle_seconds: int = DEFAULT_AUTO_LOCK_IDLE_SECONDS

    @classmethod
    def with_random_id(cls) -> VaultSettings:
        return cls(id=generate_id())
