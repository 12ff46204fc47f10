"""Exception classes for settings encoding and decoding.

Only structural problems are raised. Semantic problems (stale enum values,
unknown members) are recovered by the codecs and merely logged.
"""

from __future__ import annotations

from typing import Optional


class SettingsError(Exception):
    """Base class for all settings persistence errors."""


class SettingsDecodeError(SettingsError):
    """Raised when a settings document is structurally malformed.

    Covers invalid JSON text, a root value that is not an object, and a
    member whose value has the wrong JSON kind (e.g. a string where an
    integer is expected).
    """

    def __init__(
        self,
        message: str,
        member: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the problem
            member: JSON member the problem was found in, if any
            original_error: The underlying exception that was caught
        """
        super().__init__(f"[{member}] {message}" if member else message)
        self.message: str = message
        self.member: Optional[str] = member
        self.original_error: Optional[Exception] = original_error
