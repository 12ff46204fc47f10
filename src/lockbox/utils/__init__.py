"""Common utility functions and helpers for the lockbox package."""

from lockbox.utils.file import atomic_write, ensure_directory_exists

__all__ = [
    "atomic_write",
    "ensure_directory_exists",
]
