"""JSON encoding and decoding of settings."""

from lockbox.codec.fields import JsonMember, ObjectCodec, parse_enum
from lockbox.codec.settings import SettingsCodec
from lockbox.codec.vault import VaultSettingsCodec

__all__ = [
    "JsonMember",
    "ObjectCodec",
    "SettingsCodec",
    "VaultSettingsCodec",
    "parse_enum",
]
