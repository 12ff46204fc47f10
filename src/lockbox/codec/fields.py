"""Building blocks shared by the settings codecs.

A codec is described by a table of ``JsonMember`` entries, each binding one
JSON member name to one model attribute together with the functions that
convert between the two. ``ObjectCodec`` walks that table to encode and
dispatches on it to decode.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Final, Generic, Optional, TextIO, TypeVar

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from lockbox.errors import SettingsDecodeError

logger: Final = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
M = TypeVar("M", bound=BaseModel)

MemberDecoder = Callable[[str, Any], Any]
MemberEncoder = Callable[[Any], Any]
MemberApplier = Callable[[Any, str, Any], None]

INT_MIN: Final = -(2**31)
INT_MAX: Final = 2**31 - 1

_BOOL: Final = TypeAdapter(StrictBool)
_INT: Final = TypeAdapter(Annotated[StrictInt, Field(ge=INT_MIN, le=INT_MAX)])
_STR: Final = TypeAdapter(StrictStr)
_OPTIONAL_STR: Final = TypeAdapter(Optional[StrictStr])


class JsonObject(list):
    """Members of a parsed JSON object as ``(name, value)`` pairs.

    Keeps document order and repeated names, which a ``dict`` would
    collapse. Produced by ``parse_json`` for every object in a document.
    """


def parse_json(text: str) -> Any:
    """Parse JSON text, turning every object into a ``JsonObject``.

    Raises:
        SettingsDecodeError: If ``text`` is not valid JSON
    """
    try:
        return json.loads(text, object_pairs_hook=JsonObject)
    except json.JSONDecodeError as err:
        raise SettingsDecodeError(f"invalid JSON: {err}", original_error=err) from err


def object_members(value: Any) -> Optional[Iterable[tuple[str, Any]]]:
    """Return the members of a JSON object, or None if ``value`` is not one."""
    if isinstance(value, JsonObject):
        return value
    if isinstance(value, dict):
        return value.items()
    return None


def json_kind(value: Any) -> str:
    """Name the JSON kind of an already parsed value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, (JsonObject, dict)):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _read(adapter: TypeAdapter[Any], expected: str, member: str, value: Any) -> Any:
    try:
        return adapter.validate_python(value)
    except ValidationError as err:
        raise SettingsDecodeError(
            f"expected {expected}, got {json_kind(value)}", member, err
        ) from err


def read_bool(member: str, value: Any) -> bool:
    return _read(_BOOL, "boolean", member, value)


def read_int(member: str, value: Any) -> int:
    """Read a 32-bit signed integer; larger values are rejected like any other mismatch."""
    return _read(_INT, "32-bit integer", member, value)


def read_str(member: str, value: Any) -> str:
    return _read(_STR, "string", member, value)


def read_optional_str(member: str, value: Any) -> Optional[str]:
    return _read(_OPTIONAL_STR, "string or null", member, value)


def read_array(member: str, value: Any) -> list[Any]:
    if not isinstance(value, list) or isinstance(value, JsonObject):
        raise SettingsDecodeError(f"expected array, got {json_kind(value)}", member)
    return value


def parse_enum(enum_cls: type[E], text: str, default: E, label: str) -> E:
    """Resolve an enum member by name, ignoring case.

    Never fails: unknown text is logged and replaced by ``default`` so that
    files written by other versions, or edited by hand, still load.

    Args:
        enum_cls: Enum to look the name up in
        text: Candidate member name as found in the document
        default: Member returned when ``text`` matches nothing
        label: Human-readable name of the field, used in the warning

    Returns:
        The matching member, or ``default``
    """
    try:
        return enum_cls[text.upper()]
    except KeyError:
        logger.warning("Invalid %s %s. Defaulting to %s.", label, text, default.name)
        return default


def _identity(value: Any) -> Any:
    return value


def _enum_name(value: Enum) -> str:
    return value.name


@dataclass(frozen=True)
class JsonMember:
    """Binding of a JSON member name to a model attribute.

    ``decode`` receives the member name (for error messages) and the raw
    JSON value and returns the attribute value. ``apply`` stores it on the
    model and defaults to plain assignment.
    """

    name: str
    attribute: str
    decode: MemberDecoder
    encode: MemberEncoder = _identity
    apply: MemberApplier = setattr


def boolean(name: str, attribute: str) -> JsonMember:
    return JsonMember(name, attribute, read_bool)


def integer(name: str, attribute: str) -> JsonMember:
    return JsonMember(name, attribute, read_int)


def string(name: str, attribute: str) -> JsonMember:
    return JsonMember(name, attribute, read_str)


def optional_string(name: str, attribute: str) -> JsonMember:
    return JsonMember(name, attribute, read_optional_str)


def enumerated(name: str, attribute: str, parse: Callable[[str], Enum]) -> JsonMember:
    """Member holding an enum, written by name and parsed leniently by ``parse``."""

    def decode(member: str, value: Any) -> Enum:
        return parse(read_str(member, value))

    return JsonMember(name, attribute, decode, encode=_enum_name)


class ObjectCodec(ABC, Generic[M]):
    """Encodes a model as one JSON object and decodes it back.

    Subclasses provide the member table and ``create``, which returns the
    default-initialised instance that decoded members are written onto.
    Members are emitted in table order; on decode they may come in any
    order, any may be missing and unknown ones are skipped with a warning.
    """

    label: str = "setting"

    def __init__(self, members: Sequence[JsonMember]) -> None:
        self.members: tuple[JsonMember, ...] = tuple(members)
        self._by_name: dict[str, JsonMember] = {m.name: m for m in self.members}

    @abstractmethod
    def create(self) -> M:
        """Return the default-initialised instance decoded members are applied to."""

    def encode(self, value: M) -> dict[str, Any]:
        return {m.name: m.encode(getattr(value, m.attribute)) for m in self.members}

    def decode(self, raw: Any, member: Optional[str] = None) -> M:
        """Build a model from a parsed JSON value.

        Members are applied in encounter order. A name that occurs more than
        once is applied once per occurrence.

        Args:
            raw: Parsed JSON object, either a ``JsonObject`` or a ``dict``
            member: Where ``raw`` sits in the enclosing document, for errors

        Returns:
            Defaults overwritten by every recognised member of ``raw``

        Raises:
            SettingsDecodeError: If ``raw`` or one of its members has the
                wrong JSON kind
        """
        pairs = object_members(raw)
        if pairs is None:
            raise SettingsDecodeError(f"expected object, got {json_kind(raw)}", member)

        result = self.create()
        for name, value in pairs:
            binding = self._by_name.get(name)
            if binding is None:
                logger.warning("Unsupported %s found in JSON: %s", self.label, name)
                continue
            binding.apply(result, binding.attribute, binding.decode(name, value))
        return result

    def dumps(self, value: M) -> str:
        return json.dumps(self.encode(value), indent=2, ensure_ascii=False)

    def loads(self, text: str) -> M:
        return self.decode(parse_json(text))

    def write(self, out: TextIO, value: M) -> None:
        """Write ``value`` to a text stream as an indented JSON document."""
        out.write(self.dumps(value))
        out.write("\n")

    def read(self, in_: TextIO) -> M:
        """Read one JSON document from a text stream and decode it.

        Raises:
            SettingsDecodeError: If the stream is not valid text in its
                encoding, or not a well-formed document
        """
        try:
            text = in_.read()
        except UnicodeDecodeError as err:
            raise SettingsDecodeError(
                f"invalid {err.encoding} text: {err.reason}", original_error=err
            ) from err
        return self.loads(text)
