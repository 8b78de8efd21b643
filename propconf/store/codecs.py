"""
Text codecs for entry values.

Every value kind is paired with a parser and a formatter. The pair is
attached to an entry when it is declared, so the store never has to guess
how to read a value from the type of whatever it currently holds.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from propconf.core.enums import ValueKind
from propconf.core.exceptions import ConfigurationError

INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1
LONG_MIN, LONG_MAX = -2 ** 63, 2 ** 63 - 1


@dataclass(frozen=True)
class ValueCodec:
    """Parser/formatter pair for one value kind."""
    kind: ValueKind
    parse: Callable[[str], Any]
    format: Callable[[Any], str]


def parse_boolean(text: str) -> bool:
    normalized = text.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ValueError("expected 'true' or 'false'")


def format_boolean(value: bool) -> str:
    return "true" if value else "false"


def _integer_parser(lower: int, upper: int) -> Callable[[str], int]:
    def parse(text: str) -> int:
        value = int(text.strip(), 10)
        if value < lower or value > upper:
            raise ValueError(f"out of range [{lower}, {upper}]")
        return value
    return parse


parse_integer = _integer_parser(INT_MIN, INT_MAX)
parse_long = _integer_parser(LONG_MIN, LONG_MAX)


def parse_double(text: str) -> float:
    return float(text.strip())


def format_double(value: float) -> str:
    return repr(float(value))


_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r"}
_ESCAPED = re.compile(r"\\(.)", re.DOTALL)


def format_string(value: str) -> str:
    """Escape backslashes and line breaks so the value stays on one line."""
    return "".join(_ESCAPES.get(char, char) for char in str(value))


def parse_string(text: str) -> str:
    """Undo format_string. Unknown escapes such as `\\d` are kept as written."""
    return _ESCAPED.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(0)), text)


def enum_option(member: Enum) -> str:
    """Textual form of an enum member as written to config files."""
    return member.name.lower()


def enum_codec(enum_class: Type[Enum]) -> ValueCodec:
    """
    Build a codec for an enum class.

    Members are written as their lowercased name and read back
    case-insensitively.

    Raises:
        ConfigurationError: If two member names differ only by case
    """
    members = {}
    for member in enum_class:
        name = member.name.lower()
        if name in members:
            raise ConfigurationError(enum_class.__name__, name,
                                     "member names must stay distinct when lowercased")
        members[name] = member

    def parse(text: str) -> Enum:
        try:
            return members[text.strip().lower()]
        except KeyError:
            raise ValueError(f"no member of {enum_class.__name__} named {text!r}") from None

    return ValueCodec(ValueKind.ENUM, parse, enum_option)


CODECS: Dict[ValueKind, ValueCodec] = {
    ValueKind.BOOLEAN: ValueCodec(ValueKind.BOOLEAN, parse_boolean, format_boolean),
    ValueKind.INTEGER: ValueCodec(ValueKind.INTEGER, parse_integer, str),
    ValueKind.LONG: ValueCodec(ValueKind.LONG, parse_long, str),
    ValueKind.DOUBLE: ValueCodec(ValueKind.DOUBLE, parse_double, format_double),
    ValueKind.STRING: ValueCodec(ValueKind.STRING, parse_string, format_string),
}


def get_codec(kind: ValueKind, enum_class: Optional[Type[Enum]] = None) -> Optional[ValueCodec]:
    """Return the codec for a kind, or None when the kind is not supported."""
    if kind is ValueKind.ENUM:
        return enum_codec(enum_class) if enum_class is not None else None
    return CODECS.get(kind)


def kind_of(value: Any) -> Optional[ValueKind]:
    """Infer the value kind of a default value, or None when unsupported."""
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Enum):
        return ValueKind.ENUM
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.DOUBLE
    if isinstance(value, str):
        return ValueKind.STRING
    return None
