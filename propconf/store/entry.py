"""
Config entries.

An entry is a single named, typed and defaulted value managed by a
ConfigStore. Entries are declared through an EntryBuilder, never directly.
"""

from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from propconf.core.enums import ValueKind
from propconf.core.exceptions import (
    InvalidValueError, InvalidEnumValueError, UnsupportedValueTypeError
)
from propconf.logger import get_propconf_logger
from .codecs import ValueCodec, enum_codec, enum_option

T = TypeVar('T')
N = TypeVar('N', int, float)
E = TypeVar('E', bound=Enum)


class ConfigEntry(Generic[T]):
    """
    A named config value with a default.

    The current value passes through the entry's validator on every
    `set_value`. When the value was never set, or is a blank string,
    `get_value` falls back to the default.
    """

    def __init__(self, parent, key: str, default_value: T, kind: ValueKind,
                 codec: Optional[ValueCodec] = None,
                 validator: Optional[Callable[[T], T]] = None):
        self._parent = parent
        self._key = key
        self._default_value = default_value
        self._value: Optional[T] = None
        self._comments: List[str] = []
        self.kind = kind
        self.codec = codec
        self._validator = validator or (lambda value: value)

    @property
    def parent(self):
        """The ConfigStore holding this entry."""
        return self._parent

    @property
    def key(self) -> str:
        return self._key

    @property
    def default_value(self) -> T:
        return self._default_value

    @property
    def value(self) -> Optional[T]:
        """The raw current value, None when never set."""
        return self._value

    @property
    def comments(self) -> List[str]:
        return list(self._comments)

    def get_value(self) -> T:
        """Return the current value, or the default when unset or blank."""
        if self._value is None:
            return self._default_value
        if isinstance(self._value, str) and not self._value.strip():
            return self._default_value
        return self._value

    def get_default_value(self) -> T:
        return self._default_value

    def set_value(self, value: T):
        """
        Change the current value of this entry.

        Call ConfigStore.save() afterwards to persist the change.
        """
        self._value = self._validator(value)

    def set_value_from_text(self, text: str):
        """
        Parse text with the entry's codec and set the result.

        Raises:
            InvalidValueError: If the text is not a valid value for this entry
            UnsupportedValueTypeError: If the entry has no codec
        """
        if self.codec is None:
            raise UnsupportedValueTypeError(self._key, self.kind)
        try:
            parsed = self.codec.parse(text)
        except (ValueError, TypeError) as e:
            raise self._invalid_value(text, e) from e
        self.set_value(parsed)

    def reset_to_default(self):
        self.set_value(self._default_value)

    def format_value(self, value: Any = None) -> str:
        """Textual form of a value (the current one by default) as written to file."""
        if value is None:
            value = self.get_value()
        if self.codec is None:
            return str(value)
        return self.codec.format(value)

    def comment(self, comment: str) -> 'ConfigEntry[T]':
        """Add a comment line written above the entry."""
        self._comments.append(comment)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Metadata snapshot for collaborators rendering this entry."""
        return {
            'key': self._key,
            'kind': self.kind.value,
            'default': self._default_value,
            'value': self.get_value(),
            'comments': self.comments
        }

    def _invalid_value(self, text: str, error: Exception) -> InvalidValueError:
        return InvalidValueError(self._key, text, str(error))

    def __repr__(self):
        return f"{type(self).__name__}(key={self._key!r}, value={self.get_value()!r})"


class RangedConfigEntry(ConfigEntry[N]):
    """
    A numeric entry whose value always stays inside [min_value, max_value].

    Out-of-range values are clamped to the nearest bound. A default declared
    outside the range is clamped the same way when the entry is created.
    """

    def __init__(self, parent, key: str, default_value: N, min_value: N, max_value: N,
                 kind: ValueKind, codec: Optional[ValueCodec] = None):
        self._min_value = min_value
        self._max_value = max_value
        super().__init__(parent, key, default_value, kind, codec, validator=self._clamp)

        clamped = self._clamp(default_value)
        if clamped != default_value:
            get_propconf_logger().bind(component="RangedConfigEntry").warning(
                "Default value out of range, clamped",
                key=key, default=default_value, clamped=clamped,
                min_value=min_value, max_value=max_value
            )
            self._default_value = clamped

    @property
    def min_value(self) -> N:
        return self._min_value

    @property
    def max_value(self) -> N:
        return self._max_value

    def get_min_value(self) -> N:
        return self._min_value

    def get_max_value(self) -> N:
        return self._max_value

    def _clamp(self, value: N) -> N:
        # NaN orders above every number
        if value != value:
            return self._max_value
        if value < self._min_value:
            return self._min_value
        if value > self._max_value:
            return self._max_value
        return value

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['min_value'] = self._min_value
        data['max_value'] = self._max_value
        return data


class EnumConfigEntry(ConfigEntry[E]):
    """An entry holding one member of the default value's enum class."""

    def __init__(self, parent, key: str, default_value: E):
        super().__init__(parent, key, default_value, ValueKind.ENUM,
                         enum_codec(type(default_value)))

    def get_enum_class(self) -> Type[E]:
        return type(self._default_value)

    def get_enum_domain(self) -> List[E]:
        """Members of the enum class in declaration order."""
        return list(self.get_enum_class())

    def get_options(self) -> List[str]:
        return [enum_option(member) for member in self.get_enum_domain()]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['options'] = self.get_options()
        return data

    def _invalid_value(self, text: str, error: Exception) -> InvalidValueError:
        return InvalidEnumValueError(self._key, text, self.get_options())
