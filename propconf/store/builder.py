"""
Entry builder.

The EntryBuilder stages comments for the next entry and registers every
entry it defines into its owning ConfigStore.

Example:
    store = ConfigStore("example", ConfigType.COMMON, config_dir="config")
    builder = store.entry_builder()

    enabled = builder.define_boolean("enableFeature", True)
    cooldown = builder.comment("Seconds between uses") \\
        .define_int_in_range("cooldownSeconds", 10, 1, 60)
    color = builder.comment("Tint of the overlay").define_enum("color", Color.RED)

    store.build()
"""

from enum import Enum
from typing import List, Union

from propconf.core.enums import ValueKind
from propconf.core.exceptions import ConfigurationError
from .codecs import get_codec, kind_of
from .entry import ConfigEntry, RangedConfigEntry, EnumConfigEntry

Number = Union[int, float]


class EntryBuilder:
    """Fluent helper declaring entries inside a ConfigStore."""

    def __init__(self, parent):
        self._parent = parent
        self._comments: List[str] = []

    def comment(self, comment: str) -> 'EntryBuilder':
        """Stage a comment for the next entry defined by this builder."""
        self._comments.append(comment)
        return self

    def define_boolean(self, key: str, default_value: bool) -> ConfigEntry[bool]:
        return self._define(key, default_value, ValueKind.BOOLEAN)

    def define_int(self, key: str, default_value: int) -> ConfigEntry[int]:
        return self._define(key, default_value, ValueKind.INTEGER)

    def define_double(self, key: str, default_value: float) -> ConfigEntry[float]:
        return self._define(key, default_value, ValueKind.DOUBLE)

    def define_long(self, key: str, default_value: int) -> ConfigEntry[int]:
        return self._define(key, default_value, ValueKind.LONG)

    def define_string(self, key: str, default_value: str) -> ConfigEntry[str]:
        return self._define(key, default_value, ValueKind.STRING)

    def define_enum(self, key: str, default_value: Enum) -> EnumConfigEntry:
        if not isinstance(default_value, Enum):
            raise ConfigurationError(key, repr(default_value), "enum entries need an Enum member as default")
        return self._build_entry(EnumConfigEntry(self._parent, key, default_value))

    def define_int_in_range(self, key: str, default_value: int,
                            min_value: int, max_value: int) -> RangedConfigEntry[int]:
        return self._define_ranged(key, default_value, min_value, max_value, ValueKind.INTEGER)

    def define_double_in_range(self, key: str, default_value: float,
                               min_value: float, max_value: float) -> RangedConfigEntry[float]:
        return self._define_ranged(key, default_value, min_value, max_value, ValueKind.DOUBLE)

    def define_long_in_range(self, key: str, default_value: int,
                             min_value: int, max_value: int) -> RangedConfigEntry[int]:
        return self._define_ranged(key, default_value, min_value, max_value, ValueKind.LONG)

    def define(self, key: str, default_value) -> ConfigEntry:
        """
        Define an entry whose kind follows the type of the default value.

        bool, int, float, str and Enum members are supported; ints become
        INTEGER entries, use define_long for 64-bit values.

        Raises:
            ConfigurationError: If the default value's type is not supported
        """
        kind = kind_of(default_value)
        if kind is None:
            raise ConfigurationError(key, repr(default_value),
                                     f"unsupported value type {type(default_value).__name__}")
        if kind is ValueKind.ENUM:
            return self.define_enum(key, default_value)
        return self._define(key, default_value, kind)

    def define_in_range(self, key: str, default_value: Number,
                        min_value: Number, max_value: Number) -> RangedConfigEntry:
        """
        Define a ranged entry whose kind follows the type of the default value.

        Raises:
            ConfigurationError: If the default value is not an int or a float
        """
        kind = kind_of(default_value)
        if kind not in (ValueKind.INTEGER, ValueKind.DOUBLE):
            raise ConfigurationError(key, repr(default_value), "ranged entries need an int or float default")
        return self._define_ranged(key, default_value, min_value, max_value, kind)

    def _define(self, key: str, default_value, kind: ValueKind) -> ConfigEntry:
        entry = ConfigEntry(self._parent, key, default_value, kind, get_codec(kind))
        return self._build_entry(entry)

    def _define_ranged(self, key: str, default_value: Number, min_value: Number,
                       max_value: Number, kind: ValueKind) -> RangedConfigEntry:
        entry = RangedConfigEntry(self._parent, key, default_value, min_value, max_value,
                                  kind, get_codec(kind))
        return self._build_entry(entry)

    def _build_entry(self, entry: ConfigEntry) -> ConfigEntry:
        """Register the entry, hand it the staged comments and reset the stage."""
        self._parent._register(entry)
        for comment in self._comments:
            entry.comment(comment)
        self._comments = []
        return entry
