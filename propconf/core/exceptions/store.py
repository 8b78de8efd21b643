"""
Config store exceptions.

Errors raised while parsing a config file are recoverable: the store
records them on a LoadReport and logs them instead of raising.
"""

from .base import PropConfError, NotFoundError


class ConfigStoreError(PropConfError):
    """Base exception for config store errors."""
    pass


class MalformedLineError(ConfigStoreError):
    """Raised for a value line without '=' or with an unregistered key."""

    def __init__(self, file_path: str, line_number: int, line: str, reason: str = None):
        self.file_path = file_path
        self.line_number = line_number
        self.line = line
        self.reason = reason or "unknown entry"
        super().__init__(
            f"Malformed line {line_number} in '{file_path}': {self.reason} ({line!r})"
        )


class InvalidValueError(ConfigStoreError):
    """Raised when raw text cannot be parsed as the entry's declared type."""

    def __init__(self, key: str, raw_value: str, reason: str = None):
        self.key = key
        self.raw_value = raw_value
        self.reason = reason
        message = f"Invalid value {raw_value!r} for entry '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidEnumValueError(InvalidValueError):
    """Raised when raw text matches no member of the entry's enum."""

    def __init__(self, key: str, raw_value: str, options: list = None):
        self.options = list(options or [])
        reason = "expected one of " + ", ".join(self.options) if self.options else None
        super().__init__(key, raw_value, reason)


class UnsupportedValueTypeError(ConfigStoreError):
    """Raised when an entry carries no codec for its value kind."""

    def __init__(self, key: str, kind=None):
        self.key = key
        self.kind = kind
        super().__init__(f"Unsupported value type for entry '{key}': {kind}")


class ConfigIOError(ConfigStoreError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, file_path: str, operation: str, reason: str = None):
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
        message = f"Could not {operation} config file '{file_path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EntryNotFoundError(NotFoundError):
    """Raised when a required entry key is not registered."""

    def __init__(self, key: str):
        self.key = key
        super().__init__("Config entry", key)


class StoreNotFoundError(NotFoundError):
    """Raised when a registry has no store for a file name and type."""

    def __init__(self, file_name: str, config_type=None):
        self.file_name = file_name
        self.config_type = config_type
        identifier = file_name if config_type is None else f"{file_name}-{config_type.value}"
        super().__init__("Config store", identifier)
