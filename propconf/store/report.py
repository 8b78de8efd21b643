"""
Load reports.

A LoadReport collects the recoverable errors met while loading a config
file, so callers can inspect what was dropped or reset to defaults.
"""

from typing import List, Optional

from propconf.core.exceptions import (
    ConfigStoreError, MalformedLineError, InvalidValueError, ConfigIOError
)


class LoadReport:
    """Result of loading a config file."""

    def __init__(self, file_path: str, errors: Optional[List[ConfigStoreError]] = None):
        self.file_path = file_path
        self.errors = errors or []
        self.loaded_keys: List[str] = []

    @property
    def is_clean(self) -> bool:
        return not self.errors

    def add_error(self, error: ConfigStoreError):
        """Record a recoverable error."""
        self.errors.append(error)

    def mark_loaded(self, key: str):
        self.loaded_keys.append(key)

    @property
    def malformed_lines(self) -> List[MalformedLineError]:
        return [e for e in self.errors if isinstance(e, MalformedLineError)]

    @property
    def invalid_values(self) -> List[InvalidValueError]:
        return [e for e in self.errors if isinstance(e, InvalidValueError)]

    @property
    def io_error(self) -> Optional[ConfigIOError]:
        for error in self.errors:
            if isinstance(error, ConfigIOError):
                return error
        return None

    def __bool__(self):
        return self.is_clean

    def __repr__(self):
        return (f"LoadReport(file_path={self.file_path!r}, loaded={len(self.loaded_keys)}, "
                f"errors={len(self.errors)})")
