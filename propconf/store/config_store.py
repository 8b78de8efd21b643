"""
File-backed config store.

A ConfigStore manages a single `.properties` file: it owns the entries
declared through its EntryBuilder, loads their values from the file and
rewrites the file in a canonical, commented format.
"""

from pathlib import Path
from typing import List, Optional, Union

import structlog

from propconf.core.enums import ConfigType
from propconf.core.exceptions import (
    MalformedLineError, InvalidValueError, UnsupportedValueTypeError,
    ConfigIOError, EntryNotFoundError
)
from propconf.logger import get_propconf_logger
from .builder import EntryBuilder
from .entry import ConfigEntry, RangedConfigEntry, EnumConfigEntry
from .report import LoadReport

FILE_EXTENSION = ".properties"
SECTION_HEADER = "[Settings]"
COMMENT_MARKER = "#"
SECTION_MARKER = "["
ENTRY_SEPARATOR = "="


def resolve_config_path(config_dir: Union[str, Path], file_name: str,
                        config_type: ConfigType = ConfigType.COMMON) -> Path:
    """Path of the config file for a file name and type, e.g. `config/mymod-client.properties`."""
    return Path(config_dir) / f"{file_name}-{config_type.value}{FILE_EXTENSION}"


class ConfigStore:
    """
    Typed settings persisted to a human-editable text file.

    One instance manages one file; use several instances (or a
    StoreRegistry) for several files. Declare entries through
    `entry_builder()`, then call `build()` once at startup. Loading never
    raises: lines that cannot be understood are dropped, and values that
    cannot be parsed fall back to the entry default.
    """

    def __init__(self, file_name: str, config_type: ConfigType = ConfigType.COMMON,
                 config_dir: Union[str, Path] = "config"):
        self.file_name = file_name
        self.config_type = config_type
        self.file_path = resolve_config_path(config_dir, file_name, config_type)
        self.logger = get_propconf_logger().bind(component="ConfigStore", store=file_name)

        self._comments: List[str] = []
        self._entries: List[ConfigEntry] = []
        self.last_report: Optional[LoadReport] = None

    def get_config_file_path(self) -> str:
        return str(self.file_path)

    def get_type(self) -> ConfigType:
        return self.config_type

    @property
    def comments(self) -> List[str]:
        return list(self._comments)

    def get_entry(self, key: str) -> Optional[ConfigEntry]:
        """Return the entry registered under key, or None."""
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def require_entry(self, key: str) -> ConfigEntry:
        """
        Return the entry registered under key.

        Raises:
            EntryNotFoundError: If no entry uses this key
        """
        entry = self.get_entry(key)
        if entry is None:
            raise EntryNotFoundError(key)
        return entry

    def get_entries(self) -> List[ConfigEntry]:
        return list(self._entries)

    def comment(self, comment: str) -> 'ConfigStore':
        """Add a comment written at the top of the file."""
        self._comments.append(comment)
        return self

    def entry_builder(self) -> EntryBuilder:
        return EntryBuilder(self)

    def exists(self) -> bool:
        return self.file_path.exists()

    def build(self) -> LoadReport:
        """
        Load the file if it exists, then write it back in canonical form.

        Call once after every entry has been declared.

        Returns:
            The report of the load, empty when there was no file yet
        """
        if self.exists():
            report = self.load()
        else:
            report = LoadReport(str(self.file_path))
            self.last_report = report
            self.logger.info("Config file not found, creating it", file_path=str(self.file_path))

        self.save()
        return report

    def load(self) -> LoadReport:
        """
        Load entry values from the config file.

        Every line is handled on its own: a bad line is recorded on the
        report and logged, and loading goes on with the next line. A file
        that cannot be read stops the load, keeping values already applied.

        Returns:
            LoadReport listing the recoverable errors
        """
        report = LoadReport(str(self.file_path))

        with structlog.contextvars.bound_contextvars(file_path=str(self.file_path)):
            try:
                # utf-8-sig drops the byte order mark some editors write
                with open(self.file_path, 'r', encoding='utf-8-sig') as f:
                    for line_number, line in enumerate(f, start=1):
                        self._parse_line(line.rstrip('\r\n'), line_number, report)
            except (OSError, UnicodeDecodeError) as e:
                report.add_error(ConfigIOError(str(self.file_path), "read", str(e)))
                self.logger.error("Failed to read config file", error=str(e))

            self.logger.info("Config file loaded",
                             loaded=len(report.loaded_keys), errors=len(report.errors))

        self.last_report = report
        return report

    def save(self) -> bool:
        """
        Write every entry to the config file.

        Called by `build()`, and again whenever values changed at runtime
        need to be persisted.

        Returns:
            True if the file was written, False on I/O failure
        """
        try:
            text = self.render()
        except (ValueError, TypeError, AttributeError) as e:
            self.logger.error("Failed to format config values, file left untouched",
                              file_path=str(self.file_path), error=str(e))
            return False

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            self.logger.error("Failed to write config file",
                              file_path=str(self.file_path), error=str(e))
            return False

        self.logger.debug("Config file saved", file_path=str(self.file_path), entries=len(self._entries))
        return True

    def render(self) -> str:
        """Canonical text of the config file for the current values."""
        lines = [f"{COMMENT_MARKER} {comment}" for comment in self._comments]
        lines += ["", SECTION_HEADER, ""]

        for entry in self._entries:
            lines += [f"{COMMENT_MARKER} {comment}" for comment in entry.comments]

            if isinstance(entry, RangedConfigEntry):
                lines.append(f"{COMMENT_MARKER} Range: min={entry.format_value(entry.min_value)}, "
                             f"max={entry.format_value(entry.max_value)}")
            elif isinstance(entry, EnumConfigEntry):
                lines.append(f"{COMMENT_MARKER} Options: " + ", ".join(entry.get_options()))

            lines.append(f"{COMMENT_MARKER} Default = {entry.format_value(entry.default_value)}")
            lines.append(f"{entry.key}{ENTRY_SEPARATOR}{entry.format_value()}")
            lines.append("")

        return "\n".join(lines) + "\n"

    def reset_to_defaults(self):
        """Set every entry back to its default value. The file is left untouched."""
        for entry in self._entries:
            entry.reset_to_default()

    def _register(self, entry: ConfigEntry):
        if self.get_entry(entry.key) is not None:
            self.logger.warning("Duplicate entry key, lookups return the first one", key=entry.key)
        self._entries.append(entry)

    @staticmethod
    def _is_value_line(line: str) -> bool:
        if not line:
            return False
        return not (line.startswith(COMMENT_MARKER) or line.startswith(SECTION_MARKER))

    def _parse_line(self, line: str, line_number: int, report: LoadReport):
        """Apply one line of the config file to the matching entry."""
        if not self._is_value_line(line):
            return

        name, separator, raw_value = line.partition(ENTRY_SEPARATOR)
        key = name.strip()
        entry = self.get_entry(key) if separator else None

        if entry is None:
            reason = "unknown entry" if separator else f"missing '{ENTRY_SEPARATOR}'"
            report.add_error(MalformedLineError(str(self.file_path), line_number, line, reason))
            self.logger.error("Unknown entry found, removing it",
                              key=key, line=line_number, reason=reason)
            return

        try:
            entry.set_value_from_text(raw_value)
        except InvalidValueError as e:
            entry.reset_to_default()
            report.add_error(e)
            self.logger.error("Invalid value for entry, loaded default value",
                              key=key, line=line_number, value=raw_value, error=str(e))
        except UnsupportedValueTypeError as e:
            entry.reset_to_default()
            report.add_error(e)
            self.logger.error("Unsupported value type for entry, loaded default value",
                              key=key, line=line_number, kind=str(entry.kind))
        else:
            report.mark_loaded(key)

    def __repr__(self):
        return f"ConfigStore(file_path={str(self.file_path)!r}, entries={len(self._entries)})"
