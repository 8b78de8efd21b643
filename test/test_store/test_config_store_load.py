"""
Tests for ConfigStore.load: line classification, per-line recovery and
I/O failures.
"""

from structlog.testing import capture_logs

from propconf.core.exceptions import (
    ConfigIOError, InvalidEnumValueError, InvalidValueError, MalformedLineError,
    UnsupportedValueTypeError
)
from propconf.core.enums import ValueKind
from propconf.store import ConfigEntry

from conftest import Color


class TestConfigStoreLoad:

    def test_loads_values_of_every_kind(self, store, example_entries, write_config):
        write_config(
            "[Settings]\n"
            "flag=false\n"
            "count=42\n"
            "ratio=0.25\n"
            "seed=123456789012\n"
            "greeting=Good morning\n"
            "volume=7\n"
            "scale=1.5\n"
            "timeout=50000\n"
            "color=green\n"
        )

        report = store.load()

        assert report.is_clean
        assert example_entries['flag'].get_value() is False
        assert example_entries['count'].get_value() == 42
        assert example_entries['ratio'].get_value() == 0.25
        assert example_entries['seed'].get_value() == 123456789012
        assert example_entries['greeting'].get_value() == "Good morning"
        assert example_entries['volume'].get_value() == 7
        assert example_entries['scale'].get_value() == 1.5
        assert example_entries['timeout'].get_value() == 50000
        assert example_entries['color'].get_value() is Color.GREEN
        assert len(report.loaded_keys) == 9
        assert store.last_report is report

    def test_comments_sections_and_blank_lines_are_ignored(self, store, write_config):
        count = store.entry_builder().define_int("count", 10)
        write_config("# count=1\n[count=2]\n\ncount=3\n")

        report = store.load()

        assert report.is_clean
        assert count.get_value() == 3

    def test_value_split_on_first_equals_only(self, store, write_config):
        query = store.entry_builder().define_string("query", "")
        write_config("query=a=b=c\n")

        store.load()

        assert query.get_value() == "a=b=c"

    def test_key_whitespace_is_ignored(self, store, write_config):
        count = store.entry_builder().define_int("count", 10)
        write_config("count = 4\n")

        store.load()

        assert count.get_value() == 4

    def test_unknown_key_is_dropped(self, store, example_entries, write_config):
        write_config("count=12\nmystery=1\ncolor=blue\n")

        with capture_logs() as logs:
            report = store.load()

        assert example_entries['count'].get_value() == 12
        assert example_entries['color'].get_value() is Color.BLUE
        assert store.get_entry("mystery") is None
        assert len(report.malformed_lines) == 1
        error = report.malformed_lines[0]
        assert isinstance(error, MalformedLineError)
        assert error.line_number == 2
        assert error.reason == "unknown entry"
        assert any(log["event"] == "Unknown entry found, removing it" and log["line"] == 2
                   for log in logs)

    def test_line_without_separator_is_dropped(self, store, write_config):
        count = store.entry_builder().define_int("count", 10)
        write_config("count\ncount=5\n")

        report = store.load()

        assert count.get_value() == 5
        assert len(report.malformed_lines) == 1
        assert report.malformed_lines[0].line_number == 1
        assert report.malformed_lines[0].reason == "missing '='"

    def test_malformed_value_falls_back_to_default(self, store, write_config):
        count = store.entry_builder().define_int("count", 10)
        count.set_value(3)
        write_config("count=notanumber\n")

        with capture_logs() as logs:
            report = store.load()

        assert count.get_value() == 10
        assert len(report.invalid_values) == 1
        assert isinstance(report.invalid_values[0], InvalidValueError)
        assert report.invalid_values[0].key == "count"
        assert any(log["event"] == "Invalid value for entry, loaded default value"
                   and log["log_level"] == "error" for log in logs)

    def test_unknown_enum_name_falls_back_to_default(self, store, write_config):
        color = store.entry_builder().define_enum("color", Color.RED)
        write_config("color=purple\n")

        report = store.load()

        assert color.get_value() is Color.RED
        assert isinstance(report.errors[0], InvalidEnumValueError)

    def test_bad_line_does_not_stop_the_load(self, store, example_entries, write_config):
        write_config("flag=maybe\ncount=12\nratio=half\nnope\ncolor=blue\n")

        report = store.load()

        assert example_entries['flag'].get_value() is True
        assert example_entries['count'].get_value() == 12
        assert example_entries['ratio'].get_value() == 0.5
        assert example_entries['color'].get_value() is Color.BLUE
        assert len(report.errors) == 3
        assert not report

    def test_out_of_range_value_is_clamped(self, store, example_entries, write_config):
        write_config("volume=100\nscale=-3\n")

        report = store.load()

        assert report.is_clean
        assert example_entries['volume'].get_value() == 15
        assert example_entries['scale'].get_value() == 1.0

    def test_unsupported_kind_falls_back_to_default(self, store, write_config):
        entry = ConfigEntry(store, "odd", "fallback", ValueKind.STRING, codec=None)
        store._register(entry)
        entry.set_value("custom")
        write_config("odd=anything\n")

        report = store.load()

        assert entry.get_value() == "fallback"
        assert isinstance(report.errors[0], UnsupportedValueTypeError)

    def test_windows_line_endings(self, store, write_config):
        greeting = store.entry_builder().define_string("greeting", "hi")
        count = store.entry_builder().define_int("count", 1)
        store.file_path.parent.mkdir(parents=True)
        store.file_path.write_bytes(b"greeting=hello\r\ncount=7\r\n")

        report = store.load()

        assert report.is_clean
        assert greeting.get_value() == "hello"
        assert count.get_value() == 7

    def test_byte_order_mark_is_skipped(self, store):
        count = store.entry_builder().define_int("count", 1)
        store.file_path.parent.mkdir(parents=True)
        store.file_path.write_bytes(b"\xef\xbb\xbfcount=7\n")

        report = store.load()

        assert report.is_clean
        assert count.get_value() == 7

    def test_nan_loads_as_upper_bound(self, store, example_entries, write_config):
        write_config("scale=nan\n")

        report = store.load()

        assert report.is_clean
        assert example_entries['scale'].get_value() == 2.0

    def test_escaped_string_is_unescaped(self, store, write_config):
        motd = store.entry_builder().define_string("motd", "")
        write_config("motd=line1\\nline2\\\\end \\d\n")

        report = store.load()

        assert report.is_clean
        assert motd.get_value() == "line1\nline2\\end \\d"

    def test_unreadable_file_is_reported_not_raised(self, store):
        count = store.entry_builder().define_int("count", 10)
        store.file_path.mkdir(parents=True)

        with capture_logs() as logs:
            report = store.load()

        assert isinstance(report.io_error, ConfigIOError)
        assert report.io_error.operation == "read"
        assert count.get_value() == 10
        assert any(log["event"] == "Failed to read config file" for log in logs)

    def test_read_failure_keeps_values_already_applied(self, store):
        count = store.entry_builder().define_int("count", 10)
        padding = b"# padding\n" * 3000
        store.file_path.parent.mkdir(parents=True)
        store.file_path.write_bytes(b"count=5\n" + padding + b"count=\xff\xfe\n")

        report = store.load()

        assert report.io_error is not None
        assert count.get_value() == 5

    def test_load_binds_file_path_to_log_context(self, store, write_config, context_logs):
        store.entry_builder().define_int("count", 10)
        write_config("mystery=1\n")

        store.load()

        assert context_logs
        assert all(log["file_path"] == str(store.file_path) for log in context_logs)
