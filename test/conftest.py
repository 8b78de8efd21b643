"""
Shared pytest configuration and fixtures for the propconf tests.
"""

from enum import Enum

import pytest
import structlog
from structlog.testing import LogCapture

from propconf.core.enums import ConfigType
from propconf.store import ConfigStore


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


@pytest.fixture
def config_dir(tmp_path):
    """Directory holding the config files of a test."""
    return tmp_path / "config"


@pytest.fixture
def store(config_dir):
    """An empty store backed by `<config_dir>/example-common.properties`."""
    return ConfigStore("example", ConfigType.COMMON, config_dir)


@pytest.fixture
def write_config(store):
    """Write raw text to the store's backing file."""
    def _write(text: str):
        store.file_path.parent.mkdir(parents=True, exist_ok=True)
        store.file_path.write_text(text, encoding="utf-8")
        return store.file_path
    return _write


@pytest.fixture
def example_entries(store):
    """Declare one entry of every kind, the way an application would at startup."""
    builder = store.entry_builder()
    store.comment("Example config").comment("")
    return {
        'flag': builder.comment("Is this true or false?").define_boolean("flag", True),
        'count': builder.define_int("count", 10),
        'ratio': builder.define_double("ratio", 0.5),
        'seed': builder.define_long("seed", 9_000_000_000),
        'greeting': builder.define_string("greeting", "Hello there!"),
        'volume': builder.comment("Always inside this range").define_int_in_range("volume", 10, 5, 15),
        'scale': builder.define_double_in_range("scale", 1.2, 1.0, 2.0),
        'timeout': builder.define_long_in_range("timeout", 25000, 10000, 100000),
        'color': builder.comment("Overlay tint").define_enum("color", Color.RED),
    }


@pytest.fixture
def context_logs():
    """
    Capture log entries including context variables.

    Works like structlog.testing.capture_logs but keeps merge_contextvars
    in front of the capture. The processor list is changed in place so
    loggers bound before the fixture are captured too.
    """
    capture = LogCapture()
    processors = structlog.get_config()["processors"]
    old_processors = processors.copy()
    processors.clear()
    processors.extend([structlog.contextvars.merge_contextvars, capture])
    try:
        yield capture.entries
    finally:
        processors.clear()
        processors.extend(old_processors)
