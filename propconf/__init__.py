"""
propconf: typed settings persisted to human-editable `.properties` files.
"""

from propconf.core.enums import ConfigType, ValueKind
from propconf.core.exceptions import (
    PropConfError, ConfigurationError, ConfigStoreError, MalformedLineError,
    InvalidValueError, InvalidEnumValueError, UnsupportedValueTypeError,
    ConfigIOError, EntryNotFoundError, StoreNotFoundError
)
from propconf.logger import get_propconf_logger, init_logger, setup_logging
from propconf.settings import LibrarySettings, load_settings, save_settings
from propconf.store import (
    ConfigEntry, RangedConfigEntry, EnumConfigEntry, EntryBuilder,
    LoadReport, ConfigStore, StoreRegistry, resolve_config_path
)

__version__ = "0.1.0"

__all__ = [
    'ConfigType',
    'ValueKind',

    'PropConfError',
    'ConfigurationError',
    'ConfigStoreError',
    'MalformedLineError',
    'InvalidValueError',
    'InvalidEnumValueError',
    'UnsupportedValueTypeError',
    'ConfigIOError',
    'EntryNotFoundError',
    'StoreNotFoundError',

    'get_propconf_logger',
    'init_logger',
    'setup_logging',

    'LibrarySettings',
    'load_settings',
    'save_settings',

    'ConfigEntry',
    'RangedConfigEntry',
    'EnumConfigEntry',
    'EntryBuilder',
    'LoadReport',
    'ConfigStore',
    'StoreRegistry',
    'resolve_config_path'
]
