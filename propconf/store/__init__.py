"""
Typed config store.

This package provides:
- ConfigStore: file-backed collection of typed entries
- EntryBuilder: fluent declaration of entries
- ConfigEntry, RangedConfigEntry, EnumConfigEntry: the entry types
- LoadReport: recoverable errors of a load
- StoreRegistry: owner of several stores
"""

from .codecs import ValueCodec, get_codec, kind_of
from .entry import ConfigEntry, RangedConfigEntry, EnumConfigEntry
from .builder import EntryBuilder
from .report import LoadReport
from .config_store import ConfigStore, resolve_config_path
from .registry import StoreRegistry

__all__ = [
    # Codecs
    'ValueCodec',
    'get_codec',
    'kind_of',

    # Entries
    'ConfigEntry',
    'RangedConfigEntry',
    'EnumConfigEntry',

    # Store
    'EntryBuilder',
    'LoadReport',
    'ConfigStore',
    'resolve_config_path',
    'StoreRegistry'
]
