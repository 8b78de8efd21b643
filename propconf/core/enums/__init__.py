"""
Core enums for the propconf package.
"""

from .config import (
    ConfigType,
    ValueKind
)

__all__ = [
    'ConfigType',
    'ValueKind'
]
