"""
Core exceptions for the propconf package.

This module provides all exception classes used throughout propconf,
organized with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    PropConfError,
    ConfigurationError,
    NotFoundError
)

# Store exceptions
from .store import (
    ConfigStoreError,
    MalformedLineError,
    InvalidValueError,
    InvalidEnumValueError,
    UnsupportedValueTypeError,
    ConfigIOError,
    EntryNotFoundError,
    StoreNotFoundError
)

__all__ = [
    # Base exceptions
    'PropConfError',
    'ConfigurationError',
    'NotFoundError',

    # Store exceptions
    'ConfigStoreError',
    'MalformedLineError',
    'InvalidValueError',
    'InvalidEnumValueError',
    'UnsupportedValueTypeError',
    'ConfigIOError',
    'EntryNotFoundError',
    'StoreNotFoundError'
]
