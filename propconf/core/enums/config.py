"""
Config-related enums for the propconf package.
"""

from enum import Enum


class ConfigType(Enum):
    """Side of the application a config file belongs to."""
    COMMON = "common"
    CLIENT = "client"
    SERVER = "server"


class ValueKind(Enum):
    """Value kinds an entry can hold."""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    LONG = "long"
    STRING = "string"
    ENUM = "enum"
