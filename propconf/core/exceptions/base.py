"""
Base exception classes for the propconf package.
"""


class PropConfError(Exception):
    """Base exception for all propconf errors."""
    pass


class ConfigurationError(PropConfError):
    """Raised for invalid declarations or unreadable library settings."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotFoundError(PropConfError):
    """Base exception for lookups that found nothing."""

    def __init__(self, entity_type: str, identifier: str = None):
        self.entity_type = entity_type
        self.identifier = identifier
        message = f"{entity_type} not found"
        if identifier:
            message += f" with identifier '{identifier}'"
        super().__init__(message)
