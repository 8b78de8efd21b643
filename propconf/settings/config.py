"""
Library settings.

These are the settings of propconf itself (where config files live and
how logging behaves), as opposed to the entries a ConfigStore manages.
They can be kept in a small YAML file next to the application.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from propconf.core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LibrarySettings:
    """Settings shared by the stores of an application."""
    config_dir: str = "config"
    log_level: str = "INFO"
    json_logs: bool = False
    debug: bool = False

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError("log_level", self.log_level,
                                     f"expected one of {', '.join(LOG_LEVELS)}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'config_dir': self.config_dir,
            'log_level': self.log_level,
            'json_logs': self.json_logs,
            'debug': self.debug
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LibrarySettings':
        """Create settings from dictionary, ignoring unknown keys."""
        defaults = cls()
        return cls(
            config_dir=str(data.get('config_dir', defaults.config_dir)),
            log_level=data.get('log_level', defaults.log_level),
            json_logs=bool(data.get('json_logs', defaults.json_logs)),
            debug=bool(data.get('debug', defaults.debug))
        )


def load_settings(path: Union[str, Path]) -> LibrarySettings:
    """
    Load library settings from a YAML file.

    A missing file gives the default settings.

    Raises:
        ConfigurationError: If the file cannot be read or is not a YAML mapping
    """
    settings_file = Path(path)
    if not settings_file.exists():
        return LibrarySettings()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(str(settings_file), reason=str(e)) from e

    if not isinstance(data, dict):
        raise ConfigurationError(str(settings_file), reason="settings file must contain a mapping")

    return LibrarySettings.from_dict(data)


def save_settings(settings: LibrarySettings, path: Union[str, Path]):
    """Write library settings to a YAML file."""
    settings_file = Path(path)
    settings_file.parent.mkdir(parents=True, exist_ok=True)

    with open(settings_file, 'w', encoding='utf-8') as f:
        yaml.dump(settings.to_dict(), f, default_flow_style=False, indent=2)
