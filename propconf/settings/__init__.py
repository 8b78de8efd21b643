"""
Library settings for propconf.
"""

from .config import LibrarySettings, load_settings, save_settings, LOG_LEVELS

__all__ = [
    'LibrarySettings',
    'load_settings',
    'save_settings',
    'LOG_LEVELS'
]
