"""
Store registry for applications managing several config files.

The registry is an ordinary object: create one at startup and pass it to
whatever needs a store.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from propconf.core.enums import ConfigType
from propconf.core.exceptions import StoreNotFoundError
from propconf.logger import get_propconf_logger
from propconf.settings import LibrarySettings
from .config_store import ConfigStore
from .report import LoadReport


class StoreRegistry:
    """
    Owner of the config stores of an application.

    Stores are keyed by file name and config type and all live in the
    config directory of the registry settings.
    """

    def __init__(self, settings: Optional[LibrarySettings] = None):
        self.settings = settings or LibrarySettings()
        self.config_dir = Path(self.settings.config_dir)
        self.logger = get_propconf_logger().bind(component="StoreRegistry")

        self._stores: Dict[Tuple[str, ConfigType], ConfigStore] = {}

        self.logger.info("StoreRegistry initialized", config_dir=str(self.config_dir))

    def create_store(self, file_name: str, config_type: ConfigType = ConfigType.COMMON) -> ConfigStore:
        """
        Create and register the store for a file.

        Returns the existing store when one is already registered for the
        same file name and type.
        """
        store_key = (file_name, config_type)
        if store_key in self._stores:
            return self._stores[store_key]

        store = ConfigStore(file_name, config_type, self.config_dir)
        self._stores[store_key] = store
        self.logger.info("Store registered", file_name=file_name, config_type=config_type.value)
        return store

    def get_store(self, file_name: str, config_type: ConfigType = ConfigType.COMMON) -> ConfigStore:
        """
        Get the store registered for a file.

        Raises:
            StoreNotFoundError: If no store was created for the file
        """
        store = self._stores.get((file_name, config_type))
        if store is None:
            raise StoreNotFoundError(file_name, config_type)
        return store

    def list_stores(self) -> List[ConfigStore]:
        return list(self._stores.values())

    def build_all(self) -> Dict[str, LoadReport]:
        """Build every registered store, keyed by config file path."""
        return {store.get_config_file_path(): store.build() for store in self._stores.values()}

    def save_all(self) -> bool:
        """Save every registered store. True only if all files were written."""
        results = [store.save() for store in self._stores.values()]
        if not all(results):
            self.logger.error("Some config files could not be saved",
                              failed=results.count(False))
        return all(results)
