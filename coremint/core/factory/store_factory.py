"""
Factory for creating record stores.
"""

from coremint.config import LibraryConfig
from coremint.core.record_store import (
    JSONFileRecordStore,
    NullRecordStore,
    RecordStore,
    SQLiteRecordStore,
)


class RecordStoreFactory:
    """Factory for creating record stores from configuration."""

    @staticmethod
    def create(config: LibraryConfig) -> RecordStore:
        """
        Create record store from configuration.

        Args:
            config: Library configuration

        Returns:
            RecordStore instance

        Raises:
            ValueError: If backend is not supported
        """
        if config.backend == "sqlite":
            return SQLiteRecordStore(db_path=config.db_path, storage_key=config.storage_key)
        elif config.backend == "json":
            return JSONFileRecordStore(data_dir=config.data_dir, storage_key=config.storage_key)
        elif config.backend == "null":
            return NullRecordStore(storage_key=config.storage_key)
        else:
            raise ValueError(f"Unsupported library backend: {config.backend}")
