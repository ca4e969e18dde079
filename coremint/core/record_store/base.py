"""
Base interface for record storage.

The whole library is persisted as one serialized blob under a single
storage key. Every mutation rewrites the blob; there are no partial
writes and no schema versioning.
"""

from abc import ABC, abstractmethod

from pydantic import ValidationError as PydanticValidationError

from coremint.models.knowledge import LibraryStorage, dump_library, parse_library
from coremint.utils.logger import get_logger

logger = get_logger(__name__)


class RecordStore(ABC):
    """
    Abstract base class for library persistence.

    Subclasses only move raw text in and out of their medium; decoding
    and corruption recovery live here so every backend behaves the same.
    """

    def __init__(self, storage_key: str):
        self.storage_key = storage_key

    @abstractmethod
    async def read_raw(self) -> str | None:
        """
        Read the serialized collection.

        Returns:
            The stored document, or None if nothing was ever saved
        """
        pass

    @abstractmethod
    async def write_raw(self, payload: str) -> None:
        """
        Replace the serialized collection.

        Raises:
            StoreError: If the write fails
        """
        pass

    async def close(self) -> None:
        """Release backend resources."""

    async def load(self) -> LibraryStorage:
        """
        Load the persisted collection.

        Returns:
            The collection, or an empty list when no data exists or the
            stored document cannot be read back
        """
        try:
            raw = await self.read_raw()
        except Exception as e:
            logger.warning(f"Failed to load library: {e}")
            return []

        if not raw:
            return []

        try:
            return parse_library(raw)
        except (PydanticValidationError, ValueError) as e:
            logger.warning(f"Discarding unreadable library data: {e}")
            return []

    async def save(self, items: LibraryStorage) -> None:
        """
        Persist the entire collection, overwriting prior state.

        Args:
            items: Full collection, newest first
        """
        await self.write_raw(dump_library(items))
        logger.debug(f"Library saved: {len(items)} items")
