"""
Null record store for headless contexts: nothing is read or kept.
"""

from coremint.constants import STORAGE_KEY
from coremint.core.record_store.base import RecordStore


class NullRecordStore(RecordStore):
    """Loads an empty library and discards every save."""

    def __init__(self, storage_key: str = STORAGE_KEY):
        super().__init__(storage_key)

    async def read_raw(self) -> str | None:
        return None

    async def write_raw(self, payload: str) -> None:
        return None
