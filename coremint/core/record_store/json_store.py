"""
JSON file record store.

The collection lives in <data_dir>/<storage_key>.json. Writes go to a
sibling temporary file which then replaces the target, so readers never
see a half-written document.
"""

import asyncio
import os
import tempfile
from pathlib import Path

from coremint.constants import STORAGE_KEY
from coremint.core.record_store.base import RecordStore
from coremint.utils.exceptions import StoreError


class JSONFileRecordStore(RecordStore):
    """File-per-key record store."""

    def __init__(self, data_dir: str = "data", storage_key: str = STORAGE_KEY):
        super().__init__(storage_key)
        self.data_dir = Path(data_dir)
        self.path = self.data_dir / f"{storage_key}.json"

    async def read_raw(self) -> str | None:
        return await asyncio.to_thread(self._read)

    async def write_raw(self, payload: str) -> None:
        try:
            await asyncio.to_thread(self._write, payload)
        except OSError as e:
            raise StoreError(
                f"Failed to write library: {e}", context={"path": str(self.path)}
            ) from e

    def _read(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def _write(self, payload: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{self.storage_key}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
