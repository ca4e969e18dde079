"""
SQLite record store using aiosqlite.

A single key-value table holds one row per storage key.
"""

from pathlib import Path

import aiosqlite

from coremint.constants import STORAGE_KEY
from coremint.core.record_store.base import RecordStore
from coremint.utils.exceptions import StoreError


class SQLiteRecordStore(RecordStore):
    """
    SQLite-backed record store.

    Features:
    - Durable local storage
    - Whole-collection replace in a single transaction
    """

    def __init__(self, db_path: str = "data/coremint.db", storage_key: str = STORAGE_KEY):
        """
        Initialize SQLite record store.

        Args:
            db_path: Path to SQLite database file
            storage_key: Row key of the collection
        """
        super().__init__(storage_key)
        self.db_path = db_path
        self.connection: aiosqlite.Connection | None = None

        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async def connect(self) -> None:
        """Open the connection and create the table on first use."""
        if self.connection is None:
            self.connection = await aiosqlite.connect(self.db_path)
            await self.connection.execute("PRAGMA journal_mode = WAL")
            await self.connection.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """
            )
            await self.connection.commit()

    async def read_raw(self) -> str | None:
        await self.connect()
        async with self.connection.execute(
            "SELECT value FROM kv_store WHERE key = ?", (self.storage_key,)
        ) as cursor:
            row = await cursor.fetchone()
        return row[0] if row else None

    async def write_raw(self, payload: str) -> None:
        try:
            await self.connect()
            await self.connection.execute(
                "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                (self.storage_key, payload),
            )
            await self.connection.commit()
        except aiosqlite.Error as e:
            raise StoreError(
                f"Failed to write library: {e}",
                context={"db_path": self.db_path, "storage_key": self.storage_key},
            ) from e

    async def close(self) -> None:
        """Close SQLite connection."""
        if self.connection:
            await self.connection.close()
            self.connection = None
