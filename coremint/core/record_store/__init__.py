"""
Record store implementations for the knowledge library.

Available backends:
- SQLiteRecordStore: key-value table in a local SQLite file (default)
- JSONFileRecordStore: one JSON document per storage key
- NullRecordStore: headless no-op store
"""

from coremint.core.record_store.base import RecordStore
from coremint.core.record_store.json_store import JSONFileRecordStore
from coremint.core.record_store.null_store import NullRecordStore
from coremint.core.record_store.sqlite_store import SQLiteRecordStore

__all__ = [
    "RecordStore",
    "SQLiteRecordStore",
    "JSONFileRecordStore",
    "NullRecordStore",
]
