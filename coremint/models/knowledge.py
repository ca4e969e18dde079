"""
Knowledge item model and library (de)serialization.

A KnowledgeItem is an AnalysisResult plus library metadata. Items are
frozen: the only post-creation change, the personal memo, goes through
with_memo() which returns a new instance.

Persisted layout: one JSON array of items with camelCase keys.
"""

from datetime import datetime

from pydantic import ConfigDict, Field, TypeAdapter, field_validator

from coremint.models.analysis import AnalysisResult

MAX_TAGS = 3
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class KnowledgeItem(AnalysisResult):
    """
    Persisted knowledge item.

    Invariants:
    - tags holds at most MAX_TAGS unique, non-empty strings
    - tags[0] is the primary tag, derived from keywords at creation
    - formatted_date is rendered once at creation and stored as-is
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique item ID (km_xxx)")
    timestamp: int = Field(..., description="Creation time in epoch milliseconds")
    formatted_date: str = Field(..., description="Creation time as YYYY-MM-DD HH:mm:ss")
    tags: tuple[str, ...] = Field(default=(), max_length=MAX_TAGS)
    personal_memo: str = Field(default="", description="User-editable memo")

    @field_validator("tags")
    @classmethod
    def _check_tags(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        if any(not tag for tag in tags):
            raise ValueError("tags must be non-empty strings")
        if len(set(tags)) != len(tags):
            raise ValueError("tags must be unique within an item")
        return tags

    @property
    def primary_tag(self) -> str | None:
        """First tag, or None for an untagged item."""
        return self.tags[0] if self.tags else None

    def has_tag(self, tag: str) -> bool:
        """Exact-match tag membership."""
        return tag in self.tags

    def with_memo(self, memo: str) -> "KnowledgeItem":
        """Return a copy with only personal_memo replaced."""
        return self.model_copy(update={"personal_memo": memo})


LibraryStorage = list[KnowledgeItem]

_library_adapter = TypeAdapter(LibraryStorage)


def format_timestamp(timestamp_ms: int) -> str:
    """Render epoch milliseconds as local YYYY-MM-DD HH:mm:ss."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime(DATE_FORMAT)


def dump_library(items: LibraryStorage) -> str:
    """Serialize a collection to its persisted JSON form."""
    return _library_adapter.dump_json(items, by_alias=True).decode("utf-8")


def parse_library(raw: str | bytes) -> LibraryStorage:
    """
    Parse a persisted JSON document into a collection.

    Raises:
        pydantic.ValidationError: If the document is not a valid item array
    """
    return _library_adapter.validate_json(raw)
