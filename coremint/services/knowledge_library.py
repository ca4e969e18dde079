"""
Knowledge library: tag assignment and whole-collection mutators.

Every mutator follows load -> modify -> save against the injected
record store. There is no optimistic concurrency check; the last full
snapshot written wins.
"""

import time

from coremint.constants import DEFAULT_TAG
from coremint.core.record_store.base import RecordStore
from coremint.models.analysis import AnalysisResult
from coremint.models.knowledge import KnowledgeItem, LibraryStorage, format_timestamp
from coremint.utils.id_generator import generate_item_id
from coremint.utils.logger import get_logger

logger = get_logger(__name__)


def derive_unique_tag(proposed: str, existing: LibraryStorage) -> str:
    """
    Derive a tag not yet used anywhere in the collection.

    Returns proposed unchanged when free, else the first free of
    proposed(1), proposed(2), ... Only live tags are checked, so a
    suffix freed by a deletion can be issued again.

    Args:
        proposed: Desired tag (usually the item's keywords)
        existing: Current collection

    Returns:
        A tag absent from every item's tags
    """
    base = proposed if proposed.strip() else DEFAULT_TAG
    used = {tag for item in existing for tag in item.tags}
    if base not in used:
        return base

    counter = 1
    while f"{base}({counter})" in used:
        counter += 1
    return f"{base}({counter})"


def tag_groups(items: LibraryStorage) -> dict[str, int]:
    """Count items per tag, in first-seen order."""
    groups: dict[str, int] = {}
    for item in items:
        for tag in item.tags:
            groups[tag] = groups.get(tag, 0) + 1
    return groups


def items_for_tag(items: LibraryStorage, tag: str) -> LibraryStorage:
    """Items carrying tag, newest first."""
    tagged = [item for item in items if item.has_tag(tag)]
    return sorted(tagged, key=lambda item: item.timestamp, reverse=True)


class KnowledgeLibrary:
    """
    Mutators and reads over the persisted library.

    One instance wraps one record store; the store is the only state.
    """

    def __init__(self, store: RecordStore):
        """
        Args:
            store: Record store holding the collection
        """
        self.store = store

    async def load(self) -> LibraryStorage:
        """Fresh read of the whole collection."""
        return await self.store.load()

    async def add_item(self, result: AnalysisResult, memo: str = "") -> KnowledgeItem:
        """
        Store a new analysis result at the top of the library.

        Args:
            result: Validated analysis result
            memo: Initial personal memo

        Returns:
            The created item
        """
        library = await self.store.load()
        timestamp = int(time.time() * 1000)
        primary_tag = derive_unique_tag(result.keywords, library)

        item = KnowledgeItem(
            **result.model_dump(include=set(AnalysisResult.model_fields)),
            id=generate_item_id(),
            timestamp=timestamp,
            formatted_date=format_timestamp(timestamp),
            tags=(primary_tag,),
            personal_memo=memo,
        )

        await self.store.save([item, *library])
        logger.info(f"Knowledge item added: {item.id} [{primary_tag}]")
        return item

    async def delete_tag_and_items(self, tag: str) -> LibraryStorage:
        """
        Delete a tag together with every item carrying it.

        Irreversible. Items are matched on any position in their tags,
        not only the primary tag.

        Args:
            tag: Exact tag string

        Returns:
            The remaining collection
        """
        library = await self.store.load()
        remaining = [item for item in library if not item.has_tag(tag)]

        await self.store.save(remaining)
        logger.info(f"Tag deleted: {tag} ({len(library) - len(remaining)} items removed)")
        return remaining

    async def update_memo(self, item_id: str, new_memo: str) -> LibraryStorage:
        """
        Replace the personal memo of one item.

        An unknown id leaves the store untouched.

        Args:
            item_id: Target item ID
            new_memo: New memo text

        Returns:
            The full collection after the update
        """
        library = await self.store.load()
        for index, item in enumerate(library):
            if item.id == item_id:
                library[index] = item.with_memo(new_memo)
                await self.store.save(library)
                logger.debug(f"Memo updated: {item_id}")
                break
        else:
            logger.debug(f"Memo update skipped, unknown item: {item_id}")

        return library
