"""
Library view state machine.

Navigation states:
    TAG_GROUPS          overview of tag tiles (initial)
    TAG_DETAIL(tag)     items of one tag

A non-empty query puts the view in search mode, which takes precedence
for display but leaves the navigation state intact: clearing the query
returns to whichever tag state was active.

Per-item state: at most one expanded item, at most one memo editor with
a staging buffer. Only save_memo() persists the buffer.

Transitions:
    open()            any -> TAG_GROUPS, query cleared, store reloaded
    select_tag(t)     TAG_GROUPS -> TAG_DETAIL(t)
    back()            TAG_DETAIL -> TAG_GROUPS
    delete_tag(t)     TAG_DETAIL(t) -> TAG_GROUPS when t is the viewed tag
    close()           terminal; uncommitted memo buffer is discarded
"""

from datetime import date
from enum import Enum
from pathlib import Path

from coremint.models.knowledge import KnowledgeItem, LibraryStorage
from coremint.services.export import (
    default_export_filename,
    ensure_markdown_filename,
    export_markdown,
    render_markdown,
)
from coremint.services.knowledge_library import KnowledgeLibrary, items_for_tag, tag_groups
from coremint.services.search import search
from coremint.utils.exceptions import LibraryClosedError, NotFoundError
from coremint.utils.logger import get_logger

logger = get_logger(__name__)


class ViewMode(str, Enum):
    """Navigation state of the library view."""

    TAG_GROUPS = "TAG_GROUPS"
    TAG_DETAIL = "TAG_DETAIL"


class LibraryView:
    """One browsing session over the knowledge library."""

    def __init__(self, library: KnowledgeLibrary):
        self.library = library
        self.is_open = False
        self.items: LibraryStorage = []
        self.query = ""
        self.view_mode = ViewMode.TAG_GROUPS
        self.selected_tag: str | None = None
        self.expanded_item_id: str | None = None
        self.editing_memo_id: str | None = None
        self.memo_buffer = ""

    # ═══════════════════════════════════════════════════════════
    # SESSION
    # ═══════════════════════════════════════════════════════════

    async def open(self) -> None:
        """Start a session with a fresh read of the store."""
        self.items = await self.library.load()
        self.is_open = True
        self.query = ""
        self.view_mode = ViewMode.TAG_GROUPS
        self.selected_tag = None
        self.expanded_item_id = None
        self._clear_edit()
        logger.debug(f"Library opened with {len(self.items)} items")

    def close(self) -> None:
        """End the session, dropping any uncommitted memo edit."""
        self.is_open = False
        self._clear_edit()
        self.expanded_item_id = None

    # ═══════════════════════════════════════════════════════════
    # NAVIGATION
    # ═══════════════════════════════════════════════════════════

    def select_tag(self, tag: str) -> None:
        self._require_open()
        self.view_mode = ViewMode.TAG_DETAIL
        self.selected_tag = tag

    def back(self) -> None:
        self._require_open()
        self.view_mode = ViewMode.TAG_GROUPS
        self.selected_tag = None

    def set_query(self, text: str) -> None:
        self._require_open()
        self.query = text

    @property
    def searching(self) -> bool:
        return bool(self.query)

    # ═══════════════════════════════════════════════════════════
    # ITEM STATE
    # ═══════════════════════════════════════════════════════════

    def toggle_item(self, item_id: str) -> None:
        """Expand an item, or collapse it when it is already expanded."""
        self._require_open()
        self.expanded_item_id = None if self.expanded_item_id == item_id else item_id

    def begin_edit_memo(self, item_id: str) -> None:
        """Open the memo editor on one item, seeding the buffer with its memo."""
        self._require_open()
        item = self._find(item_id)
        if item is None:
            raise NotFoundError(f"Knowledge item not found: {item_id}", {"item_id": item_id})
        self.editing_memo_id = item_id
        self.memo_buffer = item.personal_memo

    def set_memo_buffer(self, text: str) -> None:
        self._require_open()
        self.memo_buffer = text

    async def save_memo(self) -> None:
        """Commit the buffer to the store and leave edit mode."""
        self._require_open()
        if self.editing_memo_id is None:
            return
        self.items = await self.library.update_memo(self.editing_memo_id, self.memo_buffer)
        self._clear_edit()

    def cancel_edit_memo(self) -> None:
        self._require_open()
        self._clear_edit()

    async def delete_tag(self, tag: str) -> None:
        """Cascade-delete a tag; leaves the detail view if it showed that tag."""
        self._require_open()
        self.items = await self.library.delete_tag_and_items(tag)
        if self.selected_tag == tag:
            self.view_mode = ViewMode.TAG_GROUPS
            self.selected_tag = None
        if self.expanded_item_id and self._find(self.expanded_item_id) is None:
            self.expanded_item_id = None
        if self.editing_memo_id and self._find(self.editing_memo_id) is None:
            self._clear_edit()

    # ═══════════════════════════════════════════════════════════
    # DERIVED VIEWS
    # ═══════════════════════════════════════════════════════════

    @property
    def search_results(self) -> LibraryStorage:
        return search(self.query, self.items)

    @property
    def tag_groups(self) -> dict[str, int]:
        return tag_groups(self.items)

    @property
    def display_items(self) -> LibraryStorage:
        """Items shown in the list area; empty on the tag overview."""
        if self.searching:
            return self.search_results
        if self.view_mode == ViewMode.TAG_DETAIL and self.selected_tag:
            return items_for_tag(self.items, self.selected_tag)
        return []

    @property
    def export_items(self) -> LibraryStorage:
        """Search results, the current tag, or the whole library."""
        if self.searching or (self.view_mode == ViewMode.TAG_DETAIL and self.selected_tag):
            return self.display_items
        return self.items

    def export_filename(self, today: date | None = None) -> str:
        tag = self.selected_tag if self.view_mode == ViewMode.TAG_DETAIL else None
        return default_export_filename(self.query, tag, today)

    def export(self, directory: str | Path, today: date | None = None) -> Path:
        """Write export_items to a Markdown file named after the current view."""
        self._require_open()
        return export_markdown(self.export_items, self.export_filename(today), directory)

    def export_document(self, today: date | None = None) -> tuple[str, str]:
        """Render export_items in memory; returns (filename, markdown)."""
        self._require_open()
        filename = ensure_markdown_filename(self.export_filename(today))
        return filename, render_markdown(self.export_items)

    # ═══════════════════════════════════════════════════════════
    # HELPERS
    # ═══════════════════════════════════════════════════════════

    def _find(self, item_id: str) -> KnowledgeItem | None:
        return next((item for item in self.items if item.id == item_id), None)

    def _clear_edit(self) -> None:
        self.editing_memo_id = None
        self.memo_buffer = ""

    def _require_open(self) -> None:
        if not self.is_open:
            raise LibraryClosedError("Library view is closed")
