"""
Markdown export of knowledge items.

render_markdown() is pure; export_markdown() only adds the file write.
"""

import re
from datetime import date, datetime
from pathlib import Path

from coremint.models.knowledge import DATE_FORMAT, KnowledgeItem
from coremint.utils.logger import get_logger

logger = get_logger(__name__)

EXPORT_TITLE = "# CoreMint Knowledge Export"
UNTITLED = "untitled"

# Path separators, characters reserved on Windows, and control characters
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def safe_filename(name: str) -> str:
    """Turn free text (e.g. a tag) into a single path component."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", name).strip(" .")
    return cleaned or UNTITLED


def ensure_markdown_filename(filename: str) -> str:
    """Append .md unless already present."""
    return filename if filename.endswith(".md") else f"{filename}.md"


def render_item(index: int, item: KnowledgeItem) -> str:
    """Render one item section, 1-based index, ending with a horizontal rule."""
    lines = [
        f"## {index}. [{', '.join(item.tags)}] {item.keywords}",
        f"> **Time:** {item.formatted_date}",
        "",
        "### ⚓ Core Insight",
        item.core_insight,
        "",
        "### 🧠 Underlying Logic",
        *(f"- {point}" for point in item.underlying_logic),
        "",
        "### ⚡ Actionable Steps",
        *(f"{number}. {step}" for number, step in enumerate(item.actionable_steps, start=1)),
        "",
    ]

    if item.case_studies:
        lines.append("### 📖 Case Studies")
        lines.extend(f'> *"{case}"*' for case in item.case_studies)
        lines.append("")

    if item.personal_memo:
        lines.append("### 📝 Personal Memo")
        lines.append(item.personal_memo)

    lines.extend(["", "---", "", ""])
    return "\n".join(lines)


def render_markdown(items: list[KnowledgeItem], generated_at: datetime | None = None) -> str:
    """
    Render items, in input order, to one Markdown document.

    Args:
        items: Items to export
        generated_at: Timestamp for the header line (default: now)

    Returns:
        The Markdown text
    """
    generated_at = generated_at or datetime.now()
    header = f"{EXPORT_TITLE}\nGenerated: {generated_at.strftime(DATE_FORMAT)}\n\n"
    return header + "".join(render_item(i, item) for i, item in enumerate(items, start=1))


def export_markdown(
    items: list[KnowledgeItem],
    filename: str,
    directory: str | Path = ".",
    generated_at: datetime | None = None,
) -> Path:
    """
    Write the rendered document as UTF-8.

    Args:
        items: Items to export
        filename: Target name, sanitized to one path component; .md is appended if absent
        directory: Output directory (created if missing)
        generated_at: Timestamp for the header line

    Returns:
        Path of the written file
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / ensure_markdown_filename(safe_filename(filename))
    path.write_text(render_markdown(items, generated_at), encoding="utf-8")

    logger.info(f"Exported {len(items)} items to {path}")
    return path


def default_export_filename(
    query: str, selected_tag: str | None, today: date | None = None
) -> str:
    """
    Name an export after what is on screen.

    Search results, a single tag, or the whole library.
    """
    stamp = (today or date.today()).isoformat()
    if query:
        return f"CoreMint_Search_{stamp}"
    if selected_tag:
        return f"{safe_filename(selected_tag)}_{stamp}"
    return f"CoreMint总库_{stamp}"
