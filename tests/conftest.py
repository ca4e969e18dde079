"""
Shared test fixtures for all test modules.
"""

import pytest

from coremint.core.record_store import JSONFileRecordStore, SQLiteRecordStore
from coremint.models import AnalysisResult, KnowledgeItem, format_timestamp
from coremint.services.knowledge_library import KnowledgeLibrary


def make_result(keywords: str = "拖延症", core_insight: str = "拖延的本质是恐惧", **overrides):
    """Build an AnalysisResult with sensible defaults."""
    data = {
        "keywords": keywords,
        "core_insight": core_insight,
        "underlying_logic": ["恐惧机制", "多巴胺陷阱"],
        "actionable_steps": ["立刻做5分钟", "手机静音"],
        "case_studies": ["海明威法则"],
    }
    data.update(overrides)
    return AnalysisResult(**data)


def make_item(item_id: str, tags: list[str], timestamp: int = 1_700_000_000_000, **overrides):
    """Build a KnowledgeItem directly, bypassing tag derivation."""
    data = {
        "keywords": tags[0] if tags else "kw",
        "core_insight": f"insight {item_id}",
        "underlying_logic": ["logic"],
        "actionable_steps": ["step"],
        "case_studies": [],
        "id": item_id,
        "timestamp": timestamp,
        "formatted_date": format_timestamp(timestamp),
        "tags": tags,
        "personal_memo": "",
    }
    data.update(overrides)
    return KnowledgeItem(**data)


@pytest.fixture
def sample_result() -> AnalysisResult:
    return make_result()


@pytest.fixture
def json_store(tmp_path) -> JSONFileRecordStore:
    return JSONFileRecordStore(data_dir=str(tmp_path / "data"))


@pytest.fixture
async def sqlite_store(tmp_path):
    store = SQLiteRecordStore(db_path=str(tmp_path / "coremint.db"))
    yield store
    await store.close()


@pytest.fixture
def library(json_store) -> KnowledgeLibrary:
    return KnowledgeLibrary(json_store)
