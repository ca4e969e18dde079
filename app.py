"""
CoreMint FastAPI Application

A REST API for smelting text into structured knowledge and browsing the
personal knowledge library. The library view is a single shared session:
CoreMint is a one-user application with one logical writer.
"""

from contextlib import asynccontextmanager
from datetime import date
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from coremint.config import Config
from coremint.constants import INITIAL_INPUT, INITIAL_RESULT, MODES
from coremint.core.factory import LLMFactory, RecordStoreFactory
from coremint.models import AnalysisResult, AppMode, KnowledgeItem, ModeConfig
from coremint.services.analysis_provider import AnalysisProvider
from coremint.services.knowledge_library import KnowledgeLibrary
from coremint.services.library_view import LibraryView
from coremint.services.smelter import SmeltService
from coremint.utils.exceptions import LibraryClosedError, NotFoundError, ValidationError
from coremint.utils.logger import get_logger, setup_logging

# Global instances
config: Config | None = None
smelter: SmeltService | None = None
view: LibraryView | None = None
logger = get_logger(__name__)


# Pydantic models for API
class SmeltRequest(BaseModel):
    """Request model for smelting text."""

    text: str = Field(..., description="Raw text to analyze")
    mode: AppMode | None = Field(default=None, description="Persona mode (default from config)")
    memo: str = Field(default="", description="Personal memo saved with the result")


class SmeltResponse(BaseModel):
    """Response model for smelt."""

    result: AnalysisResult
    item: KnowledgeItem | None = None
    saved: bool
    fallback: bool
    error: str | None = None


class QueryRequest(BaseModel):
    """Search text for the library view."""

    query: str = ""


class MemoBufferRequest(BaseModel):
    """In-progress memo text."""

    text: str = ""


class LibraryViewResponse(BaseModel):
    """Snapshot of the library view."""

    is_open: bool
    view_mode: str
    selected_tag: str | None
    query: str
    searching: bool
    tag_groups: dict[str, int]
    items: list[KnowledgeItem]
    total_items: int
    expanded_item_id: str | None
    editing_memo_id: str | None
    memo_buffer: str


class DemoResponse(BaseModel):
    """Sample input and its analysis, shown before the first smelt."""

    input: str
    result: AnalysisResult


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    llm: str
    library_backend: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    global config, smelter, view

    config = Config.from_env()

    setup_logging(
        level=config.logging.level,
        log_to_file=config.logging.log_to_file,
        log_dir=config.logging.log_dir,
        file_rotation=config.logging.file_rotation,
        file_retention=config.logging.file_retention,
        compression=config.logging.compression,
        serialize=config.logging.serialize,
    )

    logger.info("Starting CoreMint server")
    logger.info(
        f"Configuration: LLM={config.llm.provider}/{config.llm.model}, "
        f"Library={config.library.backend}"
    )

    try:
        llm = LLMFactory.create(config.llm)
    except ValueError as e:
        logger.warning(f"LLM provider unavailable, smelting will return fallback content: {e}")
        llm = None

    store = RecordStoreFactory.create(config.library)
    library = KnowledgeLibrary(store)
    provider = AnalysisProvider(
        llm,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )
    smelter = SmeltService(provider, library)
    view = LibraryView(library)

    yield

    logger.info("Shutting down CoreMint server")
    view.close()
    await provider.close()
    await store.close()
    logger.info("Cleanup complete")


app = FastAPI(
    title="CoreMint API",
    description="Knowledge smelting engine with a personal, tag-organized library",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(LibraryClosedError)
async def library_closed_handler(request: Request, exc: LibraryClosedError):
    return JSONResponse(status_code=409, content={"detail": exc.message})


def get_view() -> LibraryView:
    if not view:
        raise HTTPException(status_code=503, detail="Library not initialized")
    return view


def snapshot(current: LibraryView) -> LibraryViewResponse:
    return LibraryViewResponse(
        is_open=current.is_open,
        view_mode=current.view_mode.value,
        selected_tag=current.selected_tag,
        query=current.query,
        searching=current.searching,
        tag_groups=current.tag_groups,
        items=current.display_items,
        total_items=len(current.items),
        expanded_item_id=current.expanded_item_id,
        editing_memo_id=current.editing_memo_id,
        memo_buffer=current.memo_buffer,
    )


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    if not config:
        return HealthResponse(status="initializing", llm="", library_backend="")
    return HealthResponse(
        status="healthy",
        llm=f"{config.llm.provider}/{config.llm.model}",
        library_backend=config.library.backend,
    )


@app.get("/modes", response_model=list[ModeConfig])
async def list_modes():
    """Available persona modes."""
    return list(MODES.values())


@app.get("/demo", response_model=DemoResponse)
async def demo():
    """Initial screen content."""
    return DemoResponse(input=INITIAL_INPUT, result=INITIAL_RESULT)


@app.post("/smelt", response_model=SmeltResponse)
async def smelt(request: SmeltRequest):
    """
    Analyze text and auto-save the result to the library.

    When the provider fails the response carries fallback content with
    fallback=true, and nothing is saved.
    """
    if not smelter or not config:
        raise HTTPException(status_code=503, detail="Engine not initialized")

    outcome = await smelter.smelt(
        request.text, request.mode or config.analysis.default_mode, request.memo
    )
    return SmeltResponse(
        result=outcome.result,
        item=outcome.item,
        saved=outcome.item is not None,
        fallback=outcome.fallback,
        error=outcome.error,
    )


# Library view endpoints
@app.post("/library/open", response_model=LibraryViewResponse)
async def open_library():
    """Open the library: tag overview, empty query, fresh read of the store."""
    current = get_view()
    await current.open()
    return snapshot(current)


@app.post("/library/close", response_model=LibraryViewResponse)
async def close_library():
    """Close the library, discarding any uncommitted memo edit."""
    current = get_view()
    current.close()
    return snapshot(current)


@app.get("/library/view", response_model=LibraryViewResponse)
async def get_library_view():
    current = get_view()
    return snapshot(current)


@app.post("/library/tags/{tag:path}/select", response_model=LibraryViewResponse)
async def select_tag(tag: str):
    current = get_view()
    current.select_tag(tag)
    return snapshot(current)


@app.post("/library/back", response_model=LibraryViewResponse)
async def back_to_groups():
    current = get_view()
    current.back()
    return snapshot(current)


@app.put("/library/query", response_model=LibraryViewResponse)
async def set_query(request: QueryRequest):
    current = get_view()
    current.set_query(request.query)
    return snapshot(current)


@app.delete("/library/tags/{tag:path}", response_model=LibraryViewResponse)
async def delete_tag(tag: str):
    """
    Delete a tag and every item carrying it.

    Irreversible; clients must confirm with the user before calling.
    """
    current = get_view()
    await current.delete_tag(tag)
    return snapshot(current)


@app.post("/library/items/{item_id}/toggle", response_model=LibraryViewResponse)
async def toggle_item(item_id: str):
    current = get_view()
    current.toggle_item(item_id)
    return snapshot(current)


@app.post("/library/items/{item_id}/memo/edit", response_model=LibraryViewResponse)
async def begin_edit_memo(item_id: str):
    current = get_view()
    current.begin_edit_memo(item_id)
    return snapshot(current)


@app.put("/library/memo/buffer", response_model=LibraryViewResponse)
async def set_memo_buffer(request: MemoBufferRequest):
    current = get_view()
    current.set_memo_buffer(request.text)
    return snapshot(current)


@app.post("/library/memo/save", response_model=LibraryViewResponse)
async def save_memo():
    current = get_view()
    await current.save_memo()
    return snapshot(current)


@app.post("/library/memo/cancel", response_model=LibraryViewResponse)
async def cancel_memo():
    current = get_view()
    current.cancel_edit_memo()
    return snapshot(current)


@app.get("/library/export")
async def export_library():
    """Download the current view (search results, tag, or whole library) as Markdown."""
    current = get_view()
    filename, content = current.export_document(today=date.today())
    return Response(
        content=content,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=utf-8''{quote(filename)}"},
    )
