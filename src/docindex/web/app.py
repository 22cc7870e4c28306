"""FastAPI application backing the DocIndex web UI."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from docindex.config import AppConfig
from docindex.errors import InvalidQueryError, MalformedRecordError
from docindex.index.indexer import Indexer, LoadStats
from docindex.index.search import Searcher, SearchResult
from docindex.index.store import IndexStore
from docindex.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="DocIndex Web", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frontend_router)

app.state.store = IndexStore()
app.state.indexer = Indexer(app.state.store)


class SearchPayload(BaseModel):
    query: str
    top_k: int = 10
    category: str | None = None


class ReloadPayload(BaseModel):
    path: str | None = None
    force: bool = False


def _config() -> AppConfig:
    return getattr(app.state, "config", None) or AppConfig()


def _stats_dict(stats: LoadStats) -> dict[str, Any]:
    return {
        "path": str(stats.path),
        "sha256": stats.sha256,
        "status": stats.status,
        "records": stats.records,
    }


def _load(path: Path, force: bool = False) -> dict[str, Any]:
    try:
        stats = app.state.indexer.load_path(path, force=force)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except MalformedRecordError as exc:
        raise HTTPException(status_code=422, detail=f"Malformed payload: {exc}") from exc
    return _stats_dict(stats)


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    resolved = _config().resolve_payload_path(Path.cwd())
    if not resolved.exists():
        LOGGER.warning("Payload not found at %s, starting with an empty index", resolved)
        return
    try:
        await asyncio.to_thread(_load, resolved)
    except HTTPException as exc:
        LOGGER.error("Unable to load %s: %s", resolved, exc.detail)


@app.post("/search")
async def search_documents(payload: SearchPayload) -> dict[str, List[SearchResult]]:
    query = payload.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Empty query")

    top_k = _config().clamp_limit(payload.top_k)
    searcher = Searcher(app.state.store)
    try:
        results = searcher.search(query, top_k=top_k, category=payload.category)
    except InvalidQueryError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"results": results}


@app.get("/documents")
async def list_documents(category: str | None = None) -> dict[str, Any]:
    """List all loaded records."""
    store: IndexStore = app.state.store
    documents = [
        {"position": position, **record.to_dict()}
        for position, record in enumerate(store.records)
        if category is None or record.category == category
    ]
    return {"documents": documents, "stats": store.stats()}


@app.post("/reload")
async def reload_payload(payload: ReloadPayload) -> dict[str, Any]:
    """Reload the index from a payload file, replacing the current records."""
    if payload.path is not None:
        clean_path = payload.path.strip().replace("\r", "").replace("\n", "")
        if not clean_path:
            raise HTTPException(status_code=400, detail="No path provided")
        if "\0" in clean_path:
            raise HTTPException(status_code=400, detail="Invalid path: contains null byte")
        path = Path(clean_path).expanduser()
    else:
        path = _config().resolve_payload_path(Path.cwd())

    stats = await asyncio.to_thread(_load, path, payload.force)
    return {"status": "ok", "stats": stats}
