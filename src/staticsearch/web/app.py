"""FastAPI application backing the StaticSearch web UI."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from staticsearch.config import AppConfig
from staticsearch.data.loader import DatasetLoader
from staticsearch.data.store import MemorySessionStore
from staticsearch.errors import DataUnavailable
from staticsearch.models import Dataset
from staticsearch.render import render_outcome
from staticsearch.search.engine import SearchEngine
from staticsearch.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="StaticSearch Web", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frontend_router)
app.state.config = None
app.state.loader = None


class SearchPayload(BaseModel):
    query: str
    highlight: bool | None = None
    literal: bool | None = None


def _get_config() -> AppConfig:
    if app.state.config is None:
        app.state.config = AppConfig()
    return app.state.config


def _get_loader() -> DatasetLoader:
    """Return the loader for this server process, which is one session."""
    if app.state.loader is None:
        config = _get_config()
        app.state.loader = DatasetLoader(
            config.resolve_data_source(Path.cwd()),
            MemorySessionStore(),
            cache_key=config.cache_key,
            timeout=config.timeout,
        )
    return app.state.loader


async def _load_dataset() -> Dataset:
    loader = _get_loader()
    try:
        return await asyncio.to_thread(loader.load)
    except DataUnavailable as exc:
        LOGGER.error("Search data unavailable: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/search")
async def search_records(payload: SearchPayload) -> Dict[str, Any]:
    dataset = await _load_dataset()

    search_config = _get_config().search
    overrides: Dict[str, bool] = {}
    if payload.highlight is not None:
        overrides["highlight_keywords"] = payload.highlight
    if payload.literal is not None:
        overrides["query_literal_mode"] = payload.literal
    if overrides:
        search_config = replace(search_config, **overrides)

    outcome = SearchEngine(search_config).search(dataset, payload.query)
    results: List[Dict[str, str]] = [record.to_dict() for record in outcome.annotated]
    return {
        "query": outcome.query,
        "count": outcome.count,
        "results": results,
        "html": render_outcome(outcome, search_config),
        "warnings": [str(problem) for problem in outcome.diagnostics],
    }


@app.get("/dataset")
async def dataset_info() -> Dict[str, Any]:
    """Load (or reuse) the session dataset and describe it."""
    dataset = await _load_dataset()
    return {"count": len(dataset), "source": _get_loader().source}
