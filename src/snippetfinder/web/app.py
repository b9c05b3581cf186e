"""FastAPI application backing the SnippetFinder web UI."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from snippetfinder.config import AppConfig
from snippetfinder.errors import ConfigurationError
from snippetfinder.library import SnippetLibrary
from snippetfinder.models import Entry
from snippetfinder.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="SnippetFinder Web", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frontend_router)

_library: SnippetLibrary | None = None


class ScanPayload(BaseModel):
    paths: List[str] | None = None


class SearchPayload(BaseModel):
    query: str = ""
    folder: str | None = None


def get_library() -> SnippetLibrary:
    global _library
    if _library is None:
        try:
            _library = SnippetLibrary(AppConfig.from_env())
        except (ConfigurationError, ValueError) as exc:
            LOGGER.error("Invalid SnippetFinder settings: %s", exc)
            raise HTTPException(status_code=400, detail=f"Invalid settings: {exc}") from exc
    return _library


def _require_entry(library: SnippetLibrary, entry_id: str) -> Entry:
    entry = library.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Snippet {entry_id} not found. Try reloading.")
    return entry


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/scan")
async def scan_roots(payload: ScanPayload, library: SnippetLibrary = Depends(get_library)) -> dict[str, Any]:
    roots = payload.paths if payload.paths else library.config.root_paths()
    if not roots:
        raise HTTPException(status_code=400, detail="No snippet folders configured")

    result = await library.reload(roots)
    return {
        "message": result.summary(),
        "count": len(result.entries),
        "roots": list(result.roots),
        "folders": result.folders,
        "errors": [str(error) for error in result.errors],
    }


@app.get("/entries")
async def list_entries(library: SnippetLibrary = Depends(get_library)) -> dict[str, Any]:
    return {"entries": [entry.to_dict() for entry in library.current.entries]}


@app.post("/search")
async def search_entries(payload: SearchPayload, library: SnippetLibrary = Depends(get_library)) -> dict[str, Any]:
    matches = library.filter(payload.folder, payload.query)
    return {"entries": [entry.to_dict() for entry in matches]}


@app.get("/folders")
async def list_folders(library: SnippetLibrary = Depends(get_library)) -> dict[str, List[str]]:
    return {"folders": library.current.folders}


@app.get("/preview/{entry_id}")
async def preview_entry(entry_id: str, library: SnippetLibrary = Depends(get_library)) -> dict[str, str]:
    entry = _require_entry(library, entry_id)
    return {"id": entry.id, "preview": await library.preview(entry)}


@app.get("/content/{entry_id}")
async def entry_content(entry_id: str, library: SnippetLibrary = Depends(get_library)) -> dict[str, str]:
    entry = _require_entry(library, entry_id)
    try:
        content = library.content(entry)
    except OSError as exc:
        LOGGER.error("Unable to read %s: %s", entry.full_path, exc)
        raise HTTPException(status_code=500, detail=f"Unable to read {entry.full_path}: {exc.strerror or exc}")
    return {"id": entry.id, "content": content}
