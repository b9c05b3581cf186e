"""Static HTML frontend for the SnippetFinder web UI."""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from snippetfinder import __version__

router = APIRouter()

VERSION_MARKER = "{{ version }}"


@lru_cache(maxsize=1)
def _load_template() -> str:
    """Read the single-page UI once and stamp the package version into it."""
    template = files("snippetfinder.web").joinpath("templates", "index.html")
    return template.read_text(encoding="utf-8").replace(VERSION_MARKER, __version__)


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(_load_template())
