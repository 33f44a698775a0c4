# routes/library.py
# Gallery page: account search, profile card, stats and sortable game grid

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .. import config
from ..dependencies import get_steam_client
from ..services.library_builder import build_library
from ..sources.steam import SteamAPIError
from ..utils.helpers import (
    DEFAULT_SORT, SORT_OPTIONS, apply_view, format_hours, genre_counts, resolve_steam_id_param
)

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")


@router.get("/", response_class=HTMLResponse)
def gallery(
    request: Request,
    steam_id: str = Query(default="", alias="steamId"),
    sort: str = DEFAULT_SORT,
    genre: list[str] = Query(default=[]),
    search: str = "",
    client=Depends(get_steam_client),
):
    """Gallery page - fetches the library on every request."""
    identifier = resolve_steam_id_param(steam_id)
    if sort not in SORT_OPTIONS:
        sort = DEFAULT_SORT

    context = {
        "request": request,
        "steam_id": steam_id or identifier,
        "profile": None,
        "games": [],
        "stats": None,
        "genre_counts": {},
        "error": None,
        "sort_options": SORT_OPTIONS,
        "current_sort": sort,
        "current_genres": genre,
        "current_search": search,
        "format_hours": format_hours,
    }

    if not identifier:
        return templates.TemplateResponse(request, "index.html", context)

    if client is None:
        context["error"] = "Steam API key is not configured"
        return templates.TemplateResponse(request, "index.html", context, status_code=500)

    try:
        library = build_library(client, identifier, max_workers=config.STEAM_MAX_WORKERS)
    except SteamAPIError as e:
        logger.warning("Could not load library for %s: %s", identifier, e)
        context["error"] = f"Failed to load the game list: {e}"
        return templates.TemplateResponse(request, "index.html", context)

    context.update({
        "profile": library["userProfile"],
        "stats": library["stats"],
        "games": apply_view(library["games"], sort, genres=genre, search=search),
        "genre_counts": genre_counts(library["games"]),
    })
    return templates.TemplateResponse(request, "index.html", context)
