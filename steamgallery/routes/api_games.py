# routes/api_games.py
# JSON endpoints returning an enriched Steam library

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from .. import config
from ..dependencies import get_steam_client
from ..models import ErrorResponse, LibraryResponse
from ..services.library_builder import build_library
from ..sources.steam import SteamAPIError, SteamNotFoundError
from ..utils.helpers import DEFAULT_SORT, apply_view, resolve_steam_id_param

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Games"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


def _error(message, status_code):
    return JSONResponse({"error": message}, status_code=status_code)


@router.get("/api/steam/games", response_model=LibraryResponse, responses=ERROR_RESPONSES)
@router.get("/steam/games", response_model=LibraryResponse, responses=ERROR_RESPONSES, include_in_schema=False)
def get_games(
    steam_id: Optional[str] = Query(default=None, alias="steamId"),
    sort: str = DEFAULT_SORT,
    genre: list[str] = Query(default=[]),
    search: str = "",
    client=Depends(get_steam_client),
):
    """Owned games of an account with store metadata and time statistics."""
    identifier = resolve_steam_id_param(steam_id)
    if not identifier:
        return _error("Steam ID is required", 400)

    if client is None:
        logger.error("Steam API key is not configured")
        return _error("Steam API key is not configured", 500)

    try:
        library = build_library(client, identifier, max_workers=config.STEAM_MAX_WORKERS)
    except SteamNotFoundError as e:
        return _error(str(e), 404)
    except SteamAPIError as e:
        logger.warning("Steam API error for %s: %s", identifier, e)
        return _error(f"Failed to fetch Steam data: {e}", 502)

    library["games"] = apply_view(library["games"], sort, genres=genre, search=search)
    return library
