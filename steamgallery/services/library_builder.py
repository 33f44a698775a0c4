# library_builder.py
# Fetches a Steam library and enriches every game with store metadata,
# review summary and synthesized play-time statistics

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..sources.steam import SteamAPIError, SteamNotFoundError
from ..utils.helpers import get_header_image_url, get_profile_url, get_store_url, library_stats
from .time_stats import generate_time_stats

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("steamid", "personaname", "avatarfull", "profileurl")


def normalize_genres(raw_genres):
    """Store genres as [{id, description}], filling in an id where Steam omits it."""
    genres = []
    for genre in raw_genres or []:
        description = genre.get("description")
        if not description:
            continue
        genres.append({
            "id": str(genre.get("id") or f"genre-{description}"),
            "description": description,
        })
    return genres


def _empty_enrichment(appid):
    return {
        "genres": [],
        "header_image": get_header_image_url(appid),
        "description": "",
        "release_date": None,
        "developers": [],
        "publishers": [],
        "metacritic_score": None,
        "review_score": 0,
        "total_reviews": 0,
        "review_score_desc": "",
    }


def _fallback_game(game):
    """Base owned-game fields with empty store data and no recent playtime."""
    appid = game.get("appid")
    return {
        **game,
        "store_url": get_store_url(appid),
        **_empty_enrichment(appid),
        "header_image": "",
        "playtime_2weeks": 0,
        "time_stats": generate_time_stats(game.get("playtime_forever", 0), 0),
    }


def _enrich_game(client, game, recent_minutes):
    """Fetch details and reviews for one game. Falls back to defaults on failure."""
    appid = game.get("appid")
    enriched = {
        **game,
        "store_url": get_store_url(appid),
        **_empty_enrichment(appid),
    }

    try:
        details = client.get_app_details(appid)
        if details:
            release = details.get("release_date") or {}
            metacritic = details.get("metacritic") or {}
            enriched.update({
                "genres": normalize_genres(details.get("genres")),
                "header_image": details.get("header_image") or enriched["header_image"],
                "description": details.get("short_description") or "",
                "release_date": release.get("date") or None,
                "developers": details.get("developers") or [],
                "publishers": details.get("publishers") or [],
                "metacritic_score": metacritic.get("score"),
            })

        reviews = client.get_app_reviews(appid)
        enriched.update({
            "review_score": reviews.get("review_score") or 0,
            "total_reviews": reviews.get("total_reviews") or 0,
            "review_score_desc": reviews.get("review_score_desc") or "",
        })
    except (SteamAPIError, AttributeError, TypeError) as e:
        # Malformed store payloads are treated like failed requests
        logger.warning("Could not enrich %s (%s): %s", game.get("name"), appid, e)
        return _fallback_game(game)

    enriched["playtime_2weeks"] = recent_minutes
    enriched["time_stats"] = generate_time_stats(game.get("playtime_forever", 0), recent_minutes)
    return enriched


def build_profile(player, steam_id):
    profile = {field: player.get(field) for field in PROFILE_FIELDS}
    profile["steamid"] = profile["steamid"] or steam_id
    profile["profileurl"] = profile["profileurl"] or get_profile_url(steam_id)
    return profile


def build_library(client, identifier, max_workers=8):
    """
    Fetch profile and owned games for an account and enrich every game.

    Returns {"userProfile": ..., "games": [...], "stats": ...} with games in
    the order Steam returned them. Raises SteamNotFoundError when the account
    has no profile, SteamAPIError when the profile or game list fails.
    """
    steam_id = client.resolve_steam_id(identifier)

    logger.info("Fetching user profile for Steam ID %s", steam_id)
    player = client.get_player_summary(steam_id)
    if not player:
        logger.warning("User profile not found for Steam ID %s", steam_id)
        raise SteamNotFoundError("User profile not found")

    logger.info("Fetching owned games for Steam ID %s", steam_id)
    owned = [g for g in client.get_owned_games(steam_id) if g.get("appid") is not None]

    try:
        recent = client.get_recently_played_games(steam_id)
    except SteamAPIError as e:
        logger.warning("Recently played games unavailable for %s: %s", steam_id, e)
        recent = []
    recent_by_appid = {g.get("appid"): g.get("playtime_2weeks") or 0 for g in recent}

    games = [None] * len(owned)
    if owned:
        with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
            future_to_game = {
                executor.submit(
                    _enrich_game,
                    client,
                    game,
                    recent_by_appid.get(game["appid"], game.get("playtime_2weeks") or 0),
                ): (index, game)
                for index, game in enumerate(owned)
            }
            for future in as_completed(future_to_game):
                index, game = future_to_game[future]
                try:
                    games[index] = future.result()
                except Exception as e:
                    logger.warning("Error processing %s (%s): %s", game.get("name"), game.get("appid"), e)
                    games[index] = _fallback_game(game)

    logger.info("Fetched %d games for Steam ID %s", len(games), steam_id)
    return {
        "userProfile": build_profile(player, steam_id),
        "games": games,
        "stats": library_stats(games),
    }
