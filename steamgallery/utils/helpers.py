# helpers.py
# Utility functions for sorting, filtering and summarizing a Steam library

from .. import config

STEAM_CDN_URL = "https://cdn.cloudflare.steamstatic.com/steam/apps"

SORT_OPTIONS = {
    "playtime": "Playtime",
    "name": "Name",
    "rating": "Rating",
}
DEFAULT_SORT = "playtime"


def get_store_url(appid):
    """Generate the store URL for a game."""
    if not appid:
        return None
    return f"https://store.steampowered.com/app/{appid}"


def get_header_image_url(appid):
    """Fallback header image on the Steam CDN."""
    if not appid:
        return ""
    return f"{STEAM_CDN_URL}/{appid}/header.jpg"


def get_profile_url(steam_id):
    return f"https://steamcommunity.com/profiles/{steam_id}"


def format_hours(minutes):
    """Format minutes as a rounded hour count for display."""
    hours = (minutes or 0) / 60
    if hours < 10:
        return f"{hours:.1f}"
    return f"{int(hours + 0.5):,}"


def sort_games(games, sort_by=DEFAULT_SORT):
    """Return a new list sorted by playtime, name or rating. Unknown keys keep input order."""
    if sort_by == "playtime":
        return sorted(games, key=lambda g: g.get("playtime_forever") or 0, reverse=True)
    if sort_by == "name":
        return sorted(games, key=lambda g: (g.get("name") or "").casefold())
    if sort_by == "rating":
        return sorted(games, key=lambda g: g.get("review_score") or 0, reverse=True)
    return list(games)


def filter_games(games, genres=None, search=""):
    """Keep games matching any selected genre and containing the search text."""
    wanted = {genre.lower() for genre in (genres or []) if genre}
    search = (search or "").strip().casefold()

    result = []
    for game in games:
        if wanted:
            game_genres = {g.get("description", "").lower() for g in game.get("genres") or []}
            if not wanted & game_genres:
                continue
        if search and search not in (game.get("name") or "").casefold():
            continue
        result.append(game)
    return result


def genre_counts(games):
    """Count games per genre, sorted by count (descending) then alphabetically."""
    counts = {}
    for game in games:
        for genre in game.get("genres") or []:
            description = genre.get("description")
            if description:
                counts[description] = counts.get(description, 0) + 1
    return dict(sorted(counts.items(), key=lambda x: (-x[1], x[0].lower())))


def library_stats(games):
    """Aggregate numbers shown above the gallery."""
    total_minutes = sum(g.get("playtime_forever") or 0 for g in games)
    recent_minutes = sum(g.get("playtime_2weeks") or 0 for g in games)
    most_played = max(games, key=lambda g: g.get("playtime_forever") or 0, default=None)

    return {
        "total_games": len(games),
        "total_hours": round(total_minutes / 60, 1),
        "average_hours": round(total_minutes / len(games) / 60, 1) if games else 0,
        "recent_hours": round(recent_minutes / 60, 1),
        "most_played": most_played.get("name") if most_played else None,
    }


def resolve_steam_id_param(steam_id):
    """Use the configured default account when no identifier is given."""
    steam_id = (steam_id or "").strip()
    return steam_id or config.STEAM_ID


def apply_view(games, sort_by=DEFAULT_SORT, genres=None, search=""):
    """Filter then sort a game list the way the gallery shows it."""
    return sort_games(filter_games(games, genres=genres, search=search), sort_by)
