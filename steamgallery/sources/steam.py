# steam.py
# Client for the Steam Web API and the Steam store endpoints

import logging
import re

import requests
from requests import exceptions as req_exc

logger = logging.getLogger(__name__)

WEB_API_URL = "https://api.steampowered.com"
STORE_API_URL = "https://store.steampowered.com/api"
STORE_URL = "https://store.steampowered.com"

# Store endpoints reject requests without a browser-like agent
REQUIRED_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
}

STEAM_ID64_PATTERN = re.compile(r"^\d{17}$")
PROFILE_URL_PATTERN = re.compile(r"steamcommunity\.com/(id|profiles)/([^/?#]+)")


class SteamAPIError(RuntimeError):
    """Raised when a Steam call fails in a user-visible way."""


class SteamConfigError(SteamAPIError):
    """Raised when the Steam API key is not configured."""


class SteamAccessDeniedError(SteamAPIError):
    """Raised on 401/403 responses (bad key or private profile)."""


class SteamRateLimitError(SteamAPIError):
    """Raised when Steam answers 429."""


class SteamNotFoundError(SteamAPIError):
    """Raised when an account cannot be found or resolved."""


class SteamClient:
    """Thin wrapper over the Steam endpoints used by the gallery."""

    def __init__(self, api_key, timeout=10.0, country="us", language="english", session=None):
        if not api_key:
            raise SteamConfigError("Steam API key is not configured")
        self.api_key = api_key
        self.timeout = timeout
        self.country = country
        self.language = language
        self.session = session or requests.Session()
        self.session.headers.update(REQUIRED_HEADERS)

    def _get_json(self, url, params=None):
        """GET a JSON document, translating failures into SteamAPIError."""
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except req_exc.Timeout as exc:
            raise SteamAPIError(
                "Steam API timed out before responding. Please retry in a moment."
            ) from exc
        except req_exc.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "unknown"
            if status in (401, 403):
                raise SteamAccessDeniedError(
                    "Steam rejected the request. Check the API key and make sure the profile is public."
                ) from exc
            if status == 429:
                raise SteamRateLimitError(
                    "Steam is rate limiting requests. Please try again shortly."
                ) from exc
            raise SteamAPIError(f"Steam API returned HTTP {status}") from exc
        except req_exc.RequestException as exc:
            raise SteamAPIError(f"Network error while contacting Steam: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise SteamAPIError(f"Steam returned an invalid response for {url}") from exc

    def resolve_steam_id(self, identifier):
        """
        Turn user input into a SteamID64.

        Accepts a SteamID64, a steamcommunity.com profile URL or a vanity name.
        """
        identifier = (identifier or "").strip()
        if not identifier:
            raise SteamNotFoundError("Steam ID is required")

        match = PROFILE_URL_PATTERN.search(identifier)
        if match:
            kind, value = match.groups()
            if kind == "profiles":
                return value
            identifier = value

        if STEAM_ID64_PATTERN.match(identifier):
            return identifier

        data = self._get_json(
            f"{WEB_API_URL}/ISteamUser/ResolveVanityURL/v1/",
            params={"key": self.api_key, "vanityurl": identifier},
        )
        result = data.get("response", {})
        if result.get("success") != 1 or not result.get("steamid"):
            raise SteamNotFoundError(f"No Steam account found for '{identifier}'")
        logger.info("Resolved vanity name %s to %s", identifier, result["steamid"])
        return result["steamid"]

    def get_player_summary(self, steam_id):
        """Return the player summary dict, or None when the account is unknown."""
        data = self._get_json(
            f"{WEB_API_URL}/ISteamUser/GetPlayerSummaries/v2/",
            params={"key": self.api_key, "steamids": steam_id},
        )
        players = data.get("response", {}).get("players", [])
        return players[0] if players else None

    def get_owned_games(self, steam_id):
        """Return owned games (appid, name, playtime_forever, ...). Private profiles yield []."""
        data = self._get_json(
            f"{WEB_API_URL}/IPlayerService/GetOwnedGames/v1/",
            params={
                "key": self.api_key,
                "steamid": steam_id,
                "format": "json",
                "include_appinfo": 1,
                "include_played_free_games": 1,
            },
        )
        return data.get("response", {}).get("games", [])

    def get_recently_played_games(self, steam_id):
        """Return games played in the last two weeks (with playtime_2weeks)."""
        data = self._get_json(
            f"{WEB_API_URL}/IPlayerService/GetRecentlyPlayedGames/v1/",
            params={"key": self.api_key, "steamid": steam_id, "format": "json"},
        )
        return data.get("response", {}).get("games", [])

    def get_app_details(self, appid):
        """Return the store `data` block for an app, or None when the store has none."""
        data = self._get_json(
            f"{STORE_API_URL}/appdetails",
            params={"appids": appid, "cc": self.country, "l": self.language},
        )
        entry = (data or {}).get(str(appid)) or {}
        if not entry.get("success"):
            return None
        return entry.get("data") or None

    def get_app_reviews(self, appid):
        """Return the review `query_summary` for an app (empty dict when missing)."""
        data = self._get_json(
            f"{STORE_URL}/appreviews/{appid}",
            params={"json": 1, "language": "all", "purchase_type": "all", "num_per_page": 0},
        )
        return (data or {}).get("query_summary") or {}
