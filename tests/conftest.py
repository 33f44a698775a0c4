import pytest
from fastapi.testclient import TestClient

from steamgallery import config
from steamgallery.dependencies import get_steam_client
from steamgallery.main import app
from steamgallery.sources.steam import SteamAPIError

STEAM_ID = "76561197960287930"

OWNED_GAMES = [
    {"appid": 10, "name": "Counter-Strike", "playtime_forever": 600},
    {"appid": 440, "name": "team Fortress 2", "playtime_forever": 3000, "img_icon_url": "e3f595a9"},
    {"appid": 570, "name": "Dota 2", "playtime_forever": 120},
]

APP_DETAILS = {
    10: {
        "short_description": "Play the world's number 1 online action game.",
        "header_image": "https://cdn.example/10/header.jpg",
        "genres": [{"id": "1", "description": "Action"}],
        "release_date": {"coming_soon": False, "date": "1 Nov, 2000"},
        "developers": ["Valve"],
        "publishers": ["Valve"],
        "metacritic": {"score": 88},
    },
    440: {
        "short_description": "Nine distinct classes.",
        "genres": [{"id": "1", "description": "Action"}, {"description": "Free to Play"}],
    },
}

REVIEWS = {
    10: {"review_score": 9, "total_reviews": 150000, "review_score_desc": "Overwhelmingly Positive"},
    440: {"review_score": 8, "total_reviews": 1000000, "review_score_desc": "Very Positive"},
}


class FakeSteamClient:
    """In-memory stand-in for SteamClient."""

    def __init__(self, player=None, owned=None, recent=None, failing_apps=(), fail_owned=False):
        self.player = player if player is not None else {
            "steamid": STEAM_ID,
            "personaname": "Rabscuttle",
            "avatarfull": "https://avatars.example/full.jpg",
            "profileurl": "https://steamcommunity.com/id/rabscuttle/",
        }
        self.owned = OWNED_GAMES if owned is None else owned
        self.recent = [{"appid": 440, "playtime_2weeks": 840}] if recent is None else recent
        self.failing_apps = set(failing_apps)
        self.fail_owned = fail_owned
        self.recent_calls = 0

    def resolve_steam_id(self, identifier):
        return identifier

    def get_player_summary(self, steam_id):
        return self.player or None

    def get_owned_games(self, steam_id):
        if self.fail_owned:
            raise SteamAPIError("Steam API returned HTTP 500")
        return list(self.owned)

    def get_recently_played_games(self, steam_id):
        self.recent_calls += 1
        if isinstance(self.recent, Exception):
            raise self.recent
        return list(self.recent)

    def get_app_details(self, appid):
        if appid in self.failing_apps:
            raise SteamAPIError("Steam API timed out before responding.")
        return APP_DETAILS.get(appid)

    def get_app_reviews(self, appid):
        return REVIEWS.get(appid, {})


@pytest.fixture
def fake_client():
    return FakeSteamClient()


@pytest.fixture
def client_factory(monkeypatch):
    """Build a TestClient whose Steam dependency yields the given fake."""
    monkeypatch.setattr(config, "STEAM_ID", "")

    def make(steam_client):
        app.dependency_overrides[get_steam_client] = lambda: steam_client
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()
