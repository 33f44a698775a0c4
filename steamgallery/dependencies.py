# dependencies.py
# FastAPI dependencies shared by the routers

from . import config
from .sources.steam import SteamClient


def get_steam_client():
    """Yield a Steam client for one request, or None when no API key is configured."""
    if not config.STEAM_API_KEY:
        yield None
        return

    client = SteamClient(
        config.STEAM_API_KEY,
        timeout=config.STEAM_REQUEST_TIMEOUT,
        country=config.STEAM_STORE_COUNTRY,
        language=config.STEAM_STORE_LANGUAGE,
    )
    try:
        yield client
    finally:
        client.session.close()
