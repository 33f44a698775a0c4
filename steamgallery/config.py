# config.py
# Application configuration read from environment variables

import os


def _env_int(name, default):
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name, default):
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


# Steam Web API credentials (STEAM_ID is the account shown when none is given)
STEAM_API_KEY = os.environ.get("STEAM_API_KEY", "").strip()
STEAM_ID = os.environ.get("STEAM_ID", "").strip()

# Store locale for appdetails (cc / l parameters)
STEAM_STORE_COUNTRY = os.environ.get("STEAM_STORE_COUNTRY", "us").strip()
STEAM_STORE_LANGUAGE = os.environ.get("STEAM_STORE_LANGUAGE", "english").strip()

STEAM_REQUEST_TIMEOUT = _env_float("STEAM_REQUEST_TIMEOUT", 10.0)
STEAM_MAX_WORKERS = max(1, _env_int("STEAM_MAX_WORKERS", 8))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:5050,http://127.0.0.1:5050"
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = _env_int("PORT", 5050)
