# main.py
# FastAPI application entry point for Steam Gallery

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import config

# Import routers
from .routes.api_games import router as api_games_router
from .routes.library import router as library_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Steam Gallery API",
    description="Browse a Steam library with store metadata and play-time statistics",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# Mount static files
static_path = Path(__file__).parent / "static"
if static_path.exists():
    app.mount("/static", StaticFiles(directory=static_path), name="static")


@app.get("/health")
def health():
    return {"ok": True}


# Include routers
app.include_router(library_router)
app.include_router(api_games_router)


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("steamgallery.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
