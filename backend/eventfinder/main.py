"""
FastAPI app entrypoint.

Thin aggregation server for the Event Finder mobile app: Ticketmaster/Spotify proxies,
geo lookups and the favorites store, all under /api.
"""
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from eventfinder.api.routes import events, favorites, geo
from eventfinder.config import settings
from eventfinder.core.errors import register_error_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    missing = [
        name
        for name, value in (
            ("TICKETMASTER_API_KEY", settings.ticketmaster_api_key),
            ("GOOGLE_MAPS_API_KEY", settings.google_maps_api_key),
            ("SPOTIFY_CLIENT_ID", settings.spotify_client_id),
            ("SPOTIFY_CLIENT_SECRET", settings.spotify_client_secret),
        )
        if not value
    ]
    if missing:
        logger.warning("Not configured (features degrade to empty results): %s", ", ".join(missing))
    logger.info("Event Finder backend ready")
    yield
    logger.info("Event Finder backend shutting down")


app = FastAPI(title="Event Finder", version="0.1.0", lifespan=lifespan)
register_error_handlers(app)

# CORS: dev origins + optional CORS_ORIGINS env (comma-separated) for a web frontend
_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:4200",
    "http://127.0.0.1:4200",
]
_cors_extra = settings.cors_origins or os.getenv("CORS_ORIGINS", "")
if _cors_extra:
    _cors_origins.extend(o.strip() for o in _cors_extra.split(",") if o.strip())
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events.router, prefix="/api/events", tags=["events"])
app.include_router(favorites.router, prefix="/api/favorites", tags=["favorites"])
app.include_router(geo.router, prefix="/api/geo", tags=["geo"])


@app.get("/", include_in_schema=False)
def root():
    """Root: point to API docs and health."""
    return {"message": "Event Finder API", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
