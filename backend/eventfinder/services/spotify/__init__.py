"""Spotify artist lookup for the event detail screen's Artist tab."""
import logging
from typing import Any

from eventfinder.core.constants import SPOTIFY_ALBUM_LIMIT
from eventfinder.core.errors import ValidationError
from eventfinder.services.spotify.client import SpotifyClient

logger = logging.getLogger(__name__)

default_client = SpotifyClient()


def _image(obj: dict[str, Any]) -> str | None:
    images = obj.get("images")
    if isinstance(images, list) and images and isinstance(images[0], dict):
        return images[0].get("url")
    return None


def _to_artist(artist: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": artist.get("id") or "",
        "name": artist.get("name") or "",
        "followers": int((artist.get("followers") or {}).get("total") or 0),
        "popularity": int(artist.get("popularity") or 0),
        "genres": [g for g in artist.get("genres") or [] if isinstance(g, str)],
        "spotifyUrl": (artist.get("external_urls") or {}).get("spotify"),
        "image": _image(artist),
    }


def _to_album(album: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": album.get("id") or "",
        "name": album.get("name") or "",
        "releaseDate": album.get("release_date"),
        "totalTracks": album.get("total_tracks"),
        "spotifyUrl": (album.get("external_urls") or {}).get("spotify"),
        "image": _image(album),
    }


def get_artist_info(name: str, client: SpotifyClient | None = None) -> dict[str, Any]:
    """Best match artist plus a few recent albums. No match (or no credentials) -> {"artist": None, "albums": []}."""
    client = client or default_client
    name = (name or "").strip()
    if not name:
        raise ValidationError("Artist name is required")
    empty: dict[str, Any] = {"artist": None, "albums": []}
    if not client.is_configured():
        logger.error("Spotify credentials not configured (SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET)")
        return empty
    items = ((client.search_artist(name).get("artists") or {}).get("items")) or []
    artist = items[0] if items and isinstance(items[0], dict) else None
    if not artist or not artist.get("id"):
        logger.info("No Spotify artist match for %r", name)
        return empty
    albums = (client.artist_albums(artist["id"], SPOTIFY_ALBUM_LIMIT).get("items")) or []
    return {
        "artist": _to_artist(artist),
        "albums": [_to_album(a) for a in albums if isinstance(a, dict)],
    }


__all__ = ["SpotifyClient", "default_client", "get_artist_info"]
