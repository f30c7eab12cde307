"""
Event proxy: Ticketmaster search/detail/suggestions and Spotify artist info.

Static paths are declared before /{event_id} so they are not captured as ids.
"""
from typing import Any

from fastapi import APIRouter, Depends, Query

from eventfinder.core.constants import DEFAULT_CATEGORY, DEFAULT_DISTANCE_MILES
from eventfinder.services import spotify, ticketmaster
from eventfinder.services.spotify import SpotifyClient
from eventfinder.services.ticketmaster import TicketmasterClient

router = APIRouter()


def get_ticketmaster_client() -> TicketmasterClient:
    return ticketmaster.default_client


def get_spotify_client() -> SpotifyClient:
    return spotify.default_client


@router.get("/search")
def search(
    keyword: str = Query(...),
    lat: float = Query(...),
    lng: float = Query(...),
    category: str = Query(DEFAULT_CATEGORY),
    distance: int = Query(DEFAULT_DISTANCE_MILES),
    client: TicketmasterClient = Depends(get_ticketmaster_client),
) -> list[dict[str, str]]:
    """Events matching keyword within distance miles of (lat, lng), soonest first."""
    return ticketmaster.search_events(keyword, lat, lng, category=category, distance=distance, client=client)


@router.get("/suggestions")
def suggestions(
    keyword: str = Query(""),
    client: TicketmasterClient = Depends(get_ticketmaster_client),
) -> dict[str, list[str]]:
    return ticketmaster.get_suggestions(keyword, client=client)


@router.get("/spotify/artist")
def spotify_artist(
    name: str = Query(""),
    client: SpotifyClient = Depends(get_spotify_client),
) -> dict[str, Any]:
    """Spotify artist and albums for the detail screen's Artist tab."""
    return spotify.get_artist_info(name, client=client)


@router.get("/{event_id}")
def event_details(
    event_id: str,
    client: TicketmasterClient = Depends(get_ticketmaster_client),
) -> dict[str, Any]:
    return ticketmaster.get_event_details(event_id, client=client)
