"""
Shared view-model for the mobile screens (splash, home/favorites, search, details).

Holds StateHolder values the UI renders from and turns user intents into server calls.
Failures are logged and surfaced through the error holders; favorite toggles that fail
leave the favorites state unchanged.
"""
import logging
from dataclasses import replace
from typing import Any

import httpx

from eventfinder.client.api import EventFinderClient
from eventfinder.client.debounce import Debouncer
from eventfinder.client.favorites import (
    EventItem,
    FavoriteSource,
    build_favorite_payload,
    source_from_detail,
    source_from_item,
)
from eventfinder.client.state import StateHolder

logger = logging.getLogger(__name__)

CURRENT_LOCATION_LABEL = "Current Location"
# Fixed fallback for "Current Location" (Los Angeles); no device geolocation.
CURRENT_LOCATION_LAT = 34.052235
CURRENT_LOCATION_LNG = -118.243683
LOCATION_SUGGESTION_LIMIT = 5
MSG_NO_LOCATION = "Could not determine location"


def is_current_location(location: str) -> bool:
    return not location.strip() or location.strip().lower() == CURRENT_LOCATION_LABEL.lower()


class EventFinderSession:
    def __init__(self, client: EventFinderClient | None = None, *, debounce_seconds: float = 0.3) -> None:
        self._client = client or EventFinderClient()
        self._suggest_debouncer = Debouncer(debounce_seconds)
        self._location_debouncer = Debouncer(debounce_seconds)

        # Search
        self.search_results: StateHolder[list[EventItem]] = StateHolder([])
        self.is_searching = StateHolder(False)
        self.search_error: StateHolder[str | None] = StateHolder(None)
        # Details
        self.selected_event: StateHolder[dict[str, Any] | None] = StateHolder(None)
        self.is_loading_details = StateHolder(False)
        self.spotify_data: StateHolder[dict[str, Any] | None] = StateHolder(None)
        self.is_loading_spotify = StateHolder(False)
        # Favorites, newest first
        self.favorites: StateHolder[list[dict[str, Any]]] = StateHolder([])
        # Autocomplete
        self.suggestions: StateHolder[list[str]] = StateHolder([])
        self.location_suggestions: StateHolder[list[str]] = StateHolder([])
        self.is_loading_location_suggestions = StateHolder(False)
        # Persisted search form
        self.search_keyword = StateHolder("")
        self.search_location = StateHolder(CURRENT_LOCATION_LABEL)
        self.search_distance = StateHolder("10")
        self.search_category = StateHolder("All")

    def close(self) -> None:
        self._suggest_debouncer.cancel()
        self._location_debouncer.cancel()
        self._client.close()

    # --- Favorites ---

    def _favorite_ids(self) -> set[str]:
        return {f.get("id") for f in self.favorites.value}

    def _sync_search_favorites(self) -> None:
        fav_ids = self._favorite_ids()
        self.search_results.value = [
            replace(item, is_favorite=item.id in fav_ids) for item in self.search_results.value
        ]

    def fetch_favorites(self) -> None:
        """Reload favorites; the server sends oldest first, the UI shows newest first."""
        try:
            rows = self._client.get_favorites()
        except httpx.HTTPError as e:
            logger.error("Error fetching favorites: %s", e)
            return
        self.favorites.value = sorted(rows, key=lambda f: f.get("createdAt") or "", reverse=True)
        self._sync_search_favorites()

    def remove_favorite(self, event_id: str) -> None:
        try:
            self._client.remove_favorite(event_id)
        except httpx.HTTPError as e:
            logger.error("Error removing favorite: %s", e)
            return
        self.fetch_favorites()

    def _toggle(self, source: FavoriteSource) -> None:
        if source.id in self._favorite_ids():
            self.remove_favorite(source.id)
            return
        try:
            self._client.add_favorite(build_favorite_payload(source))
        except httpx.HTTPError as e:
            logger.error("Error toggling favorite: %s", e)
            return
        self.fetch_favorites()

    def toggle_favorite(self, event: EventItem | dict[str, Any]) -> None:
        """Favorite/unfavorite a search row (EventItem) or an event detail (dict)."""
        source = source_from_item(event) if isinstance(event, EventItem) else source_from_detail(event)
        self._toggle(source)

    # --- Search ---

    def _resolve_location(self, location: str) -> tuple[float, float]:
        if is_current_location(location):
            return CURRENT_LOCATION_LAT, CURRENT_LOCATION_LNG
        geo = self._client.geocode_address(location)
        return float(geo.get("lat") or 0.0), float(geo.get("lng") or 0.0)

    def search_events(self, keyword: str, distance: int, category: str, location: str) -> None:
        self.is_searching.value = True
        self.search_error.value = None
        try:
            lat, lng = self._resolve_location(location)
            if lat == 0.0 and lng == 0.0:
                self.search_error.value = MSG_NO_LOCATION
                return
            rows = self._client.search_events(keyword, category, lat, lng, distance)
            fav_ids = self._favorite_ids()
            self.search_results.value = [EventItem.from_summary(r, is_favorite=r.get("id") in fav_ids) for r in rows]
        except httpx.HTTPError as e:
            self.search_error.value = str(e)
            logger.error("Error searching events: %s", e)
        finally:
            self.is_searching.value = False

    def fetch_suggestions(self, keyword: str) -> None:
        try:
            response = self._client.get_suggestions(keyword)
        except httpx.HTTPError as e:
            logger.error("Error fetching suggestions: %s", e)
            return
        self.suggestions.value = [str(s) for s in response.get("suggestions") or [] if s is not None]

    def fetch_suggestions_debounced(self, keyword: str) -> None:
        """Keystroke handler: query only after the input has been quiet for the debounce delay."""
        self._suggest_debouncer.call(self.fetch_suggestions, keyword)

    def clear_suggestions(self) -> None:
        self._suggest_debouncer.cancel()
        self.suggestions.value = []

    def fetch_location_suggestions(self, query: str) -> None:
        if is_current_location(query):
            self.location_suggestions.value = []
            return
        self.is_loading_location_suggestions.value = True
        try:
            response = self._client.get_location_autocomplete(query)
            descriptions = [
                str(p.get("description"))
                for p in response.get("predictions") or []
                if isinstance(p, dict) and p.get("description")
            ]
            # Keep the previous list when the API has nothing new
            if descriptions:
                self.location_suggestions.value = descriptions[:LOCATION_SUGGESTION_LIMIT]
        except httpx.HTTPError as e:
            logger.error("Error fetching location suggestions: %s", e)
        finally:
            self.is_loading_location_suggestions.value = False

    def fetch_location_suggestions_debounced(self, query: str) -> None:
        self._location_debouncer.call(self.fetch_location_suggestions, query)

    def clear_location_suggestions(self) -> None:
        self._location_debouncer.cancel()
        self.location_suggestions.value = []
        self.is_loading_location_suggestions.value = False

    # --- Details ---

    def fetch_event_details(self, event_id: str) -> None:
        """Load the detail screen, then Spotify info for the first artist (if any)."""
        self.is_loading_details.value = True
        self.is_loading_spotify.value = True
        self.spotify_data.value = None
        try:
            detail = self._client.get_event_details(event_id)
            self.selected_event.value = detail
            artists = detail.get("artists") or []
            artist_name = (artists[0].get("name") if artists else None) or ""
            if artist_name.strip():
                try:
                    self.spotify_data.value = self._client.get_spotify_artist(artist_name)
                except httpx.HTTPError as e:
                    logger.error("Error fetching Spotify: %s", e)
        except httpx.HTTPError as e:
            logger.error("Error fetching event details: %s", e)
        finally:
            self.is_loading_details.value = False
            self.is_loading_spotify.value = False
