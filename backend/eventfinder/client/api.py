"""HTTP client for the Event Finder server, as used by the mobile app."""
from typing import Any

import httpx

DEFAULT_BASE_URL = "http://10.0.2.2:8080/"  # Android emulator -> host localhost
DEFAULT_TIMEOUT_SECONDS = 30.0


class EventFinderClient:
    """One long-lived httpx client per server. Non-2xx responses raise httpx.HTTPStatusError."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "EventFinderClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        r = self._http.request(method, path, **kwargs)
        r.raise_for_status()
        return r.json()

    # Events

    def search_events(self, keyword: str, category: str, lat: float, lng: float, distance: int) -> list[dict[str, Any]]:
        params = {"keyword": keyword, "category": category, "lat": lat, "lng": lng, "distance": distance}
        return self._request("GET", "api/events/search", params=params)

    def get_event_details(self, event_id: str) -> dict[str, Any]:
        return self._request("GET", f"api/events/{event_id}")

    def get_spotify_artist(self, name: str) -> dict[str, Any]:
        return self._request("GET", "api/events/spotify/artist", params={"name": name})

    def get_suggestions(self, keyword: str) -> dict[str, Any]:
        return self._request("GET", "api/events/suggestions", params={"keyword": keyword})

    # Favorites

    def get_favorites(self) -> list[dict[str, Any]]:
        return self._request("GET", "api/favorites")

    def add_favorite(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "api/favorites", json=payload)

    def remove_favorite(self, event_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"api/favorites/{event_id}")

    # Geo

    def get_ip_location(self) -> dict[str, Any]:
        return self._request("GET", "api/geo/ip-location")

    def geocode_address(self, address: str) -> dict[str, Any]:
        return self._request("GET", "api/geo/geocode", params={"address": address})

    def get_location_autocomplete(self, text: str) -> dict[str, Any]:
        return self._request("GET", "api/geo/autocomplete", params={"input": text})
