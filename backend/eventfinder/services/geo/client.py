"""Geo provider client: lowest level, sends request only. No validation, never raises."""
from typing import Any

import httpx

from eventfinder.services.geo.config import GeoConfig


class GeoClient:
    """ipinfo.io lookup plus Google Geocoding / Places Autocomplete."""

    def __init__(self, config: GeoConfig | None = None, *, transport: httpx.BaseTransport | None = None) -> None:
        self._config = config or GeoConfig()
        self._transport = transport

    @property
    def config(self) -> GeoConfig:
        return self._config

    def _get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """GET and decode JSON. Failures come back as {"error": ..., "status_code": ...}."""
        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as c:
                r = c.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return {"error": str(e) or e.__class__.__name__, "status_code": None}
        if not r.is_success:
            return {"error": f"HTTP {r.status_code}", "status_code": r.status_code}
        try:
            data = r.json()
        except ValueError:
            return {"error": "Invalid JSON body", "status_code": r.status_code}
        if not isinstance(data, dict):
            return {"error": "Unexpected response shape", "status_code": r.status_code}
        return data

    def ip_lookup(self, ip: str | None) -> dict[str, Any]:
        """ipinfo /{ip}/json, or /json to let ipinfo use the caller's own address."""
        path = f"/{ip}/json" if ip else "/json"
        params = {"token": self._config.ipinfo_token} if self._config.ipinfo_token else None
        return self._get(f"{self._config.ipinfo_base_url}{path}", params)

    def geocode(self, address: str) -> dict[str, Any]:
        return self._get(
            f"{self._config.maps_base_url}/geocode/json",
            {"address": address, "key": self._config.maps_api_key},
        )

    def autocomplete(self, text: str, types: str) -> dict[str, Any]:
        return self._get(
            f"{self._config.maps_base_url}/place/autocomplete/json",
            {"input": text, "types": types, "key": self._config.maps_api_key},
        )
