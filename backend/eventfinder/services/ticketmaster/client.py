"""Ticketmaster Discovery API client: lowest level, sends request only. No reshaping."""
from typing import Any

import httpx

from eventfinder.config import settings
from eventfinder.core.constants import TICKETMASTER_BASE_URL
from eventfinder.core.errors import NotFound, UpstreamError

PROVIDER = "ticketmaster"


class TicketmasterClient:
    """Event search, event detail and attraction suggestions."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = TICKETMASTER_BASE_URL,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = (settings.ticketmaster_api_key if api_key is None else api_key).strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET {base_url}{path}. 404 raises NotFound; other failures raise UpstreamError."""
        if not self.is_configured():
            raise UpstreamError(PROVIDER, detail="TICKETMASTER_API_KEY not configured")
        query = {"apikey": self.api_key, **(params or {})}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as c:
                r = c.get(f"{self.base_url}{path}", params=query)
        except httpx.HTTPError as e:
            raise UpstreamError(PROVIDER, detail=str(e) or e.__class__.__name__) from e
        if r.status_code == 404:
            raise NotFound()
        if not r.is_success:
            raise UpstreamError(PROVIDER, r.status_code, r.text[:500] if r.text else None)
        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError(PROVIDER, r.status_code, "Invalid JSON body") from e
        return data if isinstance(data, dict) else {}

    def search_events(self, params: dict[str, Any]) -> dict[str, Any]:
        return self._get("/events.json", params)

    def get_event(self, event_id: str) -> dict[str, Any]:
        return self._get(f"/events/{event_id}.json")

    def suggest(self, keyword: str) -> dict[str, Any]:
        return self._get("/suggest.json", {"keyword": keyword})
