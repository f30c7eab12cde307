"""Spotify Web API client (client-credentials flow). Lowest level, sends request only."""
import threading
import time
from typing import Any

import httpx

from eventfinder.config import settings
from eventfinder.core.constants import (
    SPOTIFY_ACCOUNTS_URL,
    SPOTIFY_API_BASE_URL,
    SPOTIFY_TOKEN_REFRESH_MARGIN_SECONDS,
)
from eventfinder.core.errors import UpstreamError

PROVIDER = "spotify"


class SpotifyClient:
    """Artist search and album listing. Access token cached until shortly before expiry."""

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        *,
        base_url: str = SPOTIFY_API_BASE_URL,
        token_url: str = SPOTIFY_ACCOUNTS_URL,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.client_id = (settings.spotify_client_id if client_id is None else client_id).strip()
        self.client_secret = (settings.spotify_client_secret if client_secret is None else client_secret).strip()
        self.base_url = base_url.rstrip("/")
        self.token_url = token_url
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self._transport = transport
        # (access_token, expiry_epoch)
        self._token: tuple[str, float] | None = None
        self._token_lock = threading.Lock()

    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def _http(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout, transport=self._transport)

    def _access_token(self) -> str:
        with self._token_lock:
            now = time.time()
            if self._token and self._token[1] > now:
                return self._token[0]
            return self._fetch_token(now)

    def _fetch_token(self, now: float) -> str:
        try:
            with self._http() as c:
                r = c.post(
                    self.token_url,
                    data={"grant_type": "client_credentials"},
                    auth=(self.client_id, self.client_secret),
                )
        except httpx.HTTPError as e:
            raise UpstreamError(PROVIDER, detail=f"token request failed: {e}") from e
        if not r.is_success:
            raise UpstreamError(PROVIDER, r.status_code, "token request rejected")
        try:
            body = r.json()
        except ValueError as e:
            raise UpstreamError(PROVIDER, r.status_code, "Invalid JSON body") from e
        token = body.get("access_token")
        if not token:
            raise UpstreamError(PROVIDER, r.status_code, "token response without access_token")
        expires_in = int(body.get("expires_in") or 3600)
        self._token = (token, now + max(expires_in - SPOTIFY_TOKEN_REFRESH_MARGIN_SECONDS, 0))
        return token

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        headers = {"Authorization": f"Bearer {self._access_token()}"}
        try:
            with self._http() as c:
                r = c.get(f"{self.base_url}{path}", params=params, headers=headers)
        except httpx.HTTPError as e:
            raise UpstreamError(PROVIDER, detail=str(e) or e.__class__.__name__) from e
        if r.status_code == 401:
            # Token revoked early; next call fetches a fresh one.
            self._token = None
        if not r.is_success:
            raise UpstreamError(PROVIDER, r.status_code, r.text[:500] if r.text else None)
        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError(PROVIDER, r.status_code, "Invalid JSON body") from e
        return data if isinstance(data, dict) else {}

    def search_artist(self, name: str) -> dict[str, Any]:
        return self._get("/search", {"q": name, "type": "artist", "limit": 1})

    def artist_albums(self, artist_id: str, limit: int) -> dict[str, Any]:
        return self._get(f"/artists/{artist_id}/albums", {"include_groups": "album,single", "limit": limit})
