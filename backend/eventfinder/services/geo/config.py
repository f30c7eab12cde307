"""Geo provider config. Credentials from settings (IPINFO_TOKEN, GOOGLE_MAPS_API_KEY) or GeoConfig args."""
from eventfinder.config import settings
from eventfinder.core.constants import GOOGLE_MAPS_BASE_URL, IPINFO_BASE_URL


class GeoConfig:
    """ipinfo token, Google Maps key, base URLs and timeout for the geo providers."""

    __slots__ = ("ipinfo_token", "maps_api_key", "ipinfo_base_url", "maps_base_url", "timeout")

    def __init__(
        self,
        *,
        ipinfo_token: str | None = None,
        maps_api_key: str | None = None,
        ipinfo_base_url: str = IPINFO_BASE_URL,
        maps_base_url: str = GOOGLE_MAPS_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self.ipinfo_token = (settings.ipinfo_token if ipinfo_token is None else ipinfo_token).strip()
        self.maps_api_key = (settings.google_maps_api_key if maps_api_key is None else maps_api_key).strip()
        self.ipinfo_base_url = ipinfo_base_url.rstrip("/")
        self.maps_base_url = maps_base_url.rstrip("/")
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout

    def has_maps_key(self) -> bool:
        return bool(self.maps_api_key)
