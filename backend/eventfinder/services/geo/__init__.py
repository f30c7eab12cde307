"""
Geo proxy: client IP normalization, IP geolocation, address geocoding, city autocomplete.

Geolocation is best-effort: provider failures are logged and degrade to None / [] so the
routes can answer 404 or an empty list instead of an error.
"""
import logging
from typing import Any, TypedDict

from eventfinder.core.constants import AUTOCOMPLETE_TYPES, IPV4_MAPPED_PREFIX, PRIVATE_IP_PATTERNS
from eventfinder.services.geo.client import GeoClient
from eventfinder.services.geo.config import GeoConfig

logger = logging.getLogger(__name__)

default_client = GeoClient()


class PlacePrediction(TypedDict):
    description: str
    place_id: str


def normalize_client_ip(ip: str | None) -> str | None:
    """
    First address of a forwarded-for chain, without the IPv4-mapped IPv6 prefix.
    Loopback/private addresses return None.
    """
    if not ip:
        return None
    first = ip.split(",")[0].strip()
    cleaned = first.replace(IPV4_MAPPED_PREFIX, "")
    if not cleaned or any(p.match(cleaned) for p in PRIVATE_IP_PATTERNS):
        return None
    return cleaned


def _parse_loc(loc: Any) -> tuple[float, float] | None:
    """ipinfo "lat,lng" -> (lat, lng). None when missing or unparsable."""
    if not isinstance(loc, str):
        return None
    parts = loc.split(",")
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


def get_location_from_ip(client_ip: str | None, client: GeoClient | None = None) -> dict[str, Any] | None:
    """Resolve the caller's location via ipinfo. Private/missing IPs let ipinfo infer the address."""
    client = client or default_client
    normalized = normalize_client_ip(client_ip)
    data = client.ip_lookup(normalized)
    if data.get("error"):
        logger.error("IPInfo API error: status=%s %s", data.get("status_code"), data["error"])
        return None
    coords = _parse_loc(data.get("loc"))
    if coords is None:
        logger.info("IPInfo returned no usable loc for ip=%s", normalized or "<inferred>")
        return None
    out: dict[str, Any] = {"lat": coords[0], "lng": coords[1]}
    for key in ("city", "region", "country"):
        if data.get(key):
            out[key] = data[key]
    return out


def geocode_address(address: str, client: GeoClient | None = None) -> dict[str, Any] | None:
    """Coordinates of the first Google Geocoding candidate, or None."""
    client = client or default_client
    if not client.config.has_maps_key():
        logger.error("Google Maps API key not configured")
        return None
    data = client.geocode(address)
    if data.get("error"):
        logger.error("Google Geocoding API error: status=%s %s", data.get("status_code"), data["error"])
        return None
    if data.get("error_message"):
        logger.error("Geocoding API error message: %s", data["error_message"])
    results = data.get("results") or []
    if data.get("status") != "OK" or not results:
        logger.warning("No geocoding results found for address: %s", address)
        return None
    location = ((results[0] or {}).get("geometry") or {}).get("location") or {}
    lat, lng = location.get("lat"), location.get("lng")
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    return {"lat": float(lat), "lng": float(lng)}


def get_place_autocomplete(text: str, client: GeoClient | None = None) -> list[PlacePrediction]:
    """City-level predictions from Places Autocomplete. Any provider problem yields []."""
    client = client or default_client
    if not client.config.has_maps_key():
        logger.error("Google Maps API key not configured")
        return []
    try:
        data = client.autocomplete(text, AUTOCOMPLETE_TYPES)
    except Exception as e:
        logger.error("Error fetching place autocomplete: %s", e, exc_info=True)
        return []
    if data.get("error"):
        logger.error("Google Places API error: status=%s %s", data.get("status_code"), data["error"])
        return []
    if data.get("error_message"):
        logger.error("Places API error message: %s", data["error_message"])
    predictions = data.get("predictions")
    if data.get("status") != "OK" or not isinstance(predictions, list):
        return []
    return [
        {"description": p.get("description") or "", "place_id": p.get("place_id") or ""}
        for p in predictions
        if isinstance(p, dict)
    ]


__all__ = [
    "GeoClient",
    "GeoConfig",
    "PlacePrediction",
    "default_client",
    "geocode_address",
    "get_location_from_ip",
    "get_place_autocomplete",
    "normalize_client_ip",
]
