"""
Geo proxy: IP location, address geocoding, city autocomplete.

Mounted under /api/geo. Lookups are best-effort: no result -> 404, never an upstream 5xx.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from eventfinder.core.errors import NotFound, ValidationError
from eventfinder.services import geo
from eventfinder.services.geo import GeoClient

router = APIRouter()
logger = logging.getLogger(__name__)


def get_geo_client() -> GeoClient:
    return geo.default_client


def _client_ip(request: Request) -> str | None:
    """Forwarded-for chain when behind a proxy, else the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded
    return request.client.host if request.client else None


def _required(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(message)
    return value.strip()


@router.get("/ip-location")
def ip_location(request: Request, client: GeoClient = Depends(get_geo_client)) -> dict[str, Any]:
    """Approximate location of the caller from its IP address."""
    location = geo.get_location_from_ip(_client_ip(request), client=client)
    if not location:
        raise NotFound("Could not determine location")
    return location


@router.get("/geocode")
def geocode(
    address: str | None = Query(None),
    client: GeoClient = Depends(get_geo_client),
) -> dict[str, Any]:
    """Coordinates for a free-text address (first candidate only)."""
    address = _required(address, "Address is required")
    location = geo.geocode_address(address, client=client)
    if not location:
        raise NotFound("Could not geocode address")
    return location


@router.get("/autocomplete")
def autocomplete(
    text: str | None = Query(None, alias="input"),
    client: GeoClient = Depends(get_geo_client),
) -> dict[str, Any]:
    """City-level predictions for a partial query. Provider errors yield an empty list."""
    text = _required(text, "Input is required")
    return {"predictions": geo.get_place_autocomplete(text, client=client)}
