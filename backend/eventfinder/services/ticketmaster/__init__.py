"""Ticketmaster: event search, detail and suggestions. Validation and reshaping here; client below just sends the request."""
import logging
from typing import Any

from eventfinder.core.constants import (
    CATEGORY_SEGMENT_IDS,
    DEFAULT_CATEGORY,
    DEFAULT_DISTANCE_MILES,
    GEOHASH_PRECISION,
    SEARCH_RESULT_SIZE,
)
from eventfinder.core.errors import NotFound, ValidationError
from eventfinder.services.ticketmaster import geohash
from eventfinder.services.ticketmaster.client import TicketmasterClient

logger = logging.getLogger(__name__)

default_client = TicketmasterClient()

_UNDEFINED = "undefined"


def _first(items: Any) -> dict[str, Any]:
    """First dict of a list, or {}."""
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


def _first_image(obj: dict[str, Any]) -> str:
    return _first(obj.get("images")).get("url") or ""


def _named(value: Any) -> str:
    """Classification part ({"name": "Rock"}) -> name, blank when missing or "Undefined"."""
    name = (value or {}).get("name") if isinstance(value, dict) else None
    if not name or name.strip().lower() == _UNDEFINED:
        return ""
    return name.strip()


def segment_id_for(category: str | None) -> str | None:
    """Category label -> Ticketmaster segment id. "All" or unknown -> None (no filter)."""
    return CATEGORY_SEGMENT_IDS.get((category or "").strip().lower())


def _to_event_summary(ev: dict[str, Any]) -> dict[str, str]:
    start = ((ev.get("dates") or {}).get("start")) or {}
    venue = _first((ev.get("_embedded") or {}).get("venues"))
    classification = _first(ev.get("classifications"))
    return {
        "id": ev.get("id") or "",
        "name": ev.get("name") or "",
        "date": start.get("localDate") or "",
        "time": start.get("localTime") or "",
        "venue": venue.get("name") or "",
        "genre": _named(classification.get("segment")),
        "image": _first_image(ev),
        "url": ev.get("url") or "",
    }


def search_events(
    keyword: str,
    lat: float,
    lng: float,
    *,
    category: str | None = DEFAULT_CATEGORY,
    distance: int = DEFAULT_DISTANCE_MILES,
    client: TicketmasterClient | None = None,
) -> list[dict[str, str]]:
    """Keyword search around (lat, lng) within distance miles; rows sorted by date, then time."""
    client = client or default_client
    keyword = (keyword or "").strip()
    if not keyword:
        raise ValidationError("Keyword is required")
    if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lng <= 180.0):
        raise ValidationError("lat/lng out of range")
    if distance < 0:
        raise ValidationError("distance must be non-negative")
    params: dict[str, Any] = {
        "keyword": keyword,
        "geoPoint": geohash.encode(lat, lng, GEOHASH_PRECISION),
        "radius": str(distance),
        "unit": "miles",
        "size": SEARCH_RESULT_SIZE,
        "sort": "date,asc",
    }
    segment_id = segment_id_for(category)
    if segment_id:
        params["segmentId"] = segment_id
    data = client.search_events(params)
    events = (data.get("_embedded") or {}).get("events") or []
    rows = [_to_event_summary(ev) for ev in events if isinstance(ev, dict)]
    rows.sort(key=lambda r: (r["date"], r["time"]))
    logger.debug("Ticketmaster search keyword=%r segment=%s -> %d events", keyword, segment_id, len(rows))
    return rows


def _genres(classification: dict[str, Any]) -> list[str]:
    out: list[str] = []
    for key in ("segment", "genre", "subGenre", "type", "subType"):
        name = _named(classification.get(key))
        if name and name not in out:
            out.append(name)
    return out


def _first_link(links: dict[str, Any], key: str) -> str | None:
    return _first(links.get(key)).get("url") or None


def _to_artist(attraction: dict[str, Any]) -> dict[str, Any]:
    links = attraction.get("externalLinks") or {}
    return {
        "name": attraction.get("name") or "",
        "url": attraction.get("url"),
        "twitter": _first_link(links, "twitter"),
        "facebook": _first_link(links, "facebook"),
        "image": _first_image(attraction) or None,
    }


def _to_venue_detail(venue: dict[str, Any]) -> dict[str, Any] | None:
    if not venue:
        return None
    location = venue.get("location") or {}
    general = venue.get("generalInfo") or {}
    state = venue.get("state") or {}
    return {
        "name": venue.get("name") or "",
        "address": (venue.get("address") or {}).get("line1") or "",
        "city": (venue.get("city") or {}).get("name") or "",
        "state": state.get("name") or state.get("stateCode") or "",
        "postalCode": venue.get("postalCode") or "",
        "country": (venue.get("country") or {}).get("name") or "",
        "location": {"latitude": location.get("latitude"), "longitude": location.get("longitude")} if location else None,
        "url": venue.get("url"),
        "image": _first_image(venue) or None,
        "generalRule": general.get("generalRule"),
        "childRule": general.get("childRule"),
        "parkingDetail": venue.get("parkingDetail"),
    }


def _to_event_detail(ev: dict[str, Any]) -> dict[str, Any]:
    dates = ev.get("dates") or {}
    start = dates.get("start") or {}
    embedded = ev.get("_embedded") or {}
    return {
        "id": ev.get("id") or "",
        "name": ev.get("name") or "",
        "url": ev.get("url") or "",
        "date": start.get("localDate") or "",
        "time": start.get("localTime") or "",
        "status": (dates.get("status") or {}).get("code") or "",
        "image": _first_image(ev),
        "venue": _to_venue_detail(_first(embedded.get("venues"))),
        "genres": _genres(_first(ev.get("classifications"))),
        "artists": [_to_artist(a) for a in embedded.get("attractions") or [] if isinstance(a, dict)],
        "priceRanges": [
            {"type": p.get("type"), "currency": p.get("currency"), "min": p.get("min"), "max": p.get("max")}
            for p in ev.get("priceRanges") or []
            if isinstance(p, dict)
        ],
        "seatmapUrl": (ev.get("seatmap") or {}).get("staticUrl"),
    }


def get_event_details(event_id: str, client: TicketmasterClient | None = None) -> dict[str, Any]:
    client = client or default_client
    event_id = (event_id or "").strip()
    if not event_id:
        raise ValidationError("Event id is required")
    try:
        data = client.get_event(event_id)
    except NotFound:
        raise NotFound("Event not found") from None
    if not data.get("id"):
        raise NotFound("Event not found")
    return _to_event_detail(data)


def get_suggestions(keyword: str, client: TicketmasterClient | None = None) -> dict[str, list[str]]:
    """Attraction names matching keyword, for search-box autocomplete."""
    client = client or default_client
    keyword = (keyword or "").strip()
    if not keyword:
        raise ValidationError("Keyword is required")
    data = client.suggest(keyword)
    attractions = (data.get("_embedded") or {}).get("attractions") or []
    names = [a["name"] for a in attractions if isinstance(a, dict) and a.get("name")]
    return {"suggestions": names}


__all__ = [
    "TicketmasterClient",
    "default_client",
    "get_event_details",
    "get_suggestions",
    "search_events",
    "segment_id_for",
]
