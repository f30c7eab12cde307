"""
Favorite payload construction.

Search rows and event details have different shapes; each gets a thin adapter to
FavoriteSource and build_favorite_payload is the only place the POST body is built.
"""
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class EventItem:
    """Search result row as shown in the list (category drives the icon)."""

    id: str
    name: str
    date: str
    time: str
    venue: str
    category: str
    image_url: str
    url: str = ""
    is_favorite: bool = False

    @classmethod
    def from_summary(cls, row: dict[str, Any], *, is_favorite: bool = False) -> "EventItem":
        return cls(
            id=row.get("id") or "",
            name=row.get("name") or "",
            date=row.get("date") or "",
            time=row.get("time") or "",
            venue=row.get("venue") or "",
            category=(row.get("genre") or "").strip() or "unknown",
            image_url=row.get("image") or "",
            url=row.get("url") or "",
            is_favorite=is_favorite,
        )


@dataclass(frozen=True)
class FavoriteSource:
    """Normalized event record a favorite is built from."""

    id: str
    name: str
    date: str
    time: str
    venue: str
    genre: str
    image: str
    url: str


def source_from_item(item: EventItem) -> FavoriteSource:
    return FavoriteSource(
        id=item.id,
        name=item.name,
        date=item.date,
        time=item.time,
        venue=item.venue,
        genre=item.category,
        image=item.image_url,
        url=item.url,
    )


def source_from_detail(detail: dict[str, Any]) -> FavoriteSource:
    """Event detail -> FavoriteSource. Uses the event poster image, not the seat map."""
    genres = detail.get("genres") or []
    return FavoriteSource(
        id=detail.get("id") or "",
        name=detail.get("name") or "",
        date=detail.get("date") or "",
        time=detail.get("time") or "",
        venue=(detail.get("venue") or {}).get("name") or "",
        genre=genres[0] if genres else "",
        image=detail.get("image") or "",
        url=detail.get("url") or "",
    )


def build_favorite_payload(source: FavoriteSource) -> dict[str, str]:
    """POST /api/favorites body."""
    return asdict(source)
