"""
Favorites: one row per Ticketmaster event id, upserted in a single statement.

The list is returned oldest first (created_at ascending). Clients re-sort newest first.
"""
import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from eventfinder.models.favorite import Favorite

logger = logging.getLogger(__name__)

DISPLAY_FIELDS = ("name", "date", "time", "venue", "genre", "image", "url")

_INSERT_BY_DIALECT = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; stored values are always UTC."""
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value.astimezone(timezone.utc)


def _to_favorite_event(row: Any) -> dict[str, Any]:
    """Favorite row (ORM object or RETURNING row) -> API shape."""
    created_at = _as_utc(row.created_at) or datetime.now(timezone.utc)
    return {
        "id": row.event_id,
        "name": row.name or "",
        "date": row.date or "",
        "time": row.time or "",
        "venue": row.venue or "",
        "genre": row.genre or "",
        "image": row.image or "",
        "url": row.url or "",
        "createdAt": created_at.isoformat(),
    }


def _dialect_insert(db: Session):
    dialect = db.get_bind().dialect.name
    try:
        return _INSERT_BY_DIALECT[dialect]
    except KeyError:
        raise RuntimeError(f"Favorites upsert not supported for dialect: {dialect}") from None


def list_favorites(db: Session) -> list[dict[str, Any]]:
    """All favorites, oldest first."""
    rows = db.query(Favorite).order_by(Favorite.created_at.asc(), Favorite.id.asc()).all()
    return [_to_favorite_event(r) for r in rows]


def add_favorite(db: Session, payload: dict[str, Any]) -> tuple[dict[str, Any], bool]:
    """
    Insert or update the favorite for payload["id"] in one INSERT ... ON CONFLICT statement.
    Display fields are overwritten on conflict; created_at is left untouched.
    Returns (favorite, created) where created is False when an existing row was updated.
    """
    event_id = str(payload["id"])
    now = datetime.now(timezone.utc)
    values = {field: str(payload.get(field) or "") for field in DISPLAY_FIELDS}
    insert = _dialect_insert(db)
    stmt = insert(Favorite.__table__).values(event_id=event_id, created_at=now, updated_at=now, **values)
    stmt = stmt.on_conflict_do_update(
        index_elements=["event_id"],
        set_={
            **{field: stmt.excluded[field] for field in DISPLAY_FIELDS},
            "updated_at": stmt.excluded.updated_at,
        },
    ).returning(*Favorite.__table__.c)
    try:
        row = db.execute(stmt).one()
        favorite = _to_favorite_event(row)
        created = _as_utc(row.created_at) == now
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Favorite %s event_id=%s", "added" if created else "updated", event_id)
    return favorite, created


def remove_favorite(db: Session, event_id: str) -> dict[str, Any] | None:
    """Delete the favorite for event_id. Returns the removed favorite, or None if there was none."""
    stmt = delete(Favorite.__table__).where(Favorite.event_id == event_id).returning(*Favorite.__table__.c)
    try:
        row = db.execute(stmt).first()
        db.commit()
    except Exception:
        db.rollback()
        raise
    if row is None:
        return None
    logger.info("Favorite removed event_id=%s", event_id)
    return _to_favorite_event(row)
