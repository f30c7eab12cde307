"""Favorites: list (oldest first), upsert by event id, delete by event id."""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

from eventfinder.core.errors import NotFound
from eventfinder.db.session import get_db
from eventfinder.services.favorite_service import add_favorite, list_favorites, remove_favorite

router = APIRouter()
logger = logging.getLogger(__name__)


class FavoriteEventPayload(BaseModel):
    id: str = Field(..., min_length=1, max_length=128, description="Ticketmaster event id")
    name: str = ""
    date: str = ""
    time: str = ""
    venue: str = ""
    genre: str = Field("", description="Segment name, used for the category icon")
    image: str = ""
    url: str = ""

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("id must not be blank")
        return v


@router.get("")
def get_favorites(db: Session = Depends(get_db)) -> list[dict[str, Any]]:
    """All favorites ordered by createdAt ascending (oldest first)."""
    return list_favorites(db)


@router.post("")
def post_favorite(body: FavoriteEventPayload, response: Response, db: Session = Depends(get_db)) -> dict[str, Any]:
    """
    Add an event to favorites. Re-adding an existing id overwrites the display fields and keeps createdAt.
    201 when created, 200 when updated.
    """
    favorite, created = add_favorite(db, body.model_dump())
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return favorite


@router.delete("/{event_id}")
def delete_favorite(event_id: str, db: Session = Depends(get_db)) -> dict[str, Any]:
    """Remove an event from favorites."""
    removed = remove_favorite(db, event_id)
    if removed is None:
        raise NotFound("Favorite not found")
    return {"message": "Favorite removed", "favorite": removed}
