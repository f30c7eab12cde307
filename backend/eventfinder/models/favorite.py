"""Favorited event: denormalized display fields supplied by the client, one row per external event id."""
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from eventfinder.db.base import Base


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(String(128), nullable=False, unique=True, index=True)  # Ticketmaster event id
    name = Column(String(512), nullable=False, server_default="")
    date = Column(String(32), nullable=False, server_default="")
    time = Column(String(32), nullable=False, server_default="")
    venue = Column(String(512), nullable=False, server_default="")
    genre = Column(String(128), nullable=False, server_default="")
    image = Column(String(2048), nullable=False, server_default="")
    url = Column(String(2048), nullable=False, server_default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)  # never updated
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
