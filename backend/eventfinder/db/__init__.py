from eventfinder.db.base import Base
from eventfinder.db.session import get_db, engine, SessionLocal
from eventfinder.db.tables import ALL_TABLE_NAMES

__all__ = ["get_db", "engine", "SessionLocal", "Base", "ALL_TABLE_NAMES"]
