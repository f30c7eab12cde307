from eventfinder.client.api import EventFinderClient
from eventfinder.client.debounce import Debouncer
from eventfinder.client.favorites import EventItem, FavoriteSource, build_favorite_payload
from eventfinder.client.session import EventFinderSession
from eventfinder.client.state import StateHolder

__all__ = [
    "Debouncer",
    "EventFinderClient",
    "EventFinderSession",
    "EventItem",
    "FavoriteSource",
    "StateHolder",
    "build_favorite_payload",
]
