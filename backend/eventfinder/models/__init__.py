from eventfinder.models.favorite import Favorite

__all__ = [
    "Favorite",
]
