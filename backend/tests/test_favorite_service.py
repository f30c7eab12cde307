"""Unit tests for the favorites store."""
from eventfinder.models.favorite import Favorite
from eventfinder.services.favorite_service import add_favorite, list_favorites, remove_favorite


def _payload(event_id, **overrides):
    payload = {
        "id": event_id,
        "name": f"Event {event_id}",
        "date": "2026-11-01",
        "time": "19:30:00",
        "venue": "Hollywood Bowl",
        "genre": "Music",
        "image": f"https://img.example/{event_id}.jpg",
        "url": f"https://ticketmaster.example/{event_id}",
    }
    payload.update(overrides)
    return payload


class TestAddFavorite:
    def test_first_add_creates(self, db):
        favorite, created = add_favorite(db, _payload("A"))

        assert created is True
        assert favorite["id"] == "A"
        assert favorite["name"] == "Event A"
        assert favorite["venue"] == "Hollywood Bowl"
        assert favorite["createdAt"]

    def test_re_add_updates_fields_and_keeps_created_at(self, db):
        first, created_first = add_favorite(db, _payload("A"))
        second, created_second = add_favorite(db, _payload("A", name="Renamed", venue="Greek Theatre"))

        assert created_first is True
        assert created_second is False
        assert second["name"] == "Renamed"
        assert second["venue"] == "Greek Theatre"
        assert second["createdAt"] == first["createdAt"]

    def test_re_add_never_duplicates(self, db):
        add_favorite(db, _payload("A"))
        add_favorite(db, _payload("A"))
        add_favorite(db, _payload("A"))

        assert db.query(Favorite).filter(Favorite.event_id == "A").count() == 1

    def test_missing_display_fields_default_to_empty(self, db):
        favorite, _ = add_favorite(db, {"id": "B", "name": "Only a name"})

        assert favorite["venue"] == ""
        assert favorite["image"] == ""
        assert favorite["url"] == ""


class TestListFavorites:
    def test_oldest_first_and_re_add_keeps_position(self, db):
        a_first, _ = add_favorite(db, _payload("A"))
        add_favorite(db, _payload("B"))
        add_favorite(db, _payload("A", name="A again"))

        favorites = list_favorites(db)

        assert [f["id"] for f in favorites] == ["A", "B"]
        assert favorites[0]["name"] == "A again"
        assert favorites[0]["createdAt"] == a_first["createdAt"]

    def test_empty(self, db):
        assert list_favorites(db) == []


class TestRemoveFavorite:
    def test_remove_existing_returns_record(self, db):
        add_favorite(db, _payload("A"))

        removed = remove_favorite(db, "A")

        assert removed is not None
        assert removed["id"] == "A"
        assert list_favorites(db) == []

    def test_remove_missing_returns_none(self, db):
        assert remove_favorite(db, "does-not-exist") is None

    def test_remove_only_touches_one_record(self, db):
        add_favorite(db, _payload("A"))
        add_favorite(db, _payload("B"))

        remove_favorite(db, "A")

        assert [f["id"] for f in list_favorites(db)] == ["B"]
