"""Unit tests for the Ticketmaster proxy."""
import httpx
import pytest

from eventfinder.core.errors import NotFound, UpstreamError, ValidationError
from eventfinder.services.ticketmaster import (
    TicketmasterClient,
    get_event_details,
    get_suggestions,
    search_events,
    segment_id_for,
)
from eventfinder.services.ticketmaster.geohash import encode

SEARCH_BODY = {
    "_embedded": {
        "events": [
            {
                "id": "late",
                "name": "Late Show",
                "url": "https://tm.example/late",
                "dates": {"start": {"localDate": "2026-12-01", "localTime": "21:00:00"}},
                "images": [{"url": "https://img.example/late.jpg"}],
                "_embedded": {"venues": [{"name": "The Forum"}]},
                "classifications": [{"segment": {"name": "Music"}}],
            },
            {
                "id": "early",
                "name": "Early Show",
                "url": "https://tm.example/early",
                "dates": {"start": {"localDate": "2026-11-15"}},
                "images": [],
                "classifications": [{"segment": {"name": "Undefined"}}],
            },
        ]
    }
}

DETAIL_BODY = {
    "id": "vvG1IZ9YbmQm1e",
    "name": "Coldplay",
    "url": "https://tm.example/coldplay",
    "dates": {"start": {"localDate": "2026-10-30", "localTime": "19:30:00"}, "status": {"code": "onsale"}},
    "images": [{"url": "https://img.example/poster.jpg"}],
    "classifications": [
        {
            "segment": {"name": "Music"},
            "genre": {"name": "Rock"},
            "subGenre": {"name": "Pop"},
            "type": {"name": "Undefined"},
            "subType": {"name": "Rock"},
        }
    ],
    "priceRanges": [{"type": "standard", "currency": "USD", "min": 45.0, "max": 250.0}],
    "seatmap": {"staticUrl": "https://img.example/seatmap.png"},
    "_embedded": {
        "venues": [
            {
                "name": "Rose Bowl",
                "address": {"line1": "1001 Rose Bowl Dr"},
                "city": {"name": "Pasadena"},
                "state": {"name": "California", "stateCode": "CA"},
                "postalCode": "91103",
                "country": {"name": "United States Of America"},
                "location": {"latitude": "34.1613", "longitude": "-118.1676"},
                "generalInfo": {"generalRule": "No cameras", "childRule": "Tickets required age 2+"},
                "parkingDetail": "Lot H",
            }
        ],
        "attractions": [
            {
                "name": "Coldplay",
                "url": "https://tm.example/coldplay-artist",
                "externalLinks": {"twitter": [{"url": "https://twitter.com/coldplay"}]},
                "images": [{"url": "https://img.example/coldplay.jpg"}],
            }
        ],
    },
}


def _tm(transport):
    return TicketmasterClient("test-tm-key", transport=transport)


def test_geohash_known_value():
    assert encode(57.64911, 10.40744, 7) == "u4pruyd"


@pytest.mark.parametrize(
    "category, expected",
    [
        ("Music", "KZFzniwnSyZfZ7v7nJ"),
        ("sports", "KZFzniwnSyZfZ7v7nE"),
        ("Arts & Theatre", "KZFzniwnSyZfZ7v7na"),
        ("Film", "KZFzniwnSyZfZ7v7nn"),
        ("Miscellaneous", "KZFzniwnSyZfZ7v7n1"),
        ("All", None),
        ("", None),
        (None, None),
    ],
)
def test_segment_ids(category, expected):
    assert segment_id_for(category) == expected


class TestSearchEvents:
    def test_reshapes_and_sorts(self, make_transport):
        transport = make_transport(lambda req: httpx.Response(200, json=SEARCH_BODY))

        rows = search_events("show", 34.05, -118.24, category="Music", distance=25, client=_tm(transport))

        assert [r["id"] for r in rows] == ["early", "late"]
        assert rows[1] == {
            "id": "late",
            "name": "Late Show",
            "date": "2026-12-01",
            "time": "21:00:00",
            "venue": "The Forum",
            "genre": "Music",
            "image": "https://img.example/late.jpg",
            "url": "https://tm.example/late",
        }
        assert rows[0]["genre"] == ""
        params = transport.requests[0].url.params
        assert params["apikey"] == "test-tm-key"
        assert params["segmentId"] == "KZFzniwnSyZfZ7v7nJ"
        assert params["radius"] == "25"
        assert params["unit"] == "miles"
        assert params["geoPoint"] == encode(34.05, -118.24, 7)

    def test_all_category_has_no_segment(self, make_transport):
        transport = make_transport(lambda req: httpx.Response(200, json={}))

        assert search_events("show", 34.05, -118.24, category="All", client=_tm(transport)) == []
        assert "segmentId" not in transport.requests[0].url.params

    def test_keyword_required(self, make_transport):
        transport = make_transport(lambda req: httpx.Response(200, json={}))

        with pytest.raises(ValidationError):
            search_events("  ", 34.05, -118.24, client=_tm(transport))
        assert transport.requests == []

    def test_upstream_failure(self, make_transport):
        transport = make_transport(lambda req: httpx.Response(503, text="unavailable"))

        with pytest.raises(UpstreamError) as exc:
            search_events("show", 34.05, -118.24, client=_tm(transport))
        assert exc.value.upstream_status == 503

    def test_missing_key_is_upstream_error(self, make_transport):
        transport = make_transport(lambda req: httpx.Response(200, json={}))

        with pytest.raises(UpstreamError):
            search_events("show", 34.05, -118.24, client=TicketmasterClient("", transport=transport))
        assert transport.requests == []


class TestEventDetails:
    def test_reshapes_detail(self, make_transport):
        transport = make_transport(lambda req: httpx.Response(200, json=DETAIL_BODY))

        detail = get_event_details("vvG1IZ9YbmQm1e", client=_tm(transport))

        assert transport.requests[0].url.path.endswith("/events/vvG1IZ9YbmQm1e.json")
        assert detail["status"] == "onsale"
        assert detail["image"] == "https://img.example/poster.jpg"
        assert detail["seatmapUrl"] == "https://img.example/seatmap.png"
        assert detail["genres"] == ["Music", "Rock", "Pop"]
        assert detail["venue"]["city"] == "Pasadena"
        assert detail["venue"]["state"] == "California"
        assert detail["venue"]["generalRule"] == "No cameras"
        assert detail["venue"]["location"] == {"latitude": "34.1613", "longitude": "-118.1676"}
        assert detail["artists"] == [
            {
                "name": "Coldplay",
                "url": "https://tm.example/coldplay-artist",
                "twitter": "https://twitter.com/coldplay",
                "facebook": None,
                "image": "https://img.example/coldplay.jpg",
            }
        ]
        assert detail["priceRanges"] == [{"type": "standard", "currency": "USD", "min": 45.0, "max": 250.0}]

    def test_unknown_event(self, make_transport):
        transport = make_transport(lambda req: httpx.Response(404, json={"errors": []}))

        with pytest.raises(NotFound) as exc:
            get_event_details("missing", client=_tm(transport))
        assert exc.value.message == "Event not found"


def test_suggestions(make_transport):
    body = {"_embedded": {"attractions": [{"name": "Ed Sheeran"}, {"name": "Ed Sheeran Tribute"}, {"id": "x"}]}}
    transport = make_transport(lambda req: httpx.Response(200, json=body))

    assert get_suggestions("ed", client=_tm(transport)) == {"suggestions": ["Ed Sheeran", "Ed Sheeran Tribute"]}
    assert transport.requests[0].url.path.endswith("/suggest.json")
