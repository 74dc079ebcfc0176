from __future__ import annotations

import json

import httpx
import pytest

from cursefetch.config import ClientSettings
from cursefetch.services.addon_service import get_featured_addons, search_addons
from cursefetch.services.exceptions import DecodeError, NetworkError, NotFoundError

from conftest import API, addon_json

FEATURED = {
    "Featured": [addon_json(1, "DBM"), addon_json(2, "Details")],
    "Popular": [addon_json(3, "WeakAuras"), addon_json(4, "Bagnon"), addon_json(5, "Plater")],
    "RecentlyUpdated": [addon_json(6, "ElvUI")],
}

SEARCH_RESULTS = [
    addon_json(3, "WeakAuras", [("WeakAuras-5.0.zip", ["10.0.2"]), ("WeakAuras-4.9.zip", ["9.2.7"])]),
    addon_json(9, "WeakAurasCompanion"),
]


def test_featured_request_body(server, http, settings):
    server.json("POST", f"{API}/addon/featured", FEATURED)

    get_featured_addons(http, settings)

    (request,) = server.requests_to(f"{API}/addon/featured")
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "GameId": 5927,
        "addonIds": [],
        "featuredCount": 6,
        "popularCount": 14,
        "updatedCount": 14,
    }


def test_featured_listing_decoded(server, http, settings):
    server.json("POST", f"{API}/addon/featured", FEATURED)

    listing = get_featured_addons(http, settings)

    assert [a.name for a in listing.featured] == ["DBM", "Details"]
    assert [a.name for a in listing.popular] == ["WeakAuras", "Bagnon", "Plater"]
    assert [a.identifier for a in listing.recently_updated] == [6]


def test_featured_counts_follow_settings(server, http):
    server.json("POST", f"{API}/addon/featured", FEATURED)

    get_featured_addons(http, ClientSettings(featured_count=2, popular_count=3, updated_count=4))

    body = json.loads(server.requests_to(f"{API}/addon/featured")[0].content)
    assert (body["featuredCount"], body["popularCount"], body["updatedCount"]) == (2, 3, 4)


def test_malformed_featured_is_always_fatal(server, http, settings):
    server.raw("POST", f"{API}/addon/featured", b"{truncated")

    with pytest.raises(DecodeError):
        get_featured_addons(http, settings)


def test_featured_of_wrong_shape_is_decode_error(server, http, settings):
    server.json("POST", f"{API}/addon/featured", [addon_json(1, "DBM")])

    with pytest.raises(DecodeError):
        get_featured_addons(http, settings)


def test_featured_transport_failure(server, http, settings):
    server.fail("POST", f"{API}/addon/featured", httpx.ReadTimeout)

    with pytest.raises(NetworkError):
        get_featured_addons(http, settings)


def test_unknown_game_stops_before_query(server, http):
    server.json("POST", f"{API}/addon/featured", FEATURED)

    with pytest.raises(NotFoundError):
        get_featured_addons(http, ClientSettings(game_name="Minecraft"))

    assert server.requests_to(f"{API}/addon/featured") == []


def test_search_omits_empty_game_version(server, http, settings):
    server.json("GET", f"{API}/addon/search", SEARCH_RESULTS)

    search_addons(http, "weak auras", "", settings)

    params = server.requests_to(f"{API}/addon/search")[0].url.params
    assert params["gameId"] == "5927"
    assert params["searchFilter"] == "weak auras"
    assert "gameVersion" not in params


def test_search_sends_game_version(server, http, settings):
    server.json("GET", f"{API}/addon/search", SEARCH_RESULTS)

    search_addons(http, "weakauras", "1.2.3", settings)

    params = server.requests_to(f"{API}/addon/search")[0].url.params
    assert params["gameVersion"] == "1.2.3"


def test_search_term_is_passed_through(server, http, settings):
    server.json("GET", f"{API}/addon/search", [])

    search_addons(http, "a&b=c d", settings=settings)

    assert server.requests_to(f"{API}/addon/search")[0].url.params["searchFilter"] == "a&b=c d"


def test_search_results_decoded_in_order(server, http, settings):
    server.json("GET", f"{API}/addon/search", SEARCH_RESULTS)

    results = search_addons(http, "weakauras", settings=settings)

    assert [a.name for a in results] == ["WeakAuras", "WeakAurasCompanion"]
    assert [f.file_name for f in results[0].files] == ["WeakAuras-5.0.zip", "WeakAuras-4.9.zip"]
    assert results[1].files == ()


def test_search_is_repeatable(server, http, settings):
    server.json("GET", f"{API}/addon/search", SEARCH_RESULTS)

    first = search_addons(http, "weakauras", "10.0.2", settings)
    second = search_addons(http, "weakauras", "10.0.2", settings)

    assert first == second


def test_search_with_known_game_id_skips_catalogue(server, http, settings):
    server.json("GET", f"{API}/addon/search", [])

    search_addons(http, "dbm", settings=settings, game_id=5927)

    assert server.requests_to(f"{API}/game") == []


def test_malformed_search_is_empty_by_default(server, http, settings):
    server.raw("GET", f"{API}/addon/search", b"Service Unavailable")

    assert search_addons(http, "dbm", settings=settings) == []


def test_malformed_search_raises_when_strict(server, http, strict_settings):
    server.json("GET", f"{API}/addon/search", {"not": "a list"})

    with pytest.raises(DecodeError):
        search_addons(http, "dbm", settings=strict_settings)


def test_search_error_status(server, http, settings):
    server.json("GET", f"{API}/addon/search", {"error": "boom"}, status=500)

    with pytest.raises(NetworkError) as excinfo:
        search_addons(http, "dbm", settings=settings)

    assert excinfo.value.status_code == 500
