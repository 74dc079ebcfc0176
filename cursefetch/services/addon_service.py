"""
services/addon_service.py – Featured listing and free-text search queries.

Both queries first resolve the configured game's identifier through the
catalogue unless the caller already holds it.
"""

import logging
from typing import List, Optional

import httpx

from cursefetch.config import DEFAULT_SETTINGS, FEATURED_PATH, SEARCH_PATH, ClientSettings
from cursefetch.models.addon import AddonRecord, FeaturedListing, decode_addons
from cursefetch.services import http_service
from cursefetch.services.catalog_service import resolve_game_id

logger = logging.getLogger(__name__)

# ── Public API ───────────────────────────────────────────────────────────────


def featured_payload(game_id: int, settings: ClientSettings = DEFAULT_SETTINGS) -> dict:
    """Request body of the featured-listing endpoint."""
    return {
        "GameId": game_id,
        "addonIds": [],
        "featuredCount": settings.featured_count,
        "popularCount": settings.popular_count,
        "updatedCount": settings.updated_count,
    }


def search_params(game_id: int, search_term: str, game_version: str = "") -> dict:
    """
    Query string of the search endpoint. ``gameVersion`` is only present when
    *game_version* is non-empty.
    """
    params = {"gameId": str(game_id), "searchFilter": search_term}
    if game_version:
        params["gameVersion"] = game_version
    return params


def get_featured_addons(
    http: httpx.Client,
    settings: ClientSettings = DEFAULT_SETTINGS,
    *,
    game_id: Optional[int] = None,
) -> FeaturedListing:
    """
    Fetch the featured / popular / recently updated add-ons of the game.

    Raises
    ------
    NotFoundError
        When the game is missing from the catalogue.
    NetworkError
        On transport failure or a non-2xx status.
    DecodeError
        On a malformed body, regardless of ``settings.strict_decoding``.
    """
    if game_id is None:
        game_id = resolve_game_id(http, settings=settings)
    response = http_service.send(
        http,
        "POST",
        settings.url_for(FEATURED_PATH),
        json_body=featured_payload(game_id, settings),
    )
    return http_service.decode(response, FeaturedListing.from_json)


def search_addons(
    http: httpx.Client,
    search_term: str,
    game_version: str = "",
    settings: ClientSettings = DEFAULT_SETTINGS,
    *,
    game_id: Optional[int] = None,
) -> List[AddonRecord]:
    """
    Search the game's add-ons by free text, optionally restricted to one game
    version.

    Returns
    -------
    List[AddonRecord]
        In server order. Empty when the body is malformed and
        ``settings.strict_decoding`` is off.
    """
    if game_id is None:
        game_id = resolve_game_id(http, settings=settings)
    response = http_service.send(
        http,
        "GET",
        settings.url_for(SEARCH_PATH),
        params=search_params(game_id, search_term, game_version),
    )
    addons = http_service.decode_list(response, decode_addons, strict=settings.strict_decoding)
    logger.debug("Search for %r returned %d add-ons", search_term, len(addons))
    return addons
