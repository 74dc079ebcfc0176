"""
services/catalog_service.py – Game catalogue fetch and game-ID resolution.
"""

import logging
from typing import List, Optional

import httpx

from cursefetch.config import CATALOG_PATH, DEFAULT_SETTINGS, ClientSettings
from cursefetch.models.addon import GameRecord, decode_games
from cursefetch.services import http_service
from cursefetch.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

# ── Public API ───────────────────────────────────────────────────────────────


def fetch_catalog(
    http: httpx.Client, settings: ClientSettings = DEFAULT_SETTINGS
) -> List[GameRecord]:
    """
    Download the full list of games the service knows about.

    Returns
    -------
    List[GameRecord]
        In server order. Empty when the body is malformed and
        ``settings.strict_decoding`` is off.

    Raises
    ------
    NetworkError
        On transport failure or a non-2xx status.
    DecodeError
        On a malformed body, only with ``settings.strict_decoding``.
    """
    response = http_service.send(http, "GET", settings.url_for(CATALOG_PATH))
    games = http_service.decode_list(response, decode_games, strict=settings.strict_decoding)
    logger.debug("Catalogue holds %d games", len(games))
    return games


def find_game(games: List[GameRecord], target_name: str) -> Optional[GameRecord]:
    """First game whose name equals *target_name* exactly, or None."""
    for game in games:
        if game.name == target_name:
            return game
    return None


def resolve_game_id(
    http: httpx.Client,
    target_name: Optional[str] = None,
    settings: ClientSettings = DEFAULT_SETTINGS,
) -> int:
    """
    Look up the numeric identifier of *target_name* (default: the configured
    game name). The catalogue is fetched afresh on every call.

    Raises
    ------
    NotFoundError
        When no catalogue entry carries that exact, case-sensitive name.
    NetworkError / DecodeError
        Propagated from fetch_catalog().
    """
    name = settings.game_name if target_name is None else target_name
    game = find_game(fetch_catalog(http, settings), name)
    if game is None:
        raise NotFoundError(name)
    return game.identifier
