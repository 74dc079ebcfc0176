"""
config.py – Endpoint defaults and the per-client settings object.

Module-level constants hold the defaults; ClientSettings bundles them so a
caller can override any of them for one AddonClient without touching globals.
"""

from dataclasses import dataclass

from cursefetch import __version__

# ── Configuration ────────────────────────────────────────────────────────────

# Root of the add-on distribution API. Paths below are joined onto it.
BASE_URL: str = "https://addons-ecs.forgesvc.net/api/v2/"

CATALOG_PATH: str = "game"
FEATURED_PATH: str = "addon/featured"
SEARCH_PATH: str = "addon/search"

# Game whose identifier every query resolves first.
GAME_NAME: str = "World of Warcraft"

# Used by download_addon when no target folder is given.
DEFAULT_DOWNLOAD_DIR: str = "tmp"

# HTTP timeout (seconds)
HTTP_TIMEOUT: float = 30.0

# Counts sent in the featured-listing request body.
FEATURED_COUNT: int = 6
POPULAR_COUNT: int = 14
UPDATED_COUNT: int = 14

USER_AGENT: str = f"cursefetch/{__version__}"


@dataclass(frozen=True)
class ClientSettings:
    """
    Immutable bundle of everything an AddonClient can be tuned with.

    Attributes
    ----------
    base_url             : API root, must end with a slash.
    game_name            : Catalogue name resolved to the game identifier.
    default_download_dir : Directory used when download_addon gets no folder.
    timeout              : Seconds before any single request is abandoned.
    featured_count       : "featuredCount" of the featured request body.
    popular_count        : "popularCount" of the featured request body.
    updated_count        : "updatedCount" of the featured request body.
    strict_decoding      : Raise DecodeError on malformed catalogue / search
                           bodies instead of returning an empty list.
    cache_game_id        : Remember the resolved game identifier for the
                           lifetime of the client.
    user_agent           : Value of the User-Agent header.
    """

    base_url: str = BASE_URL
    game_name: str = GAME_NAME
    default_download_dir: str = DEFAULT_DOWNLOAD_DIR
    timeout: float = HTTP_TIMEOUT
    featured_count: int = FEATURED_COUNT
    popular_count: int = POPULAR_COUNT
    updated_count: int = UPDATED_COUNT
    strict_decoding: bool = False
    cache_game_id: bool = False
    user_agent: str = USER_AGENT

    def url_for(self, path: str) -> str:
        """Join *path* onto the base URL, tolerating a missing trailing slash."""
        if not self.base_url.endswith("/"):
            return f"{self.base_url}/{path}"
        return self.base_url + path


DEFAULT_SETTINGS = ClientSettings()
