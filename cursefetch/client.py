"""
client.py – AddonClient, the single entry point most callers need.

Wraps one httpx.Client and one ClientSettings and forwards to the service
modules. Every method is synchronous and blocking.
"""

from pathlib import Path
from typing import Iterable, List, Optional

import httpx

from cursefetch.config import ClientSettings
from cursefetch.models.addon import AddonFile, AddonRecord, FeaturedListing, GameRecord
from cursefetch.services import (
    addon_service,
    catalog_service,
    download_service,
    file_selector,
    http_service,
)
from cursefetch.services.download_service import ProgressCallback


class AddonClient:
    """
    Client for the add-on distribution API.

    Use as a context manager, or call close() when done. A caller-supplied
    *http* client is used as is and left open.

    With ``settings.cache_game_id`` the game identifier is resolved once per
    instance; a catalogue change on the server is then not seen until
    invalidate_game_id() is called.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        http: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self._owns_http = http is None
        self._http = http if http is not None else http_service.build_client(self.settings)
        self._game_id: Optional[int] = None

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "AddonClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── Catalogue ─────────────────────────────────────────────────────────────

    def fetch_catalog(self) -> List[GameRecord]:
        return catalog_service.fetch_catalog(self._http, self.settings)

    def resolve_game_id(self, name: Optional[str] = None) -> int:
        """
        Identifier of *name*, or of the configured game when omitted. Only the
        configured game's identifier is ever cached.
        """
        if name is not None and name != self.settings.game_name:
            return catalog_service.resolve_game_id(self._http, name, self.settings)
        if self._game_id is not None:
            return self._game_id
        game_id = catalog_service.resolve_game_id(self._http, settings=self.settings)
        if self.settings.cache_game_id:
            self._game_id = game_id
        return game_id

    def invalidate_game_id(self) -> None:
        self._game_id = None

    # ── Queries ───────────────────────────────────────────────────────────────

    def get_featured_addons(self) -> FeaturedListing:
        return addon_service.get_featured_addons(
            self._http, self.settings, game_id=self.resolve_game_id()
        )

    def search_addons(self, search_term: str, game_version: str = "") -> List[AddonRecord]:
        return addon_service.search_addons(
            self._http,
            search_term,
            game_version,
            self.settings,
            game_id=self.resolve_game_id(),
        )

    # ── Files ─────────────────────────────────────────────────────────────────

    @staticmethod
    def select_file(files: Iterable[AddonFile], target_version: str) -> Optional[AddonFile]:
        return file_selector.select_file(files, target_version)

    def download_addon(
        self,
        addon: AddonRecord,
        target_version: str,
        target_folder: str = "",
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Path:
        return download_service.download_addon(
            self._http,
            addon,
            target_version,
            target_folder,
            self.settings,
            progress_callback=progress_callback,
        )
