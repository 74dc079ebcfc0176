"""
cursefetch – client for the CurseForge add-on API.

Resolves a game's identifier, lists featured add-ons or searches them, and
downloads the build of an add-on that matches a game version.
"""

__version__ = "0.1.0"

from cursefetch.client import AddonClient
from cursefetch.config import ClientSettings
from cursefetch.models.addon import AddonFile, AddonRecord, FeaturedListing, GameRecord
from cursefetch.services.exceptions import (
    CurseFetchError,
    DecodeError,
    FilesystemError,
    NetworkError,
    NotFoundError,
    VersionNotFoundError,
)

__all__ = [
    "AddonClient",
    "ClientSettings",
    "AddonFile",
    "AddonRecord",
    "FeaturedListing",
    "GameRecord",
    "CurseFetchError",
    "DecodeError",
    "FilesystemError",
    "NetworkError",
    "NotFoundError",
    "VersionNotFoundError",
]
