"""
services/exceptions.py – Structured custom exception hierarchy for cursefetch.

All service-level errors derive from CurseFetchError so callers can catch
broadly or specifically depending on context.
"""

from typing import Optional


class CurseFetchError(Exception):
    """Base class for all cursefetch exceptions."""


class NetworkError(CurseFetchError):
    """
    Raised when the server cannot be reached or answers with a non-2xx status.

    Attributes
    ----------
    url         : The URL that was requested.
    status_code : HTTP status of the response, or None on transport failure.
    """

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DecodeError(CurseFetchError):
    """Raised when a response body is not the JSON shape the API documents."""

    def __init__(self, message: str, url: str) -> None:
        self.url = url
        super().__init__(message)


class NotFoundError(CurseFetchError):
    """Raised when no catalogue entry carries the requested game name."""

    def __init__(self, game_name: str) -> None:
        self.game_name = game_name
        super().__init__(f"No game named '{game_name}' found in the catalogue.")


class VersionNotFoundError(CurseFetchError):
    """
    Raised when none of an add-on's files lists the requested game version.

    Attributes
    ----------
    addon_name     : Name of the add-on that was searched.
    target_version : The game version nothing matched.
    """

    def __init__(self, addon_name: str, target_version: str) -> None:
        self.addon_name = addon_name
        self.target_version = target_version
        super().__init__(
            f"No file of '{addon_name}' is compatible with game version "
            f"'{target_version}'."
        )


class FilesystemError(CurseFetchError):
    """Raised when the download directory or file cannot be created or written."""

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)
