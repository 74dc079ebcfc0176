"""
services/storage_service.py – Download directory and file commit helpers.

Responsibilities
----------------
1. Make sure the download directory exists (one level, never its parents).
2. Name the temporary file a download is streamed into.
3. Atomically move a finished temporary file onto its final name, or remove
   it when the download failed.
"""

import logging
import os
from pathlib import Path

from cursefetch.services.exceptions import FilesystemError

logger = logging.getLogger(__name__)

PARTIAL_SUFFIX: str = ".part"


def ensure_directory(path: Path) -> Path:
    """
    Create *path* if it is missing. An existing directory is fine; a missing
    parent is not.

    Raises
    ------
    FilesystemError on any filesystem error, or if *path* exists but is not a
    directory.
    """
    try:
        path.mkdir(exist_ok=True)
    except FileExistsError as exc:
        raise FilesystemError(f"'{path}' exists and is not a directory.", path=str(path)) from exc
    except OSError as exc:
        raise FilesystemError(
            f"Cannot create download directory '{path}': {exc}", path=str(path)
        ) from exc
    return path


def partial_path(dest_path: Path) -> Path:
    """Hidden sibling of *dest_path* the body is streamed into."""
    return dest_path.with_name(f".{dest_path.name}{PARTIAL_SUFFIX}")


def commit(partial: Path, dest_path: Path) -> Path:
    """
    Move *partial* onto *dest_path*, replacing any existing file.

    Raises
    ------
    FilesystemError if the rename fails.
    """
    try:
        os.replace(partial, dest_path)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to move download into place at '{dest_path}': {exc}",
            path=str(dest_path),
        ) from exc
    return dest_path


def cleanup_partial(partial: Path) -> None:
    """
    Remove a leftover temporary file.

    Logs (but does not raise) if removal fails, since the error that caused
    the cleanup is the one the caller needs to see.
    """
    try:
        if partial.exists():
            partial.unlink()
    except OSError as exc:
        logger.warning("Could not remove partial download '%s': %s", partial, exc)
