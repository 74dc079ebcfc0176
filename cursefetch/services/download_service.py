"""
services/download_service.py – Version-matched add-on file retrieval.

Uses httpx in streaming mode so add-on archives are never loaded fully into
memory. The body goes to a hidden temporary file next to the destination and
is renamed into place only once complete, so a failed transfer never leaves a
truncated archive under the real name.
"""

import logging
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import unquote, urlparse

import httpx

from cursefetch.config import DEFAULT_SETTINGS, ClientSettings
from cursefetch.models.addon import AddonFile, AddonRecord
from cursefetch.services import storage_service
from cursefetch.services.exceptions import FilesystemError, NetworkError, VersionNotFoundError
from cursefetch.services.file_selector import select_file

logger = logging.getLogger(__name__)

# ── Configuration ────────────────────────────────────────────────────────────
CHUNK_SIZE: int = 1024 * 1024  # 1 MiB

# ── Types ────────────────────────────────────────────────────────────────────
ProgressCallback = Callable[[int, int], None]

# ── Public API ───────────────────────────────────────────────────────────────


def download_addon(
    http: httpx.Client,
    addon: AddonRecord,
    target_version: str,
    target_folder: str = "",
    settings: ClientSettings = DEFAULT_SETTINGS,
    *,
    progress_callback: Optional[ProgressCallback] = None,
) -> Path:
    """
    Download the first file of *addon* compatible with *target_version*.

    Parameters
    ----------
    http              : Client used for the file request.
    addon             : Add-on whose ``files`` are searched in order.
    target_version    : Exact game version string the file must list.
    target_folder     : Destination directory; the configured default
                        download directory when empty.
    progress_callback : Optional callable receiving (downloaded, total);
                        total is -1 when the server omits Content-Length
                        or sends a content-encoded body.

    Returns
    -------
    Path to the written file.

    Raises
    ------
    VersionNotFoundError
        No file lists the version. Nothing is requested in that case.
    NetworkError
        Transport failure or a non-2xx status.
    FilesystemError
        The directory cannot be created or the file cannot be written.
    """
    selected = select_file(addon.files, target_version)
    if selected is None:
        raise VersionNotFoundError(addon.name, target_version)
    logger.debug("Selected %s of '%s' for version %s", selected.file_name, addon.name, target_version)

    dest_dir = Path(target_folder or settings.default_download_dir)
    return _download_file(http, selected, dest_dir, progress_callback)


# ── Private helpers ───────────────────────────────────────────────────────────


def _download_file(
    http: httpx.Client,
    selected: AddonFile,
    dest_dir: Path,
    progress_callback: Optional[ProgressCallback],
) -> Path:
    url = selected.download_url
    logger.debug("GET %s", url)
    try:
        with http.stream("GET", url) as resp:
            try:
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise NetworkError(
                    f"Server returned HTTP {exc.response.status_code} for URL: {url}",
                    url=url,
                    status_code=exc.response.status_code,
                ) from exc

            storage_service.ensure_directory(dest_dir)
            dest_path = dest_dir / _local_filename(selected.file_name, url)
            partial = storage_service.partial_path(dest_path)

            # Content-Length counts encoded bytes; iter_bytes yields decoded ones.
            if resp.headers.get("content-encoding"):
                total_bytes = -1
            else:
                total_bytes = int(resp.headers.get("content-length", -1))
            try:
                downloaded = _write_body(resp, partial, total_bytes, progress_callback)
                storage_service.commit(partial, dest_path)
            except BaseException:
                storage_service.cleanup_partial(partial)
                raise

    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise NetworkError(f"Network error during download: {exc}", url=url) from exc

    logger.info("Downloaded %s (%d bytes)", dest_path, downloaded)
    return dest_path


def _write_body(
    resp: httpx.Response,
    partial: Path,
    total_bytes: int,
    progress_callback: Optional[ProgressCallback],
) -> int:
    downloaded = 0
    try:
        with open(partial, "wb") as fh:
            for chunk in resp.iter_bytes(chunk_size=CHUNK_SIZE):
                if not chunk:
                    continue
                fh.write(chunk)
                downloaded += len(chunk)
                if progress_callback:
                    progress_callback(downloaded, total_bytes)
    except OSError as exc:
        raise FilesystemError(
            f"I/O error writing download to disk: {exc}", path=str(partial)
        ) from exc
    return downloaded


_UNUSABLE_NAMES = ("", ".", "..")


def _local_filename(declared: str, url: str) -> str:
    """
    Server-declared name stripped of path components, falling back to the URL
    when nothing usable is left.
    """
    name = Path(declared).name
    if name in _UNUSABLE_NAMES:
        name = _filename_from_url(url)
    return name


def _filename_from_url(url: str) -> str:
    """Derive a filename from the last path segment of the URL."""
    parsed = urlparse(url)
    name = Path(unquote(parsed.path.split("/")[-1])).name
    return "download.bin" if name in _UNUSABLE_NAMES else name
