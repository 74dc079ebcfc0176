"""
services/file_selector.py – Pick the build of an add-on that fits a game version.
"""

from typing import Iterable, Optional

from cursefetch.models.addon import AddonFile


def select_file(files: Iterable[AddonFile], target_version: str) -> Optional[AddonFile]:
    """
    Return the first file whose compatible versions contain *target_version*.

    Matching is exact string equality; "1.0" does not match "1.0.0". Order of
    *files* decides precedence. Returns None when nothing matches.
    """
    for candidate in files:
        if candidate.supports(target_version):
            return candidate
    return None
