"""
models/addon.py – Immutable records decoded from the add-on API responses.

Each record knows how to build itself from the API's JSON shape. Missing keys
decode to zero values; a value of the wrong JSON type raises TypeError /
ValueError, which the services turn into DecodeError.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, List, Tuple


def _require_object(data: Any) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _require_array(data: Any) -> list:
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class GameRecord:
    """
    One entry of the game catalogue.

    Attributes
    ----------
    identifier : Numeric game ID used by every add-on query.
    name       : Display name, matched exactly when resolving the ID.
    """

    identifier: int
    name: str

    @classmethod
    def from_json(cls, data: Any) -> "GameRecord":
        data = _require_object(data)
        return cls(identifier=int(data.get("id") or 0), name=str(data.get("name") or ""))

    def __str__(self) -> str:
        return f"{self.name} ({self.identifier})"


@dataclass(frozen=True)
class AddonFile:
    """
    One published build of an add-on.

    Attributes
    ----------
    file_name           : Server-declared file name; used as the local name.
    download_url        : Direct URL of the binary.
    compatible_versions : Game versions this build declares support for. May
                          be empty, in which case no version ever matches.
    """

    file_name: str
    download_url: str
    compatible_versions: FrozenSet[str] = frozenset()

    @classmethod
    def from_json(cls, data: Any) -> "AddonFile":
        data = _require_object(data)
        versions = _require_array(data.get("gameVersion"))
        return cls(
            file_name=str(data.get("fileName") or ""),
            download_url=str(data.get("downloadUrl") or ""),
            compatible_versions=frozenset(str(v) for v in versions),
        )

    def supports(self, version: str) -> bool:
        return version in self.compatible_versions


@dataclass(frozen=True)
class AddonRecord:
    """
    An add-on together with its latest files, in server order.

    The order of ``files`` decides which build wins when several are
    compatible with the requested version.
    """

    identifier: int
    name: str
    website_url: str = ""
    files: Tuple[AddonFile, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> "AddonRecord":
        data = _require_object(data)
        return cls(
            identifier=int(data.get("id") or 0),
            name=str(data.get("name") or ""),
            website_url=str(data.get("websiteUrl") or ""),
            files=tuple(AddonFile.from_json(f) for f in _require_array(data.get("latestFiles"))),
        )

    def __str__(self) -> str:
        return f"{self.name}  →  {self.website_url}" if self.website_url else self.name


@dataclass(frozen=True)
class FeaturedListing:
    """Snapshot of the featured, popular and recently updated add-ons of one game."""

    featured: Tuple[AddonRecord, ...] = ()
    popular: Tuple[AddonRecord, ...] = ()
    recently_updated: Tuple[AddonRecord, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> "FeaturedListing":
        data = _require_object(data)
        return cls(
            featured=decode_addons(data.get("Featured")),
            popular=decode_addons(data.get("Popular")),
            recently_updated=decode_addons(data.get("RecentlyUpdated")),
        )


def decode_games(data: Any) -> List[GameRecord]:
    """Decode the catalogue array."""
    return [GameRecord.from_json(item) for item in _require_array(data)]


def decode_addons(data: Any) -> Tuple[AddonRecord, ...]:
    """Decode an array of add-ons, keeping server order."""
    return tuple(AddonRecord.from_json(item) for item in _require_array(data))
