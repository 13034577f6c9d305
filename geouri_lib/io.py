# -*- coding: utf-8 -*-
"""File I/O operations for geo URIs.

This module provides thin functional wrappers around GeoUriInterface.

For new code, prefer using GeoUriInterface directly:

    from geouri_lib.interface import GeoUriInterface

    collection, errors = GeoUriInterface.load_uris(Path("places.uri"))
    GeoUriInterface.save_json(collection, Path("places.json"))
"""

from pathlib import Path

from geouri_lib.interface import GeoUriInterface
from geouri_lib.models import GeoUri
from geouri_lib.models import GeoUriCollection
from geouri_lib.policy import ComposerPolicy
from geouri_lib.policy import ParsePolicy

__all__ = [
    "load_json",
    "read_uri_file",
    "save_geojson",
    "save_json",
    "write_uri_file",
]


# --- Reading Functions ---


def read_uri_file(
    path: Path,
    *,
    policy: ParsePolicy | None = None,
) -> list[GeoUri]:
    """Read a URI list file, skipping lines that do not parse.

    Args:
        path: Path to the URI list file
        policy: Parse policy (default: strict)

    Returns:
        List of parsed geo URIs
    """
    collection, _errors = GeoUriInterface.load_uris(path, policy=policy)
    return collection.uris


def load_json(path: Path) -> list[GeoUri]:
    """Read geo URIs from a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        List of geo URIs
    """
    return GeoUriInterface.load_json(path).uris


# --- Writing Functions ---


def write_uri_file(
    uris: list[GeoUri],
    path: Path,
    *,
    policy: ComposerPolicy | None = None,
) -> None:
    """Write geo URIs to a URI list file, one per line.

    Args:
        uris: Geo URIs to write
        path: Output path
        policy: Composer policy (default: relaxed)
    """
    GeoUriInterface.save_uris(GeoUriCollection(uris=uris), path, policy=policy)


def save_json(uris: list[GeoUri], path: Path) -> None:
    """Write geo URIs to a JSON file.

    Args:
        uris: Geo URIs to write
        path: Output path
    """
    GeoUriInterface.save_json(GeoUriCollection(uris=uris), path)


def save_geojson(uris: list[GeoUri], path: Path, *, minify: bool = False) -> None:
    """Write the WGS-84 geo URIs to a GeoJSON file.

    Args:
        uris: Geo URIs to export
        path: Output path
        minify: Omit indentation for compact output
    """
    GeoUriInterface.save_geojson(GeoUriCollection(uris=uris), path, minify=minify)
