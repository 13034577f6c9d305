# -*- coding: utf-8 -*-
"""Unified interface for geo URI file I/O.

This module provides the primary entry point for reading and writing
geo URI files. It follows the same pattern for every format:

1. Parsers produce dictionaries (like loading JSON from disk)
2. Dictionaries feed directly to Pydantic models via `model_validate()`
3. Models serialize to dictionaries via `model_dump()`
4. Formatters convert models to file content

This keeps parsing/formatting logic completely separate from Pydantic models.
"""

import json
import logging
from pathlib import Path
from typing import Any

from geouri_lib.constants import JSON_ENCODING
from geouri_lib.constants import JSON_FORMAT_VERSION
from geouri_lib.constants import URI_FILE_ENCODING
from geouri_lib.enums import FormatIdentifier
from geouri_lib.errors import GeoUriParseError
from geouri_lib.geojson import convert_uris_to_geojson
from geouri_lib.models import GeoUriCollection
from geouri_lib.policy import ComposerPolicy
from geouri_lib.policy import ParsePolicy
from geouri_lib.uri.format import compose
from geouri_lib.uri.parser import GeoUriParser

logger = logging.getLogger(__name__)


class GeoUriInterface:
    """Unified interface for geo URI file I/O.

    This class provides all file I/O operations for geo URIs,
    following the pattern:
    - Reading: File → Parser → Dictionary → model_validate() → Model
    - Writing: Model → compose() / model_dump() → File

    Example:
        # Load a URI list, one geo URI per line
        collection, errors = GeoUriInterface.load_uris(Path("places.uri"))

        for uri in collection.uris:
            print(uri.latitude, uri.longitude)

        # Save to JSON
        GeoUriInterface.save_json(collection, Path("places.json"))
    """

    # -------------------------------------------------------------------------
    # URI list files
    # -------------------------------------------------------------------------

    @classmethod
    def parse_uris(
        cls,
        content: str,
        *,
        source: str = "<string>",
        policy: ParsePolicy | None = None,
    ) -> tuple[GeoUriCollection, list[GeoUriParseError]]:
        """Parse URI list text.

        Args:
            content: One geo URI per line
            source: Source identifier for error messages
            policy: Parse policy (default: strict)

        Returns:
            Tuple of (collection of valid URIs, errors for rejected lines)
        """
        parser = GeoUriParser(policy=policy)
        data = parser.parse_lines_to_dict(content, source)

        if parser.errors:
            logger.warning(
                "%s: %d line(s) rejected", source, len(parser.errors)
            )

        # Single model_validate() call
        return GeoUriCollection.model_validate(data), parser.errors

    @classmethod
    def load_uris(
        cls,
        path: Path,
        *,
        policy: ParsePolicy | None = None,
    ) -> tuple[GeoUriCollection, list[GeoUriParseError]]:
        """Load a URI list file.

        Args:
            path: Path to the URI list file
            policy: Parse policy (default: strict)

        Returns:
            Tuple of (collection of valid URIs, errors for rejected lines)
        """
        logger.info("Reading %s", path)
        content = path.read_text(encoding=URI_FILE_ENCODING)
        return cls.parse_uris(content, source=str(path), policy=policy)

    @classmethod
    def format_uris(
        cls,
        collection: GeoUriCollection,
        *,
        policy: ComposerPolicy | None = None,
    ) -> str:
        """Compose every URI of ``collection``, one per line."""
        return "".join(f"{compose(uri, policy)}\n" for uri in collection.uris)

    @classmethod
    def save_uris(
        cls,
        collection: GeoUriCollection,
        path: Path,
        *,
        policy: ComposerPolicy | None = None,
    ) -> None:
        """Save a collection as a URI list file.

        Args:
            collection: URIs to save
            path: Path to write to
            policy: Composer policy (default: relaxed)
        """
        logger.info("Writing %d geo URI(s) to %s", collection.total_uris, path)
        path.write_text(
            cls.format_uris(collection, policy=policy),
            encoding=URI_FILE_ENCODING,
        )

    # -------------------------------------------------------------------------
    # JSON Methods
    # -------------------------------------------------------------------------

    @classmethod
    def dumps_json(cls, collection: GeoUriCollection) -> str:
        """Serialize a collection to JSON, wrapped in a format envelope."""
        envelope = {
            "version": JSON_FORMAT_VERSION,
            "format": FormatIdentifier.GEO_URI.value,
            "uris": collection.model_dump(mode="json")["uris"],
        }
        return json.dumps(envelope, indent=2, sort_keys=True)

    @classmethod
    def loads_json(cls, json_str: str) -> GeoUriCollection:
        """Deserialize a collection from JSON.

        Raises:
            ValueError: If the document is not a geo URI envelope
        """
        data: dict[str, Any] = json.loads(json_str)
        if data.get("format") != FormatIdentifier.GEO_URI.value:
            raise ValueError(
                f"Unknown JSON format: `{data.get('format')}` "
                f"(expected `{FormatIdentifier.GEO_URI.value}`)"
            )
        return GeoUriCollection.model_validate({"uris": data.get("uris", [])})

    @classmethod
    def save_json(cls, collection: GeoUriCollection, path: Path) -> None:
        """Save a collection as JSON.

        Uses Pydantic's built-in serialization.

        Args:
            collection: URIs to serialize
            path: Path to write JSON file
        """
        path.write_text(cls.dumps_json(collection), encoding=JSON_ENCODING)

    @classmethod
    def load_json(cls, path: Path) -> GeoUriCollection:
        """Load a collection from JSON.

        Args:
            path: Path to JSON file

        Returns:
            Deserialized collection
        """
        return cls.loads_json(path.read_text(encoding=JSON_ENCODING))

    # -------------------------------------------------------------------------
    # GeoJSON Methods
    # -------------------------------------------------------------------------

    @classmethod
    def save_geojson(
        cls,
        collection: GeoUriCollection,
        path: Path,
        *,
        minify: bool = False,
    ) -> None:
        """Save the WGS-84 URIs of a collection as a GeoJSON FeatureCollection.

        Args:
            collection: URIs to export
            path: Path to write GeoJSON file
            minify: Omit indentation for compact output
        """
        convert_uris_to_geojson(collection.uris, path, minify=minify)
