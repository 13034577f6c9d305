# -*- coding: utf-8 -*-
"""Enumerations for geo URI processing.

This module contains the enumerations used for error reporting and for
selecting input/output formats in the I/O layer and the commands.
"""

from enum import Enum


class FileFormat(str, Enum):
    """File format types for conversion operations.

    Attributes:
        URI: Plain text, one geo URI per line
        JSON: JSON serialization format
        GEOJSON: GeoJSON geographic format
    """

    URI = "uri"
    JSON = "json"
    GEOJSON = "geojson"


class FileExtension(str, Enum):
    """File extensions for various file formats (with dot).

    Attributes:
        URI: Geo URI list file extension
        TXT: Plain text file extension (treated as a URI list)
        JSON: JSON file extension
        GEOJSON: GeoJSON file extension
    """

    URI = ".uri"
    TXT = ".txt"
    JSON = ".json"
    GEOJSON = ".geojson"

    @classmethod
    def to_format(cls, ext: str) -> FileFormat | None:
        """Get the file format for an extension.

        Args:
            ext: File extension (with or without dot, case-insensitive)

        Returns:
            FileFormat or None if not recognized
        """
        ext_lower = "." + ext.lower().lstrip(".")
        mapping = {
            cls.URI.value: FileFormat.URI,
            cls.TXT.value: FileFormat.URI,
            cls.JSON.value: FileFormat.JSON,
            cls.GEOJSON.value: FileFormat.GEOJSON,
        }
        return mapping.get(ext_lower)


class FormatIdentifier(str, Enum):
    """Format identifiers used in JSON files.

    Attributes:
        GEO_URI: Format identifier for a list of geo URIs in JSON
    """

    GEO_URI = "geo_uri"


class Severity(str, Enum):
    """Severity level for parse errors.

    Attributes:
        ERROR: Critical parsing error
        WARNING: Non-fatal warning
    """

    ERROR = "error"
    WARNING = "warning"


class ErrorKind(str, Enum):
    """Reason a geo URI was rejected.

    Attributes:
        NOT_GEO_URI: Input does not start with the ``geo:`` scheme
        SYNTAX: A required grammar production did not match, or the
            input was not consumed completely
        BAD_NUMBER: Digits matched the number grammar but could not be
            converted to a finite number
        BAD_ENCODING: Percent-encoded octets are not valid UTF-8
        DUPLICATE_CRS: The ``crs`` parameter appears more than once
        DUPLICATE_UNCERTAINTY: The ``u`` parameter appears more than once
        DUPLICATE_PARAMETER: An extension parameter appears more than once
        PARAMETER_ORDER: ``crs`` or ``u`` appears out of its fixed position
    """

    NOT_GEO_URI = "not_geo_uri"
    SYNTAX = "syntax"
    BAD_NUMBER = "bad_number"
    BAD_ENCODING = "bad_encoding"
    DUPLICATE_CRS = "duplicate_crs"
    DUPLICATE_UNCERTAINTY = "duplicate_uncertainty"
    DUPLICATE_PARAMETER = "duplicate_parameter"
    PARAMETER_ORDER = "parameter_order"

    @property
    def is_constraint_violation(self) -> bool:
        """True if the input is well-formed but breaks a semantic rule."""
        return self in {
            ErrorKind.DUPLICATE_CRS,
            ErrorKind.DUPLICATE_UNCERTAINTY,
            ErrorKind.DUPLICATE_PARAMETER,
            ErrorKind.PARAMETER_ORDER,
        }
