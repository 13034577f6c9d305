# -*- coding: utf-8 -*-
"""Constants used throughout the geouri_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# Encodings
# -----------------------------------------------------------------------------

#: Encoding used for URI list files
URI_FILE_ENCODING = "utf-8"

#: Encoding used for JSON files
JSON_ENCODING = "utf-8"

#: Encoding of percent-encoded octets in parameter values (RFC 3986)
PCT_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Grammar Literals (RFC 5870, section 3.3)
# -----------------------------------------------------------------------------

#: URI scheme name (matched case-insensitively)
GEO_SCHEME: str = "geo"

#: Canonical prefix written by the composer
GEO_URI_PREFIX: str = "geo:"

#: Prefix of the dedicated CRS clause
CRS_PREFIX: str = ";crs="

#: Prefix of the dedicated uncertainty clause
UNCERTAINTY_PREFIX: str = ";u="

#: Name of the CRS parameter
CRS_PARAMETER: str = "crs"

#: Name of the uncertainty parameter
UNCERTAINTY_PARAMETER: str = "u"

#: Default (and only RFC registered) coordinate reference system
WGS84_CRS_LABEL: str = "wgs84"

# -----------------------------------------------------------------------------
# Character Sets
# -----------------------------------------------------------------------------

#: mark = "-" / "_" / "." / "!" / "~" / "*" / "'" / "(" / ")"
MARK_CHARS: frozenset[str] = frozenset("-_.!~*'()")

#: p-unreserved = "[" / "]" / ":" / "&" / "+" / "$"
P_UNRESERVED_CHARS: frozenset[str] = frozenset("[]:&+$")

#: Characters written verbatim in parameter values (besides alphanumerics)
PVALUE_SAFE_CHARS: str = "-_.!~*'()[]:&+$"

# -----------------------------------------------------------------------------
# WGS-84 Bounds
# -----------------------------------------------------------------------------

#: Latitude of the north pole
NORTH_POLE_LATITUDE: float = 90.0

#: Latitude of the south pole
SOUTH_POLE_LATITUDE: float = -90.0


# -----------------------------------------------------------------------------
# Export Constants
# -----------------------------------------------------------------------------

#: Decimal precision for GeoJSON coordinates (WGS84)
GEOJSON_COORDINATE_PRECISION: int = 7

#: Decimal precision for altitude values in GeoJSON
GEOJSON_ELEVATION_PRECISION: int = 2

#: Version tag written in the JSON envelope
JSON_FORMAT_VERSION: str = "1.0"

#: Lines in URI list files starting with this marker are ignored
COMMENT_MARKER: str = "#"
