# -*- coding: utf-8 -*-
"""Geo URI Library.

A Python library for parsing and composing ``geo:`` URIs (RFC 5870):
a latitude, a longitude, an optional altitude, an optional CRS label,
an optional location uncertainty and free form extension parameters.

Usage:
    # Parse a single geo URI
    from geouri_lib import parse_uri
    uri = parse_uri("geo:48.2010,16.3695,183;u=12")

    print(uri.latitude, uri.longitude, uri.altitude, uri.uncertainty)
    print(uri.to_string())

    # Or read a URI list file (one geo URI per line)
    from geouri_lib import GeoUriInterface
    collection, errors = GeoUriInterface.load_uris(Path("places.uri"))
    for error in errors:
        print(error)
"""

__version__ = "0.1.0"

# Constants
from geouri_lib.constants import GEO_URI_PREFIX
from geouri_lib.constants import JSON_ENCODING
from geouri_lib.constants import URI_FILE_ENCODING
from geouri_lib.constants import WGS84_CRS_LABEL

# Enums
from geouri_lib.enums import ErrorKind
from geouri_lib.enums import FileFormat
from geouri_lib.enums import Severity
from geouri_lib.errors import GeoUriParseError
from geouri_lib.errors import GeoUriParseException
from geouri_lib.errors import SourceLocation
from geouri_lib.interface import GeoUriInterface
from geouri_lib.io import load_json
from geouri_lib.io import read_uri_file
from geouri_lib.io import save_geojson
from geouri_lib.io import save_json
from geouri_lib.io import write_uri_file
from geouri_lib.models import GeoUri
from geouri_lib.models import GeoUriCollection
from geouri_lib.policy import ComposerPolicy
from geouri_lib.policy import ParsePolicy
from geouri_lib.policy import relaxed_composer_policy
from geouri_lib.policy import relaxed_parse_policy
from geouri_lib.policy import strict_composer_policy
from geouri_lib.policy import strict_parse_policy
from geouri_lib.uri.context import ParseContext
from geouri_lib.uri.context import make_context
from geouri_lib.uri.format import compose
from geouri_lib.uri.parser import GeoUriParser
from geouri_lib.uri.parser import like_geo_uri
from geouri_lib.uri.parser import parse
from geouri_lib.uri.parser import parse_uri
from geouri_lib.validation import is_valid_labeltext
from geouri_lib.validation import validate_labeltext

__all__ = [
    # Constants
    "GEO_URI_PREFIX",
    "JSON_ENCODING",
    "URI_FILE_ENCODING",
    "WGS84_CRS_LABEL",
    # Enums
    "ErrorKind",
    "FileFormat",
    "Severity",
    # Errors
    "GeoUriParseError",
    "GeoUriParseException",
    "SourceLocation",
    # Models
    "GeoUri",
    "GeoUriCollection",
    # Policies
    "ComposerPolicy",
    "ParsePolicy",
    "relaxed_composer_policy",
    "relaxed_parse_policy",
    "strict_composer_policy",
    "strict_parse_policy",
    # Parsing / Composing
    "ParseContext",
    "make_context",
    "like_geo_uri",
    "parse",
    "parse_uri",
    "compose",
    "GeoUriParser",
    # Validation
    "is_valid_labeltext",
    "validate_labeltext",
    # I/O
    "GeoUriInterface",
    "load_json",
    "read_uri_file",
    "save_geojson",
    "save_json",
    "write_uri_file",
]
