# -*- coding: utf-8 -*-
"""GeoJSON export for geo URIs.

Each geo URI becomes a Point Feature (RFC 7946). GeoJSON coordinates are
always WGS-84 (longitude, latitude[, altitude]), so only URIs whose CRS
is WGS-84 and whose coordinates are within the WGS-84 ranges can be
exported. The remaining URI data is carried in the Feature properties:

- ``uri``: canonical geo URI text
- ``crs``: CRS label
- ``uncertainty``: location uncertainty in meters, or null
- ``parameters``: extension parameters (name -> decoded value)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

import orjson
from geojson import Feature
from geojson import FeatureCollection
from geojson import Point

from geouri_lib.constants import GEOJSON_COORDINATE_PRECISION
from geouri_lib.constants import JSON_ENCODING
from geouri_lib.geo_utils import GeoLocation

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from geouri_lib.models import GeoUri

logger = logging.getLogger(__name__)


def uri_to_feature(uri: GeoUri) -> Feature:
    """Convert a geo URI to a GeoJSON Point Feature.

    Args:
        uri: WGS-84 geo URI

    Returns:
        GeoJSON Feature with Point geometry

    Raises:
        ValueError: If the URI is not a valid WGS-84 position
    """
    location = GeoLocation.from_uri(uri)

    properties: dict[str, Any] = {
        "uri": uri.to_string(),
        "crs": uri.crs,
        "uncertainty": uri.uncertainty,
        "parameters": dict(uri.iter_parameters()),
    }

    return Feature(
        geometry=Point(
            location.as_tuple(),
            precision=GEOJSON_COORDINATE_PRECISION,
        ),
        properties=properties,
    )


def uris_to_feature_collection(uris: Iterable[GeoUri]) -> FeatureCollection:
    """Convert geo URIs to a FeatureCollection.

    URIs that cannot be expressed in GeoJSON (non WGS-84 CRS, coordinates
    out of range) are skipped with a warning.

    Args:
        uris: Geo URIs to export

    Returns:
        GeoJSON FeatureCollection
    """
    features: list[Feature] = []

    for uri in uris:
        try:
            features.append(uri_to_feature(uri))
        except ValueError:
            logger.warning("Skipping `%s`: not a valid WGS-84 position", uri)

    logger.info("Exported %d geo URI(s) to GeoJSON", len(features))
    return FeatureCollection(features)


def dumps_geojson(obj: Feature | FeatureCollection, *, minify: bool = False) -> str:
    """Serialize a GeoJSON object to text.

    Args:
        obj: GeoJSON Feature or FeatureCollection
        minify: Omit indentation for compact output

    Returns:
        GeoJSON string
    """
    # Use orjson for fast serialization
    opts = 0 if minify else orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=opts).decode(JSON_ENCODING)


def convert_uris_to_geojson(
    uris: Iterable[GeoUri],
    output_path: Path | None = None,
    *,
    minify: bool = False,
) -> str:
    """Convert geo URIs to a GeoJSON FeatureCollection string.

    Args:
        uris: Geo URIs to export
        output_path: Optional output path (the string is returned either way)
        minify: Omit indentation for compact output

    Returns:
        GeoJSON string
    """
    json_str = dumps_geojson(uris_to_feature_collection(uris), minify=minify)

    if output_path:
        output_path.write_text(json_str, encoding=JSON_ENCODING)

    return json_str
