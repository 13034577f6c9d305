# -*- coding: utf-8 -*-
"""WGS-84 position helpers used by the GeoJSON export."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from geouri_lib.constants import GEOJSON_COORDINATE_PRECISION
from geouri_lib.constants import GEOJSON_ELEVATION_PRECISION

if TYPE_CHECKING:
    from geouri_lib.models import GeoUri


class GeoLocation(BaseModel):
    """A WGS-84 position with range-checked latitude and longitude."""

    latitude: Latitude
    longitude: Longitude
    altitude: float | None = None

    @classmethod
    def from_uri(cls, uri: GeoUri) -> GeoLocation:
        """Build a position from a geo URI.

        Raises:
            ValueError: If the URI is not in WGS-84, or its coordinates are
                outside the WGS-84 ranges
        """
        if not uri.is_wgs84:
            raise ValueError(f"CRS `{uri.crs}` is not WGS-84")
        return cls(
            latitude=uri.latitude,
            longitude=uri.longitude,
            altitude=uri.altitude,
        )

    def as_tuple(self) -> tuple[float, ...]:
        """Position in RFC 7946 order: (longitude, latitude[, altitude])."""
        position: tuple[float, ...] = (
            round(self.longitude, GEOJSON_COORDINATE_PRECISION),
            round(self.latitude, GEOJSON_COORDINATE_PRECISION),
        )
        if self.altitude is not None:
            position += (round(self.altitude, GEOJSON_ELEVATION_PRECISION),)
        return position
