# -*- coding: utf-8 -*-
"""Data models for geo URIs.

This module contains the Pydantic models for representing geo URIs:
- GeoUri: A single location (coordinates, CRS, uncertainty, parameters)
- GeoUriCollection: An ordered list of geo URIs, as read from a file

GeoUri exposes the small setter surface the parse context drives
(``set_latitude``, ``insert``, ...) next to its read accessors, so a
parse can populate it incrementally. Once populated, treat it as
read-only: composing never mutates it.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterator
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from geouri_lib.constants import CRS_PARAMETER
from geouri_lib.constants import NORTH_POLE_LATITUDE
from geouri_lib.constants import SOUTH_POLE_LATITUDE
from geouri_lib.constants import UNCERTAINTY_PARAMETER
from geouri_lib.constants import WGS84_CRS_LABEL
from geouri_lib.uri.format import compose
from geouri_lib.validation import ascii_lower
from geouri_lib.validation import validate_crs_label
from geouri_lib.validation import validate_parameter_name

if TYPE_CHECKING:
    from geouri_lib.policy import ComposerPolicy
    from geouri_lib.policy import ParsePolicy


def _check_parameter_name(name: str) -> str:
    validate_parameter_name(name)
    if ascii_lower(name) in (CRS_PARAMETER, UNCERTAINTY_PARAMETER):
        raise ValueError(
            f"`{name}` is not an extension parameter, use "
            f"set_crs() / set_uncertainty() instead"
        )
    return name


class GeoUri(BaseModel):
    """A geographic location as described by a geo URI (RFC 5870).

    Latitude and longitude are always present. Altitude and uncertainty
    are optional: ``None`` means "absent", which is distinct from zero.
    The coordinate ranges are not enforced, only the named constructors
    and the pole predicates use the WGS-84 bounds.

    Extension parameters map a name to its decoded value; an empty value
    means the parameter is a flag without value. Iteration is ordered by
    name.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        allow_inf_nan=False,
    )

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float | None = None
    crs: str = WGS84_CRS_LABEL
    uncertainty: float | None = None
    parameters: dict[str, str] = Field(default_factory=dict)

    @field_validator("crs")
    @classmethod
    def check_crs(cls, v: str) -> str:
        return validate_crs_label(v)

    @field_validator("uncertainty")
    @classmethod
    def check_uncertainty(cls, v: float | None) -> float | None:
        if v is not None and v < 0:
            raise ValueError(f"Uncertainty must not be negative: {v}")
        return v

    @field_validator("parameters")
    @classmethod
    def check_parameter_names(cls, v: dict[str, str]) -> dict[str, str]:
        for name in v:
            _check_parameter_name(name)
        return v

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def north_pole(cls) -> GeoUri:
        return cls(latitude=NORTH_POLE_LATITUDE, longitude=0.0)

    @classmethod
    def south_pole(cls) -> GeoUri:
        return cls(latitude=SOUTH_POLE_LATITUDE, longitude=0.0)

    @classmethod
    def from_string(cls, text: str, policy: ParsePolicy | None = None) -> GeoUri:
        """Parse a geo URI, all or nothing.

        Args:
            text: Geo URI text, e.g. ``geo:48.2010,16.3695,183``
            policy: Parse policy (default: strict, names lowercased)

        Returns:
            Populated GeoUri

        Raises:
            GeoUriParseException: If ``text`` is not a valid geo URI
        """
        from geouri_lib.uri.parser import parse_uri  # noqa: PLC0415

        return parse_uri(text, policy=policy)

    # -------------------------------------------------------------------------
    # Mutators (the surface driven by the parse context)
    # -------------------------------------------------------------------------

    def set_latitude(self, n: float) -> None:
        self.latitude = n

    def set_longitude(self, n: float) -> None:
        self.longitude = n

    def set_altitude(self, n: float) -> None:
        self.altitude = n

    def clear_altitude(self) -> None:
        self.altitude = None

    def set_crs(self, label: str) -> None:
        self.crs = label

    def set_uncertainty(self, n: float) -> None:
        self.uncertainty = n

    def clear_uncertainty(self) -> None:
        self.uncertainty = None

    def insert(self, name: str, value: str = "") -> None:
        """Insert an extension parameter, replacing any previous value.

        Raises:
            ValueError: If ``name`` is not a labeltext token, or is one of
                the dedicated ``crs`` / ``u`` parameters
        """
        self.parameters[_check_parameter_name(name)] = value

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def has_altitude(self) -> bool:
        return self.altitude is not None

    @property
    def has_uncertainty(self) -> bool:
        return self.uncertainty is not None

    @property
    def is_wgs84(self) -> bool:
        """True if the CRS is WGS-84 (the default when none was given)."""
        return ascii_lower(self.crs) == WGS84_CRS_LABEL

    @property
    def is_north_pole(self) -> bool:
        """True for any WGS-84 location at latitude 90, whatever the longitude."""
        return self.is_wgs84 and self.latitude == NORTH_POLE_LATITUDE

    @property
    def is_south_pole(self) -> bool:
        """True for any WGS-84 location at latitude -90, whatever the longitude."""
        return self.is_wgs84 and self.latitude == SOUTH_POLE_LATITUDE

    def count(self) -> int:
        """Number of extension parameters."""
        return len(self.parameters)

    def _parameter_key(self, name: str) -> str | None:
        # Exact spelling first, then ASCII case-insensitive (RFC 5870 names)
        if name in self.parameters:
            return name
        folded = ascii_lower(name)
        return next(
            (key for key in self.parameters if ascii_lower(key) == folded), None
        )

    def has_parameter(self, name: str) -> bool:
        """True if parameter ``name`` is present, compared case-insensitively."""
        return self._parameter_key(name) is not None

    def parameter(self, name: str) -> str:
        """Value of parameter ``name``, or "" if absent or given without value.

        Names are compared case-insensitively.
        """
        key = self._parameter_key(name)
        return "" if key is None else self.parameters[key]

    def iter_parameters(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(name, value)`` pairs ordered by name."""
        yield from sorted(self.parameters.items())

    def foreach_parameter(self, fn: Callable[[str, str], None]) -> None:
        for name, value in self.iter_parameters():
            fn(name, value)

    # -------------------------------------------------------------------------
    # Comparison / serialization
    # -------------------------------------------------------------------------

    def _comparison_key(self) -> tuple:
        # Longitude is meaningless at the poles
        longitude = 0.0 if (self.is_north_pole or self.is_south_pole) else self.longitude
        return (
            self.latitude,
            longitude,
            self.altitude,
            ascii_lower(self.crs),
            self.uncertainty,
            sorted((ascii_lower(k), v) for k, v in self.parameters.items()),
        )

    def equivalent_to(self, other: GeoUri) -> bool:
        """Compare two locations the way RFC 5870 section 6 compares URIs.

        CRS labels and parameter names are compared case-insensitively,
        numbers by value (``66`` equals ``66.000``), and the longitude is
        ignored at the poles.
        """
        return self._comparison_key() == other._comparison_key()

    def to_string(self, policy: ComposerPolicy | None = None) -> str:
        return compose(self, policy)

    def __str__(self) -> str:
        return compose(self)


class GeoUriCollection(BaseModel):
    """An ordered list of geo URIs (URI list file, JSON document)."""

    uris: list[GeoUri] = Field(default_factory=list)

    @property
    def total_uris(self) -> int:
        return len(self.uris)

    @property
    def wgs84_uris(self) -> list[GeoUri]:
        return [uri for uri in self.uris if uri.is_wgs84]
