# -*- coding: utf-8 -*-
"""Formatting (serialization) of geo URIs.

This module converts a GeoUri back to its canonical text form:

    geo:<lat>,<lon>[,<alt>][;crs=<label>][;u=<uval>][;<name>[=<value>]]...

Numbers are written positionally with ``.`` as decimal separator and no
exponent, whatever the process locale. Parameters are written ordered by
name and their values are percent-encoded where needed, so the output
always parses back to the same GeoUri.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

import numpy as np

from geouri_lib.constants import CRS_PREFIX
from geouri_lib.constants import GEO_URI_PREFIX
from geouri_lib.constants import PCT_ENCODING
from geouri_lib.constants import PVALUE_SAFE_CHARS
from geouri_lib.constants import UNCERTAINTY_PREFIX
from geouri_lib.policy import ComposerPolicy
from geouri_lib.policy import relaxed_composer_policy
from geouri_lib.validation import validate_finite

if TYPE_CHECKING:
    from geouri_lib.models import GeoUri


def format_number(value: float) -> str:
    """Format a number for output.

    Args:
        value: Finite number

    Returns:
        Shortest positional representation that round-trips, e.g.
        ``66``, ``6.5``, ``0.00001``

    Raises:
        ValueError: If ``value`` is NaN or infinite
    """
    validate_finite(value)
    # Adding 0.0 turns -0.0 into 0.0
    return np.format_float_positional(
        float(value) + 0.0,
        unique=True,
        trim="-",
    )


def encode_pvalue(value: str) -> str:
    """Percent-encode a parameter value.

    Characters allowed by ``paramchar`` are kept, everything else is
    written as uppercase ``%HH`` octets of its UTF-8 encoding.
    """
    return quote(value, safe=PVALUE_SAFE_CHARS, encoding=PCT_ENCODING)


def format_parameter(name: str, value: str) -> str:
    """Format one extension parameter, ``;name`` or ``;name=value``."""
    if value == "":
        return f";{name}"
    return f";{name}={encode_pvalue(value)}"


def compose(uri: GeoUri, policy: ComposerPolicy | None = None) -> str:
    """Compose the canonical text of a geo URI.

    Args:
        uri: Location to write
        policy: Composer policy (default: relaxed, ``crs=wgs84`` omitted)

    Returns:
        Geo URI text, always prefixed with ``geo:``
    """
    if policy is None:
        policy = relaxed_composer_policy()

    parts = [
        GEO_URI_PREFIX,
        format_number(uri.latitude),
        ",",
        format_number(uri.longitude),
    ]

    if uri.has_altitude:
        parts.extend((",", format_number(uri.altitude)))

    if not (uri.is_wgs84 and policy.omit_wgs84_crs):
        parts.extend((CRS_PREFIX, uri.crs))

    if uri.has_uncertainty:
        parts.extend((UNCERTAINTY_PREFIX, format_number(uri.uncertainty)))

    parts.extend(format_parameter(name, value) for name, value in uri.iter_parameters())

    return "".join(parts)
