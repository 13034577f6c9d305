# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides shared sample geo URIs and temporary URI list files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from geouri_lib.constants import URI_FILE_ENCODING
from geouri_lib.models import GeoUri

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Sample Data
# =============================================================================

#: A URI list with comments, blank lines and one bad line
URI_LIST_CONTENT = """\
# Sample places
geo:48.2010,16.3695,183

geo:37.786971,-122.399677;u=35
geo:not-a-uri
geo:-48.876667,-123.393333;crs=wgs84;name=Point%20Nemo
"""


@pytest.fixture
def vienna() -> GeoUri:
    """Return a WGS-84 geo URI with altitude."""
    return GeoUri(latitude=48.201, longitude=16.3695, altitude=183.0)


@pytest.fixture
def full_uri() -> GeoUri:
    """Return a geo URI with every optional part set."""
    uri = GeoUri(
        latitude=66.0,
        longitude=30.0,
        altitude=100.0,
        crs="ABC",
        uncertainty=6.5,
    )
    uri.insert("foo", "val")
    uri.insert("bar")
    return uri


@pytest.fixture
def uri_list_content() -> str:
    """Return the text of a URI list file."""
    return URI_LIST_CONTENT


@pytest.fixture
def uri_list_file(tmp_path: Path) -> Path:
    """Write URI_LIST_CONTENT to a temporary .uri file."""
    path = tmp_path / "places.uri"
    path.write_text(URI_LIST_CONTENT, encoding=URI_FILE_ENCODING)
    return path
