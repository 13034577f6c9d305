# -*- coding: utf-8 -*-
"""Tests for GeoJSON export."""

import json

import pytest

from geouri_lib.geo_utils import GeoLocation
from geouri_lib.geojson import convert_uris_to_geojson
from geouri_lib.geojson import dumps_geojson
from geouri_lib.geojson import uri_to_feature
from geouri_lib.geojson import uris_to_feature_collection
from geouri_lib.models import GeoUri


class TestGeoLocation:
    """Tests for GeoLocation model."""

    def test_from_uri(self, vienna):
        """Test building a position from a WGS-84 URI."""
        location = GeoLocation.from_uri(vienna)
        assert location.latitude == 48.201
        assert location.longitude == 16.3695
        assert location.altitude == 183.0

    def test_as_tuple(self, vienna):
        """Test RFC 7946 coordinate order."""
        assert GeoLocation.from_uri(vienna).as_tuple() == (16.3695, 48.201, 183.0)

    def test_as_tuple_without_altitude(self):
        """Test a 2D position."""
        location = GeoLocation.from_uri(GeoUri(latitude=1.0, longitude=2.0))
        assert location.as_tuple() == (2.0, 1.0)

    def test_rounding(self):
        """Test that coordinates are rounded."""
        uri = GeoUri(latitude=1.123456789, longitude=2.0, altitude=3.14159)
        assert GeoLocation.from_uri(uri).as_tuple() == (2.0, 1.1234568, 3.14)

    def test_other_crs(self):
        """Test that non WGS-84 URIs are rejected."""
        with pytest.raises(ValueError, match="not WGS-84"):
            GeoLocation.from_uri(GeoUri(crs="nad27"))

    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -200.0)],
    )
    def test_out_of_range(self, latitude, longitude):
        """Test that coordinates outside the WGS-84 ranges are rejected."""
        uri = GeoUri(latitude=latitude, longitude=longitude)
        with pytest.raises(ValueError):
            GeoLocation.from_uri(uri)


class TestUriToFeature:
    """Tests for uri_to_feature function."""

    def test_point(self, vienna):
        """Test the feature geometry."""
        feature = uri_to_feature(vienna)
        assert feature["type"] == "Feature"
        assert feature["geometry"]["type"] == "Point"
        assert list(feature["geometry"]["coordinates"]) == [16.3695, 48.201, 183.0]

    def test_properties(self):
        """Test that URI metadata lands in the properties."""
        uri = GeoUri.from_string("geo:37.786971,-122.399677;u=35;name=SF")
        feature = uri_to_feature(uri)
        assert feature["properties"] == {
            "uri": "geo:37.786971,-122.399677;u=35;name=SF",
            "crs": "wgs84",
            "uncertainty": 35.0,
            "parameters": {"name": "SF"},
        }

    def test_other_crs(self, full_uri):
        """Test that a non WGS-84 URI cannot be exported."""
        with pytest.raises(ValueError):
            uri_to_feature(full_uri)


class TestFeatureCollection:
    """Tests for FeatureCollection export."""

    def test_skips_non_exportable(self, vienna, full_uri, caplog):
        """Test that non WGS-84 URIs are skipped with a warning."""
        collection = uris_to_feature_collection([vienna, full_uri])
        assert len(collection["features"]) == 1
        assert "Skipping" in caplog.text

    def test_empty(self):
        """Test an empty export."""
        collection = uris_to_feature_collection([])
        assert collection["type"] == "FeatureCollection"
        assert collection["features"] == []

    def test_dumps(self, vienna):
        """Test serialization with and without indentation."""
        collection = uris_to_feature_collection([vienna])
        pretty = dumps_geojson(collection)
        compact = dumps_geojson(collection, minify=True)
        assert "\n" in pretty
        assert "\n" not in compact
        assert json.loads(pretty) == json.loads(compact)

    def test_convert_to_file(self, vienna, tmp_path):
        """Test writing the export to a file."""
        output = tmp_path / "places.geojson"
        result = convert_uris_to_geojson([vienna], output)
        assert output.read_text(encoding="utf-8") == result
        data = json.loads(result)
        assert data["type"] == "FeatureCollection"
        assert data["features"][0]["geometry"]["coordinates"] == [
            16.3695,
            48.201,
            183.0,
        ]
