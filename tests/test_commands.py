# -*- coding: utf-8 -*-
"""Tests for the command line actions."""

import json
import sys

import pytest

import geouri_lib
from geouri_lib.commands.convert import ConversionError
from geouri_lib.commands.convert import _convert
from geouri_lib.commands.convert import convert
from geouri_lib.commands.convert import detect_file_format
from geouri_lib.commands.geojson import geojson
from geouri_lib.commands.main import main
from geouri_lib.enums import FileFormat
from geouri_lib.interface import GeoUriInterface
from geouri_lib.models import GeoUriCollection


@pytest.fixture
def json_file(tmp_path, vienna, full_uri):
    """Write a geo URI JSON envelope to a temporary file."""
    path = tmp_path / "places.json"
    GeoUriInterface.save_json(GeoUriCollection(uris=[vienna, full_uri]), path)
    return path


class TestDetectFileFormat:
    """Tests for detect_file_format function."""

    def test_uri_list(self, uri_list_file):
        """Test URI list extensions."""
        assert detect_file_format(uri_list_file) == FileFormat.URI

    def test_json(self, json_file):
        """Test that JSON content is checked for the envelope."""
        assert detect_file_format(json_file) == FileFormat.JSON

    def test_foreign_json(self, tmp_path):
        """Test that other JSON documents are rejected."""
        path = tmp_path / "other.json"
        path.write_text('{"format": "something"}', encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown file type"):
            detect_file_format(path)

    def test_unknown_extension(self, tmp_path):
        """Test an unsupported extension."""
        with pytest.raises(ValueError, match="Unknown file extension"):
            detect_file_format(tmp_path / "places.csv")


class TestConvertFunction:
    """Tests for the _convert helper."""

    def test_uri_to_json(self, uri_list_file):
        """Test the automatic target format."""
        result, errors = _convert(uri_list_file)
        data = json.loads(result)
        assert data["format"] == "geo_uri"
        assert len(data["uris"]) == 3
        assert len(errors) == 1

    def test_json_to_uri(self, json_file):
        """Test converting JSON back to a URI list."""
        result, errors = _convert(json_file)
        assert result == (
            "geo:48.201,16.3695,183\ngeo:66,30,100;crs=ABC;u=6.5;bar;foo=val\n"
        )
        assert errors == []

    def test_same_format_rejected(self, uri_list_file):
        """Test that a conversion to the source format is refused."""
        with pytest.raises(ConversionError, match="Invalid conversion"):
            _convert(uri_list_file, target_format="uri")

    def test_missing_file(self, tmp_path):
        """Test a missing input file."""
        with pytest.raises(FileNotFoundError):
            _convert(tmp_path / "missing.uri")

    def test_output_file(self, uri_list_file, tmp_path):
        """Test writing the result to a file."""
        output = tmp_path / "places.json"
        result, _ = _convert(uri_list_file, output)
        assert result is None
        assert GeoUriInterface.load_json(output).total_uris == 3


class TestConvertCommand:
    """Tests for the convert command."""

    def test_single_uri(self, capsys):
        """Test converting a URI given on the command line."""
        assert convert(["-u", "geo:48.2010,16.3695,183"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["uris"][0]["altitude"] == 183.0

    def test_keep_case(self, capsys):
        """Test the --keep-case flag."""
        assert convert(["-u", "geo:1,2;crs=ABC;Key=v", "--keep-case"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["uris"][0]["crs"] == "ABC"
        assert data["uris"][0]["parameters"] == {"Key": "v"}

    def test_explicit_crs(self, json_file, capsys):
        """Test the --explicit-crs flag."""
        assert convert(["-i", str(json_file), "--explicit-crs"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "geo:48.201,16.3695,183;crs=wgs84"

    def test_rejected_lines(self, uri_list_file, caplog):
        """Test that rejected lines are logged and fail the command."""
        assert convert(["-i", str(uri_list_file)]) == 1
        assert "Malformed geo URI coordinates" in caplog.text

    def test_invalid_uri(self, caplog):
        """Test a URI argument that does not parse."""
        assert convert(["-u", "geo:1,2;u=1;u=2"]) == 1
        assert "Duplicate `u` parameter" in caplog.text

    def test_missing_file(self, tmp_path):
        """Test a missing input file."""
        assert convert(["-i", str(tmp_path / "missing.uri")]) == 1

    def test_requires_input(self):
        """Test that an input is mandatory."""
        with pytest.raises(SystemExit):
            convert([])


class TestGeoJsonCommand:
    """Tests for the geojson command."""

    def test_single_uri(self, capsys):
        """Test exporting a URI given on the command line."""
        assert geojson(["-u", "geo:48.2010,16.3695,183", "--minify"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["features"][0]["geometry"]["type"] == "Point"

    def test_json_input(self, json_file, tmp_path):
        """Test exporting a JSON file to a GeoJSON file."""
        output = tmp_path / "places.geojson"
        assert geojson(["-i", str(json_file), "-o", str(output)]) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        # The ABC URI is not WGS-84 and is skipped
        assert len(data["features"]) == 1

    def test_rejected_lines(self, uri_list_file, capsys):
        """Test that valid lines are exported even if some are rejected."""
        assert geojson(["-i", str(uri_list_file)]) == 1
        data = json.loads(capsys.readouterr().out)
        assert len(data["features"]) == 3

    def test_missing_file(self, tmp_path):
        """Test a missing input file."""
        assert geojson(["-i", str(tmp_path / "missing.uri")]) == 1


class TestMain:
    """Tests for the main dispatcher."""

    def test_version(self, monkeypatch, capsys):
        """Test the version flag."""
        monkeypatch.setattr(sys, "argv", ["geouri", "--version"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 0
        assert geouri_lib.__version__ in capsys.readouterr().out
