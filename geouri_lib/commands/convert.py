# -*- coding: utf-8 -*-
"""Convert command for geo URI files.

Supports bidirectional conversion between URI lists (one geo URI per
line) and JSON format using Pydantic's built-in serialization.
"""

import argparse
import logging
import sys
from pathlib import Path

from geouri_lib.constants import JSON_ENCODING
from geouri_lib.constants import URI_FILE_ENCODING
from geouri_lib.enums import FileExtension
from geouri_lib.enums import FileFormat
from geouri_lib.enums import FormatIdentifier
from geouri_lib.errors import GeoUriParseError
from geouri_lib.interface import GeoUriInterface
from geouri_lib.models import GeoUriCollection
from geouri_lib.policy import ComposerPolicy
from geouri_lib.policy import ParsePolicy

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Error raised for invalid conversion operations."""


def detect_file_format(path: Path) -> FileFormat:
    """Detect the file format based on extension and content.

    Args:
        path: File path

    Returns:
        FileFormat.URI or FileFormat.JSON

    Raises:
        ValueError: If the format cannot be determined
    """
    f_ext = path.suffix.lower()

    match FileExtension.to_format(f_ext):
        case FileFormat.URI:
            return FileFormat.URI

        case FileFormat.JSON:
            # Read the file to detect format from content
            content = path.read_text(encoding=JSON_ENCODING)
            if (
                f'"format": "{FormatIdentifier.GEO_URI.value}"' in content
                or f'"format":"{FormatIdentifier.GEO_URI.value}"' in content
            ):
                return FileFormat.JSON

            raise ValueError(f"Unknown file type found inside json: `{path}`")

        case FileFormat.GEOJSON:
            raise ValueError(f"GeoJSON is an export-only format: `{path}`")

        case _:
            raise ValueError(f"Unknown file extension: `{f_ext}`")


def _load(
    input_path: Path | None,
    uri: str | None,
    parse_policy: ParsePolicy,
) -> tuple[FileFormat, GeoUriCollection, list[GeoUriParseError]]:
    if uri is not None:
        collection, errors = GeoUriInterface.parse_uris(
            uri, source="<argument>", policy=parse_policy
        )
        return FileFormat.URI, collection, errors

    if input_path is None:
        raise ConversionError("No input given")
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    source_format = detect_file_format(input_path)
    if source_format == FileFormat.JSON:
        return source_format, GeoUriInterface.load_json(input_path), []

    collection, errors = GeoUriInterface.load_uris(input_path, policy=parse_policy)
    return source_format, collection, errors


def _convert(
    input_path: Path | None = None,
    output_path: Path | None = None,
    target_format: FileFormat | str | None = None,
    *,
    uri: str | None = None,
    parse_policy: ParsePolicy | None = None,
    composer_policy: ComposerPolicy | None = None,
) -> tuple[str | None, list[GeoUriParseError]]:
    """Convert geo URIs between formats.

    Args:
        input_path: Input file path
        output_path: Output file path (None = return as string)
        target_format: Target format (FileFormat or string 'uri'/'json')
        uri: A single geo URI to convert instead of an input file
        parse_policy: Parse policy for URI input
        composer_policy: Composer policy for URI output

    Returns:
        Tuple of (converted content if output_path is None else None,
        errors for rejected input lines)

    Raises:
        ConversionError: If conversion is not valid
        FileNotFoundError: If input file doesn't exist
    """
    source_format, collection, errors = _load(
        input_path, uri, parse_policy or ParsePolicy()
    )

    # Normalize target format to enum
    if isinstance(target_format, str):
        target_format = FileFormat(target_format)
    elif target_format is None:
        # Auto-determine: opposite of source
        target_format = (
            FileFormat.JSON if source_format == FileFormat.URI else FileFormat.URI
        )

    # Validate: no same-format conversion
    if source_format == target_format:
        raise ConversionError(
            f"Invalid conversion: {source_format.value} => {target_format.value}. "
            f"Source and target formats must be different."
        )

    if target_format == FileFormat.JSON:
        result = GeoUriInterface.dumps_json(collection)
    elif target_format == FileFormat.URI:
        result = GeoUriInterface.format_uris(collection, policy=composer_policy)
    else:
        raise ConversionError(
            f"Unsupported conversion: {source_format.value} => {target_format.value}"
        )

    # Output handling
    if output_path is None:
        return result, errors

    encoding = JSON_ENCODING if target_format == FileFormat.JSON else URI_FILE_ENCODING
    output_path.write_text(result, encoding=encoding)
    logger.info("Wrote %d geo URI(s) to %s", collection.total_uris, output_path)

    return None, errors


def convert(args: list[str]) -> int:
    """Entry point for the convert command."""
    parser = argparse.ArgumentParser(
        prog="geouri convert",
        description="Convert geo URIs between URI lists and JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geouri convert -i places.uri                      # Convert to JSON (stdout)
  geouri convert -i places.uri -o places.json       # Convert to JSON file
  geouri convert -u "geo:48.2010,16.3695,183"       # Single URI to JSON
  geouri convert -i places.json -o places.uri       # Convert to URI list
  geouri convert -i places.json --explicit-crs      # Always write ;crs=

Supported conversions:
  uri -> json    URI list (.uri, .txt) to JSON
  json -> uri    JSON to URI list

Notes:
  - Source format is auto-detected from extension or JSON content
  - Target format is auto-detected if not specified (opposite of source)
  - Lines that are not valid geo URIs are reported and skipped; the
    exit status is then 1
""",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-i",
        "--input-file",
        type=Path,
        default=None,
        help="Input file path (.uri, .txt, or .json)",
    )
    source.add_argument(
        "-u",
        "--uri",
        default=None,
        help="A single geo URI to convert",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[FileFormat.URI.value, FileFormat.JSON.value],
        default=None,
        dest="target_format",
        help="Target format: 'uri' or 'json' (auto-detected if not specified)",
    )
    parser.add_argument(
        "--keep-case",
        action="store_true",
        help="Keep CRS labels and parameter names as written (default: lowercase)",
    )
    parser.add_argument(
        "--explicit-crs",
        action="store_true",
        help="Write ';crs=wgs84' even though it is the default",
    )

    parsed_args = parser.parse_args(args)

    try:
        result, errors = _convert(
            input_path=parsed_args.input_file,
            output_path=parsed_args.output_file,
            target_format=parsed_args.target_format,
            uri=parsed_args.uri,
            parse_policy=ParsePolicy(fold_case=not parsed_args.keep_case),
            composer_policy=ComposerPolicy(
                omit_wgs84_crs=not parsed_args.explicit_crs
            ),
        )
    except (ConversionError, FileNotFoundError, ValueError) as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1

    if result is not None:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")

    for error in errors:
        logger.error("%s", error)

    return 1 if errors else 0
