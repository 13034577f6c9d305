# -*- coding: utf-8 -*-
"""GeoJSON export command for geo URIs.

This command converts URI lists (or JSON collections) to a GeoJSON
FeatureCollection with one Point per WGS-84 geo URI.
"""

import argparse
import logging
from pathlib import Path

from geouri_lib.commands.convert import detect_file_format
from geouri_lib.enums import FileFormat
from geouri_lib.geojson import convert_uris_to_geojson
from geouri_lib.interface import GeoUriInterface
from geouri_lib.policy import ParsePolicy

logger = logging.getLogger(__name__)


def geojson(args: list[str]) -> int:
    """Entry point for the geojson command."""
    parser = argparse.ArgumentParser(
        prog="geouri geojson",
        description="Convert geo URIs to GeoJSON format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geouri geojson -i places.uri                      # Output to stdout
  geouri geojson -i places.uri -o places.geojson    # Output to file
  geouri geojson -i places.json --minify            # Compact output
  geouri geojson -u "geo:48.2010,16.3695,183"       # Single URI

Output:
  The GeoJSON FeatureCollection includes one Point feature per geo URI.
  Feature properties carry the canonical URI, the CRS label, the
  uncertainty and the extension parameters.

Notes:
  - GeoJSON is always WGS-84: URIs with another CRS are skipped
  - Lines that are not valid geo URIs are reported and skipped
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
        help="A single geo URI to export",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output GeoJSON file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--minify",
        action="store_true",
        help="Write compact GeoJSON without indentation",
    )

    parsed_args = parser.parse_args(args)
    policy = ParsePolicy()

    if parsed_args.uri is not None:
        collection, errors = GeoUriInterface.parse_uris(
            parsed_args.uri, source="<argument>", policy=policy
        )

    else:
        # Validate input
        if not parsed_args.input_file.exists():
            logger.error("Error: Input file not found: %s", parsed_args.input_file)
            return 1

        try:
            source_format = detect_file_format(parsed_args.input_file)
        except ValueError as e:
            logger.error("Error: %s", e)  # noqa: TRY400
            return 1

        if source_format == FileFormat.JSON:
            collection, errors = GeoUriInterface.load_json(parsed_args.input_file), []
        else:
            collection, errors = GeoUriInterface.load_uris(
                parsed_args.input_file, policy=policy
            )

    for error in errors:
        logger.error("%s", error)

    result = convert_uris_to_geojson(
        collection.uris,
        output_path=parsed_args.output_file,
        minify=parsed_args.minify,
    )

    if parsed_args.output_file is None:
        # Print to stdout
        print(result)  # noqa: T201

    else:
        logger.info(
            "Converted %s -> %s",
            parsed_args.input_file or "<argument>",
            parsed_args.output_file,
        )

    return 1 if errors else 0
