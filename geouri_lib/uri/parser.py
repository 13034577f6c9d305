# -*- coding: utf-8 -*-
"""Parser for geo URIs.

Three entry points, from lowest to highest level:

- ``parse()`` drives a caller supplied ParseContext over the text and
  returns how far it got. It is the streaming API: the caller decides
  what to build from the callbacks.
- ``parse_uri()`` builds a GeoUri, all or nothing, and raises
  GeoUriParseException on any failure.
- ``GeoUriParser`` reads URI lists (one URI per line) and produces
  dictionaries (like loading JSON) which are then fed to Pydantic models
  via a single ``model_validate()`` call. Errors are collected rather
  than thrown, so one bad line does not abort a whole file.

``like_geo_uri()`` is a cheap scheme check to run before committing to a
full parse; it does not validate anything past ``geo:``.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

from geouri_lib.constants import COMMENT_MARKER
from geouri_lib.constants import GEO_URI_PREFIX
from geouri_lib.constants import URI_FILE_ENCODING
from geouri_lib.enums import ErrorKind
from geouri_lib.enums import Severity
from geouri_lib.errors import GeoUriParseError
from geouri_lib.errors import GeoUriParseException
from geouri_lib.errors import SourceLocation
from geouri_lib.models import GeoUri
from geouri_lib.models import GeoUriCollection
from geouri_lib.policy import ParsePolicy
from geouri_lib.uri.context import ParseContext
from geouri_lib.uri.context import make_context
from geouri_lib.uri.context import make_dict_context
from geouri_lib.uri.grammar import advance_geo_scheme
from geouri_lib.uri.grammar import advance_geo_uri

logger = logging.getLogger(__name__)


def like_geo_uri(data: str) -> bool:
    """Check if ``data`` starts like a geo URI (``geo:``, any case).

    This is a fast rejection filter, not a validator.
    """
    p = advance_geo_scheme(data, 0)
    return p is not None and p < len(data) and data[p] == ":"


def parse(
    data: str,
    context: ParseContext,
    first: int = 0,
    last: int | None = None,
) -> int:
    """Recognize a geo URI in ``data[first:last]``, driving ``context``.

    Args:
        data: Text to parse
        context: Receives the values and records violations
        first: Start position
        last: End bound (default: end of text)

    Returns:
        Position just past the recognized URI, or ``first`` if nothing was
        recognized or ``context.error`` was set. A result short of ``last``
        means the URI is followed by unparsable text, callers requiring a
        complete match must treat it as a failure.

    The validation state of ``context`` is reset first, so one context can
    drive several parses. Its callbacks and policy are kept.
    """
    context.reset()
    context.text = data

    pos = advance_geo_uri(data, first, last, context)

    if pos is None or context.failed:
        return first

    return pos


def _failure(data: str, context: ParseContext, pos: int) -> GeoUriParseError:
    """Classify why ``data`` did not parse completely."""
    if context.error is not None:
        return context.error

    if not like_geo_uri(data):
        kind, message, pos = ErrorKind.NOT_GEO_URI, "Not a geo URI", 0
    elif pos == 0:
        kind, message = ErrorKind.SYNTAX, "Malformed geo URI coordinates"
        pos = len(GEO_URI_PREFIX)
    else:
        kind, message = ErrorKind.SYNTAX, f"Unexpected text `{data[pos:]}`"

    return GeoUriParseError(
        severity=Severity.ERROR,
        kind=kind,
        message=message,
        location=SourceLocation(source=context.source, column=pos, text=data),
    )


def parse_uri(
    data: str,
    policy: ParsePolicy | None = None,
    source: str = "<string>",
) -> GeoUri:
    """Parse a complete geo URI into a GeoUri.

    Args:
        data: Geo URI text
        policy: Parse policy (default: strict)
        source: Source identifier for error messages

    Returns:
        Populated GeoUri

    Raises:
        GeoUriParseException: If ``data`` is not entirely a valid geo URI.
            ``kind`` tells a scheme mismatch, a grammar failure, a bad
            number and a rule violation apart.
    """
    uri = GeoUri()
    context = make_context(uri, policy)
    context.source = source

    pos = parse(data, context)

    if context.failed or pos != len(data):
        raise GeoUriParseException.from_error(_failure(data, context, pos))

    return uri


class GeoUriParser:
    """Parser for geo URI strings and URI list files.

    This parser produces dictionaries (like loading JSON from disk). The
    dictionaries can then be fed to Pydantic models via a single
    ``model_validate()`` call.

    Attributes:
        errors: List of parsing errors encountered
        policy: Parse policy applied to every URI
    """

    def __init__(self, policy: ParsePolicy | None = None) -> None:
        """Initialize a new parser with empty error list."""
        self.errors: list[GeoUriParseError] = []
        self.policy = policy

    # -------------------------------------------------------------------------
    # Dictionary-returning methods (primary API)
    # -------------------------------------------------------------------------

    def parse_string_to_dict(
        self,
        data: str,
        source: str = "<string>",
        line: int = 0,
    ) -> dict[str, Any] | None:
        """Parse one geo URI to dictionary.

        Args:
            data: Geo URI text
            source: Source identifier for error messages
            line: Line number (0-based) of ``data`` in ``source``

        Returns:
            Dictionary of GeoUri fields, or None if parsing fails (the
            reason is appended to ``errors``)
        """
        result: dict[str, Any] = {}
        context = make_dict_context(result, self.policy)
        context.source = source

        pos = parse(data, context)

        if context.failed or pos != len(data):
            error = _failure(data, context, pos)
            if error.location is not None and line:
                error = replace(error, location=replace(error.location, line=line))
            logger.debug("Rejected geo URI: %s", error)
            self.errors.append(error)
            return None

        return result

    def parse_lines_to_dict(
        self,
        data: str,
        source: str = "<string>",
    ) -> dict[str, Any]:
        """Parse a URI list (one URI per line) to dictionary.

        Blank lines and lines starting with ``#`` are skipped, as are lines
        that fail to parse.

        Args:
            data: URI list text
            source: Source identifier for error messages

        Returns:
            Dictionary with "uris" key containing list of GeoUri dicts
        """
        uris: list[dict[str, Any]] = []

        for line_no, line in enumerate(data.splitlines()):
            _line = line.strip()
            if not _line or _line.startswith(COMMENT_MARKER):
                continue
            if (uri := self.parse_string_to_dict(_line, source, line_no)) is not None:
                uris.append(uri)

        return {"uris": uris}

    def parse_file_to_dict(self, path: Path) -> dict[str, Any]:
        """Parse a URI list file to dictionary.

        Args:
            path: Path to the URI list file

        Returns:
            Dictionary with "uris" key containing list of GeoUri dicts
        """
        with path.open(mode="r", encoding=URI_FILE_ENCODING) as f:
            data = f.read()
        return self.parse_lines_to_dict(data, str(path))

    # -------------------------------------------------------------------------
    # Model-returning methods
    # -------------------------------------------------------------------------

    def parse_string(self, data: str, source: str = "<string>") -> GeoUri | None:
        """Parse one geo URI, or return None and record the error."""
        parsed = self.parse_string_to_dict(data, source)
        if parsed is None:
            return None
        return GeoUri.model_validate(parsed)

    def parse_lines(self, data: str, source: str = "<string>") -> list[GeoUri]:
        """Parse a URI list, skipping (and recording) invalid lines."""
        parsed = self.parse_lines_to_dict(data, source)
        return GeoUriCollection.model_validate(parsed).uris
