# -*- coding: utf-8 -*-
"""Error handling for geo URI parsing.

This module provides error classes for tracking parsing errors with
source location information for helpful error messages.
"""

from dataclasses import dataclass

from geouri_lib.enums import ErrorKind
from geouri_lib.enums import Severity


@dataclass(frozen=True)
class SourceLocation:
    """Tracks the source location of text for error reporting.

    Attributes:
        source: The source file name or identifier
        column: Column number (0-based) inside the URI text
        text: The URI text being parsed
        line: Line number (0-based) in the source, for URI list files
    """

    source: str
    column: int
    text: str
    line: int = 0

    def __str__(self) -> str:
        """Format as human-readable location string."""
        return f"(in {self.source}, line {self.line + 1}, column {self.column + 1})"

    @property
    def pointer(self) -> str:
        """Caret line pointing at ``column`` under ``text``."""
        return " " * self.column + "^"


@dataclass(frozen=True)
class GeoUriParseError:
    """Represents a parsing error or warning with source location.

    This is a data record for storing error information, not an exception.
    Use GeoUriParseException for raising errors.

    Attributes:
        severity: ERROR or WARNING
        kind: Why the input was rejected
        message: Human-readable error message
        location: Source location where error occurred (optional)
    """

    severity: Severity
    kind: ErrorKind
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        """Format as human-readable error string."""
        base = f"{self.severity.value}: {self.message}"
        if self.location:
            base += f" {self.location}"
            if self.location.text:
                base += f"\n  {self.location.text}\n  {self.location.pointer}"
        return base

    @property
    def is_constraint_violation(self) -> bool:
        return self.kind.is_constraint_violation


class GeoUriParseException(ValueError):  # noqa: N818
    """Exception raised when a geo URI cannot be parsed.

    Attributes:
        message: Error message
        kind: Why the input was rejected
        location: Source location where error occurred
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.SYNTAX,
        location: SourceLocation | None = None,
    ):
        self.message = message
        self.kind = kind
        self.location = location
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.location:
            return f"{self.message} {self.location}"
        return self.message

    @classmethod
    def from_error(cls, error: GeoUriParseError) -> "GeoUriParseException":
        """Build an exception from a GeoUriParseError record."""
        return cls(error.message, kind=error.kind, location=error.location)

    def to_error(self) -> GeoUriParseError:
        """Convert exception to GeoUriParseError record."""
        return GeoUriParseError(
            severity=Severity.ERROR,
            kind=self.kind,
            message=self.message,
            location=self.location,
        )
