# -*- coding: utf-8 -*-
"""Parse context: the sink driven by the grammar advancers.

The grammar only recognizes text. Every time a production completes, it
hands the value to the context, which

1. enforces the cross-field rules of RFC 5870 (``crs`` and ``u`` at most
   once, ``crs`` before ``u``, no repeated parameter names), and
2. forwards the value to the user supplied callback.

Callbacks default to no-ops, so a caller only wires what it wants to
observe. Rule violations are recorded on the context (first one wins)
rather than raised, because the scan has to complete before the
top-level parser decides.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Any

from geouri_lib.constants import CRS_PARAMETER
from geouri_lib.constants import UNCERTAINTY_PARAMETER
from geouri_lib.enums import ErrorKind
from geouri_lib.enums import Severity
from geouri_lib.errors import GeoUriParseError
from geouri_lib.errors import SourceLocation
from geouri_lib.policy import ParsePolicy
from geouri_lib.policy import strict_parse_policy
from geouri_lib.validation import ascii_lower

if TYPE_CHECKING:
    from geouri_lib.models import GeoUri


def _ignore(*_args: Any) -> None:
    pass


@dataclass
class ParseContext:
    """Callback slots, parse policy and validation state for one parse.

    Attributes:
        on_latitude: Receives the latitude
        on_longitude: Receives the longitude
        on_altitude: Receives the altitude, if present
        on_crslabel: Receives the CRS label, if present
        on_uval: Receives the uncertainty, if present
        on_parameter: Receives each extension parameter (name, value)
        policy: Parse policy (case folding)
        source: Source identifier for error messages
        text: The text being parsed, for error messages
        crs_seen: A CRS has been delivered
        uncertainty_seen: An uncertainty has been delivered
        error: First grammar or rule violation recorded, if any
    """

    on_latitude: Callable[[float], None] = _ignore
    on_longitude: Callable[[float], None] = _ignore
    on_altitude: Callable[[float], None] = _ignore
    on_crslabel: Callable[[str], None] = _ignore
    on_uval: Callable[[float], None] = _ignore
    on_parameter: Callable[[str, str], None] = _ignore
    policy: ParsePolicy = field(default_factory=strict_parse_policy)
    source: str = "<string>"
    text: str = ""
    crs_seen: bool = False
    uncertainty_seen: bool = False
    parameter_names: set[str] = field(default_factory=set)
    error: GeoUriParseError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def reset(self) -> None:
        """Clear the validation state so the context can drive a new parse."""
        self.crs_seen = False
        self.uncertainty_seen = False
        self.parameter_names = set()
        self.error = None

    def fail(self, kind: ErrorKind, message: str, pos: int) -> None:
        """Record a violation at ``pos``. Only the first one is kept."""
        if self.error is not None:
            return
        self.error = GeoUriParseError(
            severity=Severity.ERROR,
            kind=kind,
            message=message,
            location=SourceLocation(source=self.source, column=pos, text=self.text),
        )

    # -------------------------------------------------------------------------
    # Emitters (called by the grammar advancers)
    # -------------------------------------------------------------------------

    def emit_latitude(self, n: float) -> None:
        self.on_latitude(n)

    def emit_longitude(self, n: float) -> None:
        self.on_longitude(n)

    def emit_altitude(self, n: float) -> None:
        self.on_altitude(n)

    def emit_crslabel(self, label: str, pos: int) -> None:
        if self.crs_seen:
            self.fail(ErrorKind.DUPLICATE_CRS, "Duplicate `crs` parameter", pos)
            return
        if self.uncertainty_seen:
            self.fail(
                ErrorKind.PARAMETER_ORDER,
                "`crs` parameter must precede `u` parameter",
                pos,
            )
            return
        self.crs_seen = True
        self.on_crslabel(label)

    def emit_uval(self, n: float, pos: int) -> None:
        if self.uncertainty_seen:
            self.fail(ErrorKind.DUPLICATE_UNCERTAINTY, "Duplicate `u` parameter", pos)
            return
        self.uncertainty_seen = True
        self.on_uval(n)

    def emit_parameter(self, name: str, value: str, pos: int) -> None:
        key = ascii_lower(name)

        # A well placed `crs` / `u` is consumed by its dedicated clause,
        # reaching here means it is repeated or out of order.
        if key == CRS_PARAMETER:
            if self.crs_seen:
                self.fail(ErrorKind.DUPLICATE_CRS, "Duplicate `crs` parameter", pos)
            else:
                self.fail(
                    ErrorKind.PARAMETER_ORDER,
                    "`crs` parameter is misplaced or malformed",
                    pos,
                )
            return

        if key == UNCERTAINTY_PARAMETER:
            if self.uncertainty_seen:
                self.fail(
                    ErrorKind.DUPLICATE_UNCERTAINTY, "Duplicate `u` parameter", pos
                )
            else:
                self.fail(
                    ErrorKind.PARAMETER_ORDER,
                    "`u` parameter is misplaced or malformed",
                    pos,
                )
            return

        if key in self.parameter_names:
            self.fail(
                ErrorKind.DUPLICATE_PARAMETER, f"Duplicate parameter `{name}`", pos
            )
            return

        self.parameter_names.add(key)
        self.on_parameter(name, value)


def make_context(uri: GeoUri, policy: ParsePolicy | None = None) -> ParseContext:
    """Build a context that populates ``uri`` through its setters.

    Args:
        uri: Value object to populate
        policy: Parse policy (default: strict)

    Returns:
        ParseContext bound to ``uri``
    """
    return ParseContext(
        on_latitude=uri.set_latitude,
        on_longitude=uri.set_longitude,
        on_altitude=uri.set_altitude,
        on_crslabel=uri.set_crs,
        on_uval=uri.set_uncertainty,
        on_parameter=uri.insert,
        policy=policy or strict_parse_policy(),
    )


def make_dict_context(
    data: dict[str, Any],
    policy: ParsePolicy | None = None,
) -> ParseContext:
    """Build a context that fills ``data`` with GeoUri field values.

    The resulting dictionary can be fed directly to
    ``GeoUri.model_validate()``.

    Args:
        data: Dictionary to fill
        policy: Parse policy (default: strict)

    Returns:
        ParseContext bound to ``data``
    """
    parameters: dict[str, str] = data.setdefault("parameters", {})

    def setter(key: str) -> Callable[[Any], None]:
        def _set(value: Any) -> None:
            data[key] = value

        return _set

    return ParseContext(
        on_latitude=setter("latitude"),
        on_longitude=setter("longitude"),
        on_altitude=setter("altitude"),
        on_crslabel=setter("crs"),
        on_uval=setter("uncertainty"),
        on_parameter=parameters.__setitem__,
        policy=policy or strict_parse_policy(),
    )
