# -*- coding: utf-8 -*-
"""Recursive-descent recognizer for the geo URI grammar (RFC 5870).

    geo-URI       = geo-scheme ":" geo-path
    geo-scheme    = "geo"
    geo-path      = coordinates p
    coordinates   = coord-a "," coord-b [ "," coord-c ]

    coord-a       = num
    coord-b       = num
    coord-c       = num

    p             = [ crsp ] [ uncp ] *parameter
    crsp          = ";crs=" crslabel
    crslabel      = "wgs84" / labeltext
    uncp          = ";u=" uval
    uval          = pnum
    parameter     = ";" pname [ "=" pvalue ]
    pname         = labeltext
    pvalue        = 1*paramchar
    paramchar     = p-unreserved / unreserved / pct-encoded

    labeltext     = 1*( alphanum / "-" )
    pnum          = 1*DIGIT [ "." 1*DIGIT ]
    num           = [ "-" ] pnum
    unreserved    = alphanum / mark
    mark          = "-" / "_" / "." / "!" / "~" / "*" /
                    "'" / "(" / ")"
    pct-encoded   = "%" HEXDIG HEXDIG
    p-unreserved  = "[" / "]" / ":" / "&" / "+" / "$"
    alphanum      = ALPHA / DIGIT

There is one ``advance_*`` function per production. Each one takes the
text, a start position and an end bound, and returns the position just
past the recognized production, or ``None`` if it does not match. A
failed advancer never moves the caller: every function works on a local
position and only hands it back on full success. Values flow to the
ParseContext once the production that carries them has matched.
"""

from __future__ import annotations

import math

from geouri_lib.constants import CRS_PREFIX
from geouri_lib.constants import GEO_SCHEME
from geouri_lib.constants import PCT_ENCODING
from geouri_lib.constants import UNCERTAINTY_PREFIX
from geouri_lib.constants import WGS84_CRS_LABEL
from geouri_lib.enums import ErrorKind
from geouri_lib.uri.context import ParseContext
from geouri_lib.validation import ascii_lower
from geouri_lib.validation import equals_ignorecase
from geouri_lib.validation import is_digit
from geouri_lib.validation import is_hexdigit
from geouri_lib.validation import is_labelchar
from geouri_lib.validation import is_p_unreserved
from geouri_lib.validation import is_unreserved
from geouri_lib.validation import to_digit


def _end(data: str, last: int | None) -> int:
    return len(data) if last is None else last


# -----------------------------------------------------------------------------
# Primitive advancers
# -----------------------------------------------------------------------------


def advance_pct_encoded(
    data: str,
    pos: int,
    last: int | None = None,
) -> tuple[int, int] | None:
    """Advance over a percent-encoded octet.

    pct-encoded = "%" HEXDIG HEXDIG

    Returns:
        ``(new_pos, octet)`` or None if fewer than two hex digits follow
    """
    last = _end(data, last)

    if last - pos < 3 or data[pos] != "%":
        return None

    high, low = data[pos + 1], data[pos + 2]
    if not (is_hexdigit(high) and is_hexdigit(low)):
        return None

    return pos + 3, to_digit(high, 16) * 16 + to_digit(low, 16)


def advance_sequence_ignorecase(
    data: str,
    pos: int,
    last: int | None,
    sample: str,
) -> int | None:
    """Advance over the literal ``sample``, compared ASCII case-insensitively.

    Returns:
        Position after the literal, or None unless all of it matched
    """
    last = _end(data, last)
    end = pos + len(sample)

    if end > last or not equals_ignorecase(data[pos:end], sample):
        return None

    return end


def advance_number(
    data: str,
    pos: int,
    last: int | None = None,
    allow_negative_sign: bool = True,
    context: ParseContext | None = None,
) -> tuple[int, float] | None:
    """Advance over a number.

    num  = [ "-" ] pnum
    pnum = 1*DIGIT [ "." 1*DIGIT ]

    The matched text only ever contains ASCII digits, ``-`` and ``.``, and
    ``float()`` reads ``.`` as the decimal point regardless of the process
    locale.

    Args:
        data: Text to scan
        pos: Start position
        last: End bound (default: end of text)
        allow_negative_sign: Accept a leading ``-`` (``num``), else ``pnum``
        context: Receives a BAD_NUMBER error if conversion overflows

    Returns:
        ``(new_pos, value)`` or None
    """
    last = _end(data, last)
    p = pos

    if allow_negative_sign and p < last and data[p] == "-":
        p += 1

    # Integral part (mandatory)
    digits_start = p
    while p < last and is_digit(data[p]):
        p += 1

    if p == digits_start:
        return None

    # Fractional part (optional), a bare trailing dot is invalid
    if p < last and data[p] == ".":
        p += 1
        fraction_start = p
        while p < last and is_digit(data[p]):
            p += 1
        if p == fraction_start:
            return None

    value = float(data[pos:p])

    if not math.isfinite(value):
        if context is not None:
            context.fail(
                ErrorKind.BAD_NUMBER,
                f"Number out of range: `{data[pos:p]}`",
                pos,
            )
        return None

    return p, value


# -----------------------------------------------------------------------------
# Grammar advancers
# -----------------------------------------------------------------------------


def advance_geo_scheme(data: str, pos: int, last: int | None = None) -> int | None:
    """geo-scheme = "geo" (case-insensitive)"""
    return advance_sequence_ignorecase(data, pos, last, GEO_SCHEME)


def advance_coordinates(
    data: str,
    pos: int,
    last: int | None,
    context: ParseContext,
) -> int | None:
    """coordinates = coord-a "," coord-b [ "," coord-c ]

    A comma after the longitude commits to an altitude: ``1,2,`` fails.
    """
    last = _end(data, last)
    values: list[float] = []
    p = pos

    for index in range(3):
        if index > 0:
            if p == last or data[p] != ",":
                break
            p += 1

        result = advance_number(data, p, last, True, context)
        if result is None:
            return None

        p, value = result
        values.append(value)

    if len(values) < 2:
        return None

    context.emit_latitude(values[0])
    context.emit_longitude(values[1])
    if len(values) == 3:
        context.emit_altitude(values[2])

    return p


def advance_labeltext(
    data: str,
    pos: int,
    last: int | None = None,
    fold_case: bool = False,
) -> tuple[int, str] | None:
    """Advance over a label.

    labeltext = 1*( alphanum / "-" )

    Returns:
        ``(new_pos, label)``, the label lowercased if ``fold_case``
    """
    last = _end(data, last)
    p = pos

    while p < last and is_labelchar(data[p]):
        p += 1

    if p == pos:
        return None

    label = data[pos:p]
    return p, ascii_lower(label) if fold_case else label


def advance_crsp(
    data: str,
    pos: int,
    last: int | None,
    context: ParseContext,
) -> int | None:
    """crsp = ";crs=" crslabel, crslabel = "wgs84" / labeltext"""
    p = advance_sequence_ignorecase(data, pos, last, CRS_PREFIX)
    if p is None:
        return None

    result = advance_labeltext(data, p, last, context.policy.fold_case)
    if result is None:
        return None

    p, label = result

    # "wgs84" is always delivered in its registered spelling
    if equals_ignorecase(label, WGS84_CRS_LABEL):
        label = WGS84_CRS_LABEL

    context.emit_crslabel(label, pos)
    return p


def advance_uncp(
    data: str,
    pos: int,
    last: int | None,
    context: ParseContext,
) -> int | None:
    """uncp = ";u=" uval, uval = pnum (no sign)"""
    p = advance_sequence_ignorecase(data, pos, last, UNCERTAINTY_PREFIX)
    if p is None:
        return None

    result = advance_number(data, p, last, False, context)
    if result is None:
        return None

    p, uval = result
    context.emit_uval(uval, pos)
    return p


def advance_pvalue(
    data: str,
    pos: int,
    last: int | None = None,
    context: ParseContext | None = None,
) -> tuple[int, str] | None:
    """Advance over a parameter value, decoding percent-encoded octets.

    pvalue    = 1*paramchar
    paramchar = p-unreserved / unreserved / pct-encoded

    Decoded octets are read as UTF-8; an invalid sequence records a
    BAD_ENCODING error on ``context`` and fails the production.

    Returns:
        ``(new_pos, decoded_value)`` or None
    """
    last = _end(data, last)
    octets = bytearray()
    p = pos

    while p < last:
        ch = data[p]
        if is_p_unreserved(ch) or is_unreserved(ch):
            octets.append(ord(ch))
            p += 1
        elif ch == "%":
            result = advance_pct_encoded(data, p, last)
            if result is None:
                return None
            p, octet = result
            octets.append(octet)
        else:
            break

    if p == pos:
        return None

    try:
        value = octets.decode(PCT_ENCODING)
    except UnicodeDecodeError:
        if context is not None:
            context.fail(
                ErrorKind.BAD_ENCODING,
                f"Percent-encoded value is not valid UTF-8: `{data[pos:p]}`",
                pos,
            )
        return None

    return p, value


def advance_parameter(
    data: str,
    pos: int,
    last: int | None,
    context: ParseContext,
) -> int | None:
    """parameter = ";" pname [ "=" pvalue ], pname = labeltext

    A parameter without value is delivered with an empty value.
    """
    last = _end(data, last)

    if pos >= last or data[pos] != ";":
        return None

    result = advance_labeltext(data, pos + 1, last, context.policy.fold_case)
    if result is None:
        return None

    p, pname = result
    pvalue = ""

    if p < last and data[p] == "=":
        value_result = advance_pvalue(data, p + 1, last, context)
        if value_result is None:
            return None
        p, pvalue = value_result

    context.emit_parameter(pname, pvalue, pos)
    return p


def advance_p(
    data: str,
    pos: int,
    last: int | None,
    context: ParseContext,
) -> int:
    """p = [ crsp ] [ uncp ] *parameter

    Every part is optional, so this always succeeds, possibly without
    advancing.
    """
    p = pos

    if (next_p := advance_crsp(data, p, last, context)) is not None:
        p = next_p

    if (next_p := advance_uncp(data, p, last, context)) is not None:
        p = next_p

    while (next_p := advance_parameter(data, p, last, context)) is not None:
        p = next_p

    return p


def advance_geo_path(
    data: str,
    pos: int,
    last: int | None,
    context: ParseContext,
) -> int | None:
    """geo-path = coordinates p"""
    p = advance_coordinates(data, pos, last, context)
    if p is None:
        return None

    return advance_p(data, p, last, context)


def advance_geo_uri(
    data: str,
    pos: int,
    last: int | None,
    context: ParseContext,
) -> int | None:
    """geo-URI = geo-scheme ":" geo-path"""
    last = _end(data, last)

    p = advance_geo_scheme(data, pos, last)
    if p is None or p == last or data[p] != ":":
        return None

    return advance_geo_path(data, p + 1, last, context)
