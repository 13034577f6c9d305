# -*- coding: utf-8 -*-
"""Grammar, parse context and composer for geo URIs.

The text-level entry points (``parse``, ``parse_uri``, ``like_geo_uri``,
``GeoUriParser``) live in ``geouri_lib.uri.parser``, which depends on the
models and is re-exported from ``geouri_lib`` itself.
"""

from geouri_lib.uri.context import ParseContext
from geouri_lib.uri.context import make_context
from geouri_lib.uri.context import make_dict_context
from geouri_lib.uri.format import compose
from geouri_lib.uri.format import encode_pvalue
from geouri_lib.uri.format import format_number
from geouri_lib.uri.format import format_parameter

__all__ = [
    "ParseContext",
    "compose",
    "encode_pvalue",
    "format_number",
    "format_parameter",
    "make_context",
    "make_dict_context",
]
