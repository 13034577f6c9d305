# -*- coding: utf-8 -*-
"""Parse and compose policies.

Policies are small immutable models passed per call; there is no global
state to configure.
"""

from pydantic import BaseModel
from pydantic import ConfigDict


class ParsePolicy(BaseModel):
    """Options applied while recognizing a geo URI.

    Attributes:
        fold_case: Lowercase CRS labels and parameter names on capture.
            Parameter names are case-insensitive in RFC 5870 and lowercase
            is the preferred form. Parameter values are never folded.
    """

    model_config = ConfigDict(frozen=True)

    fold_case: bool = True


class ComposerPolicy(BaseModel):
    """Options applied while writing a geo URI.

    Attributes:
        omit_wgs84_crs: Do not write ``;crs=wgs84`` since it is the default.
    """

    model_config = ConfigDict(frozen=True)

    omit_wgs84_crs: bool = True


def strict_parse_policy() -> ParsePolicy:
    return ParsePolicy(fold_case=True)


def relaxed_parse_policy() -> ParsePolicy:
    return ParsePolicy(fold_case=False)


def relaxed_composer_policy() -> ComposerPolicy:
    return ComposerPolicy(omit_wgs84_crs=True)


def strict_composer_policy() -> ComposerPolicy:
    return ComposerPolicy(omit_wgs84_crs=False)
