"""Hypothesis strategies for localizedmodel property-based testing.

Usage:
    from tests.strategies import locale_codes, locale_dicts, path_segments
"""

from .localization import (
    FIELD_NAMES,
    field_values,
    locale_codes,
    locale_dicts,
    path_segments,
)

__all__ = [
    "FIELD_NAMES",
    "field_values",
    "locale_codes",
    "locale_dicts",
    "path_segments",
]
