"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user
code when annotating model serialization hooks.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "AttributePath",
    "InflatedLocales",
    "LocaleCode",
    "LocaleDict",
    "LocaleEntries",
    "OutputKey",
]

LocaleCode: TypeAlias = str
"""Locale code as it appears in wire payloads (e.g., 'en', 'fr', 'pt-BR')."""

AttributePath: TypeAlias = str
"""Locale Store key: 'header', 'second_level.title' or 'items.0.header'."""

OutputKey: TypeAlias = str
"""Key emitted in an inflated locale dictionary (e.g., 'subHeader')."""

LocaleEntries: TypeAlias = dict[LocaleCode, str]
"""Per-locale values of a single attribute path."""

LocaleDict: TypeAlias = Mapping[LocaleCode, Mapping[str, str]]
"""Inbound wire locale dictionary: {locale: {field: value}}."""

InflatedLocales: TypeAlias = dict[LocaleCode, dict[OutputKey, str]]
"""Outbound wire locale dictionary produced by inflate_locales()."""
