"""Locale code validation and Babel lookups.

Locale codes are stored exactly as they arrive in wire payloads ("en",
"pt-BR", "zh_Hant"), so the Locale Store never rewrites them. The helpers
here only validate codes and answer CLDR questions about them.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from localizedmodel.diagnostics import InvalidLocaleError
from localizedmodel.diagnostics.templates import ErrorTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
    "validate_locale_code",
]


def validate_locale_code(locale_code: str) -> str:
    """Validate locale code format.

    Accepts alphanumeric subtags separated by underscores or hyphens.

    Args:
        locale_code: Locale code to validate

    Returns:
        locale_code, unchanged

    Raises:
        InvalidLocaleError: If locale code is empty or has invalid format
    """
    if not locale_code:
        raise InvalidLocaleError(ErrorTemplate.locale_empty())
    subtags = locale_code.replace("_", "").replace("-", "") if isinstance(locale_code, str) else ""
    if not subtags.isalnum():
        raise InvalidLocaleError(ErrorTemplate.locale_invalid_format(str(locale_code)))
    return locale_code


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool:
    """True when Babel's CLDR data recognizes locale_code.

    Example:
        >>> is_known_locale("fr")
        True
        >>> is_known_locale("xx")
        False
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True
