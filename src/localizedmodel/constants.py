"""Shared constants for localizedmodel.

Centralized configuration constants used by the path accessor, the Locale
Store and the locale switch traversal. Placing them here avoids circular
imports between the core and model packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locales
    "DEFAULT_LOCALE",
    # Paths
    "INDEX_PLACEHOLDER",
    "PATH_SEPARATOR",
    # Depth limits
    "MAX_DEPTH",
    # Internal attributes
    "RESERVED_ATTRIBUTES",
    # Fallback strings
    "EMPTY_VALUE",
]

# ============================================================================
# LOCALES
# ============================================================================

# Active locale of a freshly constructed model.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# PATHS
# ============================================================================

# Token replaced by the element index when inflating array element paths.
# e.g. "items.{index}.header" -> "items.2.header"
INDEX_PLACEHOLDER: str = "{index}"

PATH_SEPARATOR: str = "."

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth walked by LocalizedModel.localize().
# Real model graphs rarely exceed 10 levels; anything past 100 is a
# malformed graph (usually a cycle through an unhashable wrapper).
MAX_DEPTH: int = 100

# ============================================================================
# INTERNAL ATTRIBUTES
# ============================================================================

# Instance attributes owned by LocalizedModel itself. They are never tracked
# in the Locale Store and never visited by the locale switch traversal.
RESERVED_ATTRIBUTES: frozenset[str] = frozenset(
    ("_locale", "_locale_store", "_strict", "_max_depth")
)

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Value read for any tracked path that has no entry for a locale.
EMPTY_VALUE: str = ""
