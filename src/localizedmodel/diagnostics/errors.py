"""Localization exception hierarchy with structured diagnostics.

Normal model operation never raises: absent locales, absent wire payloads
and absent path segments degrade to empty strings or None. These
exceptions signal caller errors (precondition violations) only.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArrayElementError",
    "DepthLimitExceededError",
    "InvalidLocaleError",
    "LocalizationError",
    "PathError",
]


class LocalizationError(Exception):
    """Base exception for all localizedmodel errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PathError(LocalizationError, TypeError):
    """Path write on a root or segment that cannot hold attributes.

    Raised by set_by_path() when the root is None or a scalar, or when an
    existing intermediate segment resolves to a scalar.
    """


class InvalidLocaleError(LocalizationError, ValueError):
    """Locale code is empty, malformed, or (in strict mode) unknown to CLDR."""


class DepthLimitExceededError(LocalizationError):
    """Raised when the locale switch walk exceeds its maximum depth.

    This error indicates either:
    - A model graph nested deeper than any legitimate schema
    - A cycle through objects the visited set cannot identify
    """


class ArrayElementError(LocalizationError, TypeError):
    """Non-mapping value stored in a LocalizedArray."""
