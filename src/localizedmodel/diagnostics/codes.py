"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Path errors (path accessor precondition violations)
        2000-2999: Traversal errors (locale switch walk)
        3000-3999: Locale errors (locale code validation)
        4000-4999: Model errors (misuse of tracked containers)
    """

    # Path errors (1000-1999)
    PATH_EMPTY = 1001
    PATH_ROOT_NOT_CONTAINER = 1002
    PATH_SEGMENT_NOT_CONTAINER = 1003
    PATH_NOT_WRITABLE = 1004

    # Traversal errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Locale errors (3000-3999)
    LOCALE_EMPTY = 3001
    LOCALE_INVALID_FORMAT = 3002
    LOCALE_UNKNOWN = 3003

    # Model errors (4000-4999)
    ARRAY_ELEMENT_NOT_MAPPING = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        path: Attribute path involved (None when not applicable)
        locale: Locale code involved (None when not applicable)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: str | None = None
    locale: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[LOCALE_INVALID_FORMAT]: Invalid locale code format: 'e n'
              = locale: e n
              = help: Use letters and digits separated by '_' or '-'

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.path is not None:
            lines.append(f"  = path: {self.path}")
        if self.locale is not None:
            lines.append(f"  = locale: {self.locale}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
