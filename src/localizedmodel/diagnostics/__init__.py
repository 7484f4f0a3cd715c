"""Diagnostic system for localization errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArrayElementError,
    DepthLimitExceededError,
    InvalidLocaleError,
    LocalizationError,
    PathError,
)
from .templates import ErrorTemplate

__all__ = [
    "ArrayElementError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidLocaleError",
    "LocalizationError",
    "PathError",
]
