"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def path_empty() -> Diagnostic:
        """Attribute path has no segments."""
        return Diagnostic(
            code=DiagnosticCode.PATH_EMPTY,
            message="Attribute path cannot be empty",
            hint="Pass a dotted path such as 'header' or 'items.0.title'",
        )

    @staticmethod
    def path_root_not_container(path: str, root: object) -> Diagnostic:
        """Path write attempted on a None or scalar root.

        Args:
            path: The path being written
            root: The offending root value
        """
        msg = f"Cannot set '{path}' on {type(root).__name__} root"
        return Diagnostic(
            code=DiagnosticCode.PATH_ROOT_NOT_CONTAINER,
            message=msg,
            hint="The root must be a mapping, a sequence or an object with attributes",
            path=path,
        )

    @staticmethod
    def path_segment_not_container(path: str, segment: str, value: object) -> Diagnostic:
        """Intermediate path segment resolves to a scalar.

        Args:
            path: The path being written
            segment: The segment holding the scalar
            value: The scalar found at that segment
        """
        msg = f"Segment '{segment}' of '{path}' holds a {type(value).__name__}, not a container"
        return Diagnostic(
            code=DiagnosticCode.PATH_SEGMENT_NOT_CONTAINER,
            message=msg,
            hint="Intermediate segments are only created when absent, never replaced",
            path=path,
        )

    @staticmethod
    def path_not_writable(path: str, segment: str, container: object) -> Diagnostic:
        """Segment cannot be assigned on its container.

        Covers read-only mappings and sequences, and non-index segments
        addressed into a sequence.

        Args:
            path: The path being written
            segment: The segment that could not be assigned
            container: The container rejecting the write
        """
        msg = f"Cannot assign segment '{segment}' of '{path}' on {type(container).__name__}"
        return Diagnostic(
            code=DiagnosticCode.PATH_NOT_WRITABLE,
            message=msg,
            hint="Sequences take non-negative integer segments; mappings must be mutable",
            path=path,
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Locale switch walk exceeded maximum depth.

        Args:
            max_depth: Maximum allowed depth
        """
        msg = f"Maximum model nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the model graph or raise max_depth on the root model",
        )

    @staticmethod
    def locale_empty() -> Diagnostic:
        """Locale code is empty."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_EMPTY,
            message="Locale code cannot be empty",
            hint="Pass a code such as 'en', 'fr' or 'pt-BR'",
        )

    @staticmethod
    def locale_invalid_format(locale: str) -> Diagnostic:
        """Locale code contains characters other than alphanumerics, '_' and '-'.

        Args:
            locale: The rejected locale code
        """
        msg = f"Invalid locale code format: '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID_FORMAT,
            message=msg,
            hint="Use letters and digits separated by '_' or '-'",
            locale=locale,
        )

    @staticmethod
    def locale_unknown(locale: str) -> Diagnostic:
        """Locale code is well-formed but unknown to CLDR (strict mode).

        Args:
            locale: The rejected locale code
        """
        msg = f"Unknown locale: '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Strict models only accept locales known to Babel's CLDR data",
            locale=locale,
        )

    @staticmethod
    def array_element_not_mapping(path: str, value: object) -> Diagnostic:
        """Non-mapping value stored in a LocalizedArray.

        Args:
            path: Element path (e.g., 'items.3')
            value: The rejected value
        """
        msg = f"Element '{path}' must be a mapping, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.ARRAY_ELEMENT_NOT_MAPPING,
            message=msg,
            hint="Localized arrays hold mappings of translatable fields",
            path=path,
        )
