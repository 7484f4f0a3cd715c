"""Get and set values by dotted path over nested containers.

Paths are dot-separated segments; bracketed segments are normalized first,
so "items[0].title" and "items.0.title" address the same value.

Container handling:
    Mapping            item access by segment
    Sequence           integer index (non-negative decimal segments only)
    any other object   attribute access (getattr/setattr)

Writes auto-vivify missing intermediate segments: a list when the next
segment is numeric, a dict otherwise.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import TypeVar

from localizedmodel.constants import PATH_SEPARATOR
from localizedmodel.diagnostics import PathError
from localizedmodel.diagnostics.templates import ErrorTemplate

__all__ = ["get_by_path", "is_scalar", "normalize_path", "set_by_path"]

_BRACKET_SEGMENT = re.compile(r"\[(\w+)\]")

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex)

_MISSING = object()

T = TypeVar("T")


def normalize_path(path: str) -> list[str]:
    """Split a path into segments.

    Example:
        >>> normalize_path("items[0].title")
        ['items', '0', 'title']
        >>> normalize_path(".header")
        ['header']
    """
    path = _BRACKET_SEGMENT.sub(r".\1", path)
    path = path.removeprefix(PATH_SEPARATOR)
    return path.split(PATH_SEPARATOR)


def is_scalar(value: object) -> bool:
    """True for None and plain values that cannot hold path segments."""
    return value is None or isinstance(value, _SCALAR_TYPES)


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdecimal()


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_TYPES)


def _lookup(container: object, segment: str) -> object:
    """Return the child at segment, or _MISSING."""
    if isinstance(container, Mapping):
        return container.get(segment, _MISSING)
    if _is_sequence(container):
        if not _is_index(segment):
            return _MISSING
        index = int(segment)
        if index >= len(container):  # type: ignore[arg-type]
            return _MISSING
        return container[index]  # type: ignore[index]
    return getattr(container, segment, _MISSING)


def _assign(container: object, segment: str, value: object, path: str) -> None:
    if isinstance(container, Mapping):
        if not isinstance(container, MutableMapping):
            raise PathError(ErrorTemplate.path_not_writable(path, segment, container))
        container[segment] = value
        return
    if _is_sequence(container):
        if not isinstance(container, MutableSequence) or not _is_index(segment):
            raise PathError(ErrorTemplate.path_not_writable(path, segment, container))
        index = int(segment)
        # Sparse writes pad with None, like assigning past the end of a JS array
        while len(container) < index:
            container.append(None)
        if index == len(container):
            container.append(value)
        else:
            container[index] = value
        return
    setattr(container, segment, value)


def get_by_path(root: object, path: str) -> object | None:
    """Resolve path against root.

    Never raises for a missing path: returns None as soon as a segment is
    absent or the current value is not a container.

    Args:
        root: Mapping, sequence or object to read from
        path: Dotted/bracketed path (e.g., "second_level.title", "items[0].header")

    Returns:
        The value at path, or None
    """
    current: object = root
    for segment in normalize_path(path):
        if is_scalar(current):
            return None
        current = _lookup(current, segment)
        if current is _MISSING:
            return None
    return current


def set_by_path(root: object, path: str, value: T) -> T:
    """Assign value at path, creating missing intermediate containers.

    Args:
        root: Mapping, sequence or object to write into
        path: Dotted/bracketed path
        value: Value to assign at the final segment

    Returns:
        value, unchanged

    Raises:
        PathError: If root is None or a scalar, path is empty, an existing
            intermediate segment holds a scalar, or a segment cannot be
            assigned on its container
    """
    if is_scalar(root):
        raise PathError(ErrorTemplate.path_root_not_container(path, root))
    segments = normalize_path(path)
    if segments == [""]:
        raise PathError(ErrorTemplate.path_empty())

    current: object = root
    for position, segment in enumerate(segments[:-1]):
        child = _lookup(current, segment)
        if child is _MISSING or child is None:
            _assign(current, segment, [] if _is_index(segments[position + 1]) else {}, path)
            # Re-read: tracked containers may wrap what they were given
            child = _lookup(current, segment)
        elif is_scalar(child):
            raise PathError(ErrorTemplate.path_segment_not_container(path, segment, child))
        current = child

    _assign(current, segments[-1], value, path)
    return value
