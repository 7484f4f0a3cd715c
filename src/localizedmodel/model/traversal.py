"""Locale switch walk over a model graph.

LocaleWalker switches a root model, then searches its attributes
depth-first for further models:

    LocalizedModel            switched (same walker, same visited set)
    sequence                  searched only if its first element is an object
    mapping / plain object    searched

Strings, numbers, None, empty sequences and sequences of scalars are not
searched. Every object is visited once per walk (identity set), so self
links and ancestor back-links terminate.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import ModuleType

from localizedmodel.constants import MAX_DEPTH, RESERVED_ATTRIBUTES
from localizedmodel.core.depth_guard import DepthGuard
from localizedmodel.core.paths import is_scalar
from localizedmodel.types import LocaleCode

from .containers import LocalizedArray
from .model import LocalizedModel

__all__ = ["LocaleWalker"]

logger = logging.getLogger(__name__)


def _has_attributes(value: object) -> bool:
    return (
        hasattr(value, "__dict__")
        and not isinstance(value, (type, ModuleType))
        and not callable(value)
    )


class LocaleWalker:
    """Single-use walker applying one locale to a model graph.

    Example:
        >>> LocaleWalker("fr").localize_model(root)
    """

    __slots__ = ("_guard", "_locale", "_visited")

    def __init__(self, locale: LocaleCode, *, max_depth: int = MAX_DEPTH) -> None:
        self._locale = locale
        self._guard = DepthGuard(max_depth=max_depth)
        self._visited: set[int] = set()

    def localize_model(self, model: LocalizedModel) -> None:
        """Switch model to the walker's locale and search its attributes."""
        if self._mark(model):
            return
        with self._guard:
            logger.debug(
                "Switching %s to '%s' at depth %d",
                type(model).__name__,
                self._locale,
                self._guard.depth,
            )
            model._activate(self._locale)  # noqa: SLF001
            self._search(
                [value for name, value in vars(model).items() if name not in RESERVED_ATTRIBUTES]
            )

    def _mark(self, value: object) -> bool:
        """Record value as visited; True if it already was."""
        key = id(value)
        if key in self._visited:
            return True
        self._visited.add(key)
        return False

    def _search(self, values: Iterable[object]) -> None:
        for value in values:
            self._visit(value)

    def _visit(self, value: object) -> None:
        if is_scalar(value):
            return
        if isinstance(value, LocalizedModel):
            self.localize_model(value)
            return
        if isinstance(value, Mapping):
            children: Iterable[object] = list(value.values())
        elif isinstance(value, (list, tuple, LocalizedArray)):
            # Only arrays of objects are searched
            if not value or is_scalar(value[0]):  # type: ignore[index]
                return
            children = value  # type: ignore[assignment]
        elif _has_attributes(value):
            children = list(vars(value).values())
        else:
            return

        if self._mark(value):
            return
        with self._guard:
            self._search(children)
