"""Locale Store: attribute path -> locale code -> string.

The store is the source of truth for every locale of every tracked
attribute; live attributes only ever hold the active locale's value.
It is owned by exactly one LocalizedModel.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from localizedmodel.constants import EMPTY_VALUE
from localizedmodel.types import AttributePath, LocaleCode, LocaleEntries

__all__ = ["LocaleStore"]

logger = logging.getLogger(__name__)


class LocaleStore(Mapping[AttributePath, Mapping[LocaleCode, str]]):
    """Per-attribute locale values with explicit mutators.

    Reads through the Mapping interface return read-only views; all
    mutation goes through ensure/write/read/replace and the prefix methods so the
    "tracked paths always read as strings" invariant holds.

    Example:
        >>> store = LocaleStore()
        >>> store.write("header", "en", "Hello")
        >>> store.read("header", "fr")
        ''
        >>> dict(store["header"])
        {'en': 'Hello', 'fr': ''}
    """

    __slots__ = ("_slots",)

    def __init__(self) -> None:
        self._slots: dict[AttributePath, LocaleEntries] = {}

    def __getitem__(self, path: AttributePath) -> Mapping[LocaleCode, str]:
        return MappingProxyType(self._slots[path])

    def __iter__(self) -> Iterator[AttributePath]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, path: object) -> bool:
        return path in self._slots

    def __repr__(self) -> str:
        return f"LocaleStore({self._slots!r})"

    def ensure(self, path: AttributePath) -> LocaleEntries:
        """Return the slot for path, creating an empty one if absent."""
        slot = self._slots.get(path)
        if slot is None:
            slot = self._slots[path] = {}
            logger.debug("Tracking attribute path: %s", path)
        return slot

    def write(self, path: AttributePath, locale: LocaleCode, value: str) -> None:
        """Store value for path under locale, tracking path if needed."""
        self.ensure(path)[locale] = value

    def read(self, path: AttributePath, locale: LocaleCode) -> str:
        """Return path's value for locale, backfilling EMPTY_VALUE if missing.

        Raises:
            KeyError: If path is not tracked
        """
        return self._slots[path].setdefault(locale, EMPTY_VALUE)

    def replace(
        self, path: AttributePath, entries: Mapping[LocaleCode, str] | None = None
    ) -> LocaleEntries:
        """Overwrite path's slot with entries (empty slot when None)."""
        slot = self._slots[path] = dict(entries) if entries else {}
        return slot

    def discard_prefix(self, prefix: str) -> int:
        """Remove every path starting with prefix.

        Returns:
            Number of paths removed
        """
        doomed = [path for path in self._slots if path.startswith(prefix)]
        for path in doomed:
            del self._slots[path]
        if doomed:
            logger.debug("Discarded %d attribute paths under %s", len(doomed), prefix)
        return len(doomed)

    def move_prefix(self, old: str, new: str) -> int:
        """Re-key every path starting with old to start with new instead.

        Slots already tracked under the new path are overwritten.

        Returns:
            Number of paths moved
        """
        moving = [path for path in self._slots if path.startswith(old)]
        for path in moving:
            self._slots[new + path[len(old):]] = self._slots.pop(path)
        if moving:
            logger.debug("Moved %d attribute paths from %s to %s", len(moving), old, new)
        return len(moving)

    def locales(self) -> tuple[LocaleCode, ...]:
        """Every locale present in any slot, in first-seen order."""
        seen: dict[LocaleCode, None] = {}
        for slot in self._slots.values():
            seen.update(dict.fromkeys(slot))
        return tuple(seen)
