"""Tracked nested containers.

LocalizedObject mirrors item writes on a nested mapping into the owning
model's Locale Store under "<path>.<key>". LocalizedArray wraps every
element as a LocalizedObject keyed by its current index. Removing an
element discards its store entries; removal and insertion before the end
move the entries of the elements that shift to their new index.

Reordering in place (reverse, item swaps) is not re-keyed: only the
active locale's field values follow the moved elements.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, MutableSequence
from typing import TYPE_CHECKING, overload

from localizedmodel.constants import PATH_SEPARATOR
from localizedmodel.diagnostics import ArrayElementError
from localizedmodel.diagnostics.templates import ErrorTemplate
from localizedmodel.types import AttributePath

if TYPE_CHECKING:
    from .model import LocalizedModel

__all__ = ["LocalizedArray", "LocalizedObject"]


class LocalizedObject(MutableMapping[str, object]):
    """Mapping whose item writes are tracked under "<path>.<key>".

    Writes go through to the wrapped mapping, so callers holding the
    original dict observe them.

    Deleting a key removes it from the mapping only; its store entry stays.
    """

    __slots__ = ("_data", "_model", "_path")

    def __init__(
        self,
        model: LocalizedModel,
        path: AttributePath,
        data: Mapping[str, object] | None = None,
    ) -> None:
        self._model = model
        self._path = path
        if isinstance(data, LocalizedObject):
            data = data._data
        self._data: MutableMapping[str, object] = (
            data if isinstance(data, MutableMapping) else dict(data or {})
        )

    @property
    def path(self) -> AttributePath:
        """Attribute path prefix of this object's fields."""
        return self._path

    def __getitem__(self, key: str) -> object:
        return self._data[key]

    def __setitem__(self, key: str, value: object) -> None:
        self._model._track_write(f"{self._path}{PATH_SEPARATOR}{key}", value)  # noqa: SLF001
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"LocalizedObject({self._path!r}, {dict(self._data)!r})"


class LocalizedArray(MutableSequence[LocalizedObject]):
    """Sequence of tracked mappings keyed by "<key>.<index>".

    Storing a mapping at an index wraps it as a LocalizedObject and, for
    every declared field name, tracks "<key>.<index>.<field>", writing the
    mapping's value under the active locale when it is non-empty.

    Example:
        >>> items = model.localize_array("items", ["header", "title"])
        >>> items.append({"header": "Hello"})
        >>> dict(model.locale_store["items.0.header"])
        {'en': 'Hello'}
        >>> _ = items.pop()
        >>> "items.0.header" in model.locale_store
        False
    """

    __slots__ = ("_field_names", "_items", "_key", "_model")

    def __init__(
        self,
        model: LocalizedModel,
        key: AttributePath,
        field_names: Iterable[str] = (),
    ) -> None:
        self._model = model
        self._key = key
        self._field_names: tuple[str, ...] = tuple(field_names)
        self._items: list[LocalizedObject] = []

    @property
    def key(self) -> AttributePath:
        """Attribute path of the array itself."""
        return self._key

    @property
    def field_names(self) -> tuple[str, ...]:
        """Translatable fields tracked for every element."""
        return self._field_names

    def _resolve(self, index: int) -> int:
        position = index + len(self._items) if index < 0 else index
        if not 0 <= position < len(self._items):
            msg = "LocalizedArray index out of range"
            raise IndexError(msg)
        return position

    def _element_path(self, position: int) -> AttributePath:
        return f"{self._key}{PATH_SEPARATOR}{position}"

    def _wrap(self, position: int, value: object) -> LocalizedObject:
        element_path = self._element_path(position)
        if not isinstance(value, Mapping):
            raise ArrayElementError(
                ErrorTemplate.array_element_not_mapping(element_path, value)
            )
        return LocalizedObject(self._model, element_path, value)

    def _track_fields(self, element: LocalizedObject) -> None:
        for name in self._field_names:
            path = f"{element.path}{PATH_SEPARATOR}{name}"
            self._model._track_path(path)  # noqa: SLF001
            field_value = element.get(name)
            if field_value:
                self._model._track_write(path, field_value)  # noqa: SLF001

    def _rekey(self, positions: Iterable[int], offset: int) -> None:
        """Re-key elements that moved by offset to their current positions.

        positions must be ordered so that each target prefix has already
        been vacated when it is written.
        """
        for position in positions:
            old_path = self._element_path(position - offset)
            new_path = self._element_path(position)
            self._model._move_prefix(  # noqa: SLF001
                f"{old_path}{PATH_SEPARATOR}", f"{new_path}{PATH_SEPARATOR}"
            )
            self._items[position]._path = new_path  # noqa: SLF001

    @overload
    def __getitem__(self, index: int) -> LocalizedObject: ...
    @overload
    def __getitem__(self, index: slice) -> list[LocalizedObject]: ...

    def __getitem__(
        self, index: int | slice
    ) -> LocalizedObject | list[LocalizedObject]:
        return self._items[index]

    def __setitem__(  # type: ignore[override]
        self, index: int, value: Mapping[str, object]
    ) -> None:
        if isinstance(index, slice):
            msg = "LocalizedArray does not support slice assignment"
            raise TypeError(msg)
        position = self._resolve(index)
        element = self._wrap(position, value)
        self._items[position] = element
        self._track_fields(element)

    def __delitem__(self, index: int | slice) -> None:
        """Remove an element and its entries, moving later entries down one index."""
        if isinstance(index, slice):
            for position in sorted(range(*index.indices(len(self._items))), reverse=True):
                del self[position]
            return
        position = self._resolve(index)
        self._model._untrack_prefix(  # noqa: SLF001
            f"{self._element_path(position)}{PATH_SEPARATOR}"
        )
        del self._items[position]
        self._rekey(range(position, len(self._items)), -1)

    def __len__(self) -> int:
        return len(self._items)

    def insert(  # type: ignore[override]
        self, index: int, value: Mapping[str, object]
    ) -> None:
        """Insert value before index, clamped like list.insert.

        Entries of the elements after the insertion point move up one index.
        """
        size = len(self._items)
        position = max(0, index + size) if index < 0 else min(index, size)
        element = self._wrap(position, value)
        self._items.insert(position, element)
        self._rekey(range(size, position, -1), 1)
        self._track_fields(element)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LocalizedArray):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LocalizedArray({self._key!r}, {self._items!r})"
