"""Declared translatable attributes.

A LocalizedField is a data descriptor: assigning to it mirrors the value
into the owning model's Locale Store under the active locale, then stores
the live value on the instance.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from localizedmodel.constants import EMPTY_VALUE

if TYPE_CHECKING:
    from .model import LocalizedModel

__all__ = ["LocalizedField"]


class LocalizedField:
    """Translatable string attribute of a LocalizedModel.

    Example:
        >>> class Card(LocalizedModel):
        ...     header = LocalizedField()
        >>> card = Card()
        >>> card.header = "Hello"
        >>> dict(card.locale_store["header"])
        {'en': 'Hello'}

    Reading a field that was never assigned returns the default without
    tracking the attribute.
    """

    __slots__ = ("default", "name")

    def __init__(self, default: str = EMPTY_VALUE) -> None:
        self.default = default
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> LocalizedField: ...
    @overload
    def __get__(self, instance: LocalizedModel, owner: type | None = None) -> str: ...

    def __get__(
        self, instance: LocalizedModel | None, owner: type | None = None
    ) -> LocalizedField | str:
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance: LocalizedModel, value: str) -> None:
        instance._track_write(self.name, value)  # noqa: SLF001
        instance.__dict__[self.name] = value

    def __repr__(self) -> str:
        return f"LocalizedField(name={self.name!r}, default={self.default!r})"
