"""LocalizedModel: attributes with a hidden value per locale.

A model exposes one live value per translatable attribute (the active
locale's) while its LocaleStore keeps every locale. Translatable surfaces
are declared explicitly:

    LocalizedField          top-level string attribute
    localize_object()       nested mapping, tracked as "<path>.<key>"
    localize_array()        list of mappings, tracked as "<key>.<index>.<field>"

The serialization boundary is two-sided: init_localized_value() and
init_localized_array_value() load a wire locale dictionary into the store;
inflate_locales() rebuilds one for an outbound payload.

Example:
    >>> class Card(LocalizedModel):
    ...     header = LocalizedField()
    ...     title = LocalizedField()
    ...
    ...     def from_json(self, data):
    ...         self.init_localized_value("header", data["localizations"])
    ...         self.init_localized_value("title", data["localizations"], "subHeader")
    ...         return self
    ...
    ...     def to_json(self):
    ...         return {"localizations": self.inflate_locales(
    ...             {"header": "header", "title": "subHeader"})}
    >>> card = Card().from_json({"localizations": {
    ...     "en": {"header": "Hello", "subHeader": "World"},
    ...     "fr": {"header": "Bonjour", "subHeader": "Monde"}}})
    >>> card.header
    'Hello'
    >>> card.localize("fr").header
    'Bonjour'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Self

from localizedmodel.constants import (
    DEFAULT_LOCALE,
    EMPTY_VALUE,
    INDEX_PLACEHOLDER,
    MAX_DEPTH,
    PATH_SEPARATOR,
)
from localizedmodel.core.paths import get_by_path, normalize_path, set_by_path
from localizedmodel.diagnostics import InvalidLocaleError
from localizedmodel.diagnostics.templates import ErrorTemplate
from localizedmodel.locale_utils import is_known_locale, validate_locale_code
from localizedmodel.types import (
    AttributePath,
    InflatedLocales,
    LocaleCode,
    LocaleDict,
    OutputKey,
)

from .containers import LocalizedArray, LocalizedObject
from .store import LocaleStore

__all__ = ["LocalizedModel"]

logger = logging.getLogger(__name__)


class LocalizedModel:
    """Base class for models with translatable attributes.

    Attributes:
        locale: Active locale code (read-only; change it with localize())
        locale_store: Every locale's value of every tracked attribute path
        strict: Whether locale codes must be known to CLDR
    """

    def __init__(
        self,
        *,
        locale: LocaleCode = DEFAULT_LOCALE,
        strict: bool = False,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize an empty model.

        Args:
            locale: Initial active locale (default: "en")
            strict: Reject locale codes unknown to Babel's CLDR data, both in
                localize() and in wire dictionaries passed to the init methods
            max_depth: Maximum nesting depth walked by localize()

        Raises:
            InvalidLocaleError: If locale is malformed (or unknown, when strict)
        """
        self._strict = strict
        self._max_depth = max_depth
        self._locale_store = LocaleStore()
        self._locale: LocaleCode = self._check_locale(locale)

    @property
    def locale(self) -> LocaleCode:
        """Active locale code."""
        return self._locale

    @property
    def locale_store(self) -> LocaleStore:
        """Locale Store owned by this model."""
        return self._locale_store

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Every locale present in the Locale Store."""
        return self._locale_store.locales()

    @property
    def strict(self) -> bool:
        return self._strict

    # ------------------------------------------------------------------
    # Attribute interception
    # ------------------------------------------------------------------

    def _track_path(self, path: AttributePath) -> None:
        self._locale_store.ensure(path)

    def _track_write(self, path: AttributePath, value: object) -> None:
        self._locale_store.write(path, self._locale, value)  # type: ignore[arg-type]

    def _untrack_prefix(self, prefix: str) -> None:
        self._locale_store.discard_prefix(prefix)

    def _move_prefix(self, old: str, new: str) -> None:
        self._locale_store.move_prefix(old, new)

    def localize_object(
        self, path: AttributePath, data: Mapping[str, object] | None = None
    ) -> LocalizedObject:
        """Wrap a nested mapping so its item writes are tracked.

        Args:
            path: Attribute path of the mapping (e.g., "second_level")
            data: Mapping to wrap (default: a new empty dict)

        Returns:
            LocalizedObject writing through to data
        """
        return LocalizedObject(self, path, data)

    def localize_array(
        self, key: AttributePath, field_names: Iterable[str] = ()
    ) -> LocalizedArray:
        """Create a tracked array of mappings.

        Args:
            key: Attribute path of the array (e.g., "items")
            field_names: Translatable fields of every element

        Returns:
            Empty LocalizedArray
        """
        return LocalizedArray(self, key, field_names)

    # ------------------------------------------------------------------
    # Locale switch
    # ------------------------------------------------------------------

    def _check_locale(self, locale: LocaleCode) -> LocaleCode:
        validate_locale_code(locale)
        if self._strict and not is_known_locale(locale):
            logger.warning(
                "Rejected unknown locale '%s' in strict model %s", locale, type(self).__name__
            )
            raise InvalidLocaleError(ErrorTemplate.locale_unknown(locale))
        return locale

    def _apply_localized_value(self, path: AttributePath) -> str:
        value = self._locale_store.read(path, self._locale)
        set_by_path(self, path, value)
        return value

    def _addresses_missing_element(self, path: AttributePath) -> bool:
        """True when path runs through a LocalizedArray index that does not exist."""
        current: object = self
        for segment in normalize_path(path)[:-1]:
            child = get_by_path(current, segment)
            if child is None:
                return isinstance(current, LocalizedArray)
            current = child
        return False

    def _activate(self, locale: LocaleCode) -> None:
        """Set the active locale and re-apply every tracked path.

        Paths into LocalizedArray elements that do not exist are skipped;
        elements are only created by the array itself.
        """
        self._locale = self._check_locale(locale)
        for path in list(self._locale_store):
            if self._addresses_missing_element(path):
                logger.debug("Skipping %s: array element does not exist", path)
                continue
            self._apply_localized_value(path)

    def localize(self, locale: LocaleCode) -> Self:
        """Apply locale's strings to every translatable attribute.

        Switches this model, then walks its attribute graph depth-first:
        nested models are localized, mappings, objects and arrays of
        mappings/objects are searched for further models. Every object is
        visited at most once, so back-references terminate.

        Tracked paths with no value for locale read as empty strings (and
        are backfilled in the store).

        Args:
            locale: Locale to apply (e.g., "en", "fr", "ar")

        Returns:
            self, for chaining

        Raises:
            InvalidLocaleError: If locale is malformed (or unknown, when strict)
            DepthLimitExceededError: If the graph is nested deeper than max_depth
        """
        from .traversal import LocaleWalker  # noqa: PLC0415 - circular

        logger.debug("Localizing %s to '%s'", type(self).__name__, locale)
        LocaleWalker(locale, max_depth=self._max_depth).localize_model(self)
        return self

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def _copy_locales(
        self, path: AttributePath, locale_dict: LocaleDict, source_key: str
    ) -> dict[LocaleCode, str]:
        entries: dict[LocaleCode, str] = {}
        for locale, fields in locale_dict.items():
            if self._strict:
                self._check_locale(locale)
            entries[locale] = (fields or {}).get(source_key) or EMPTY_VALUE
        return self._locale_store.replace(path, entries)

    def init_localized_value(
        self,
        attr_key: AttributePath,
        locale_dict: LocaleDict | None,
        source_key: str | None = None,
    ) -> str:
        """Load one attribute from a wire locale dictionary.

        Replaces the slot for attr_key with locale_dict[locale][source_key]
        for every locale, then applies the active locale's value to the live
        attribute.

        Args:
            attr_key: Attribute path (e.g., "title", "second_level.title")
            locale_dict: Wire dictionary {locale: {field: value}}, or None
            source_key: Field name in locale_dict (default: attr_key)

        Returns:
            The applied value; empty string when locale_dict is None (the
            slot is left empty and the live attribute untouched)
        """
        self._copy_locales(attr_key, locale_dict or {}, source_key or attr_key)
        if locale_dict is None:
            return EMPTY_VALUE
        logger.debug("Loaded %s for locales %s", attr_key, list(locale_dict))
        return self._apply_localized_value(attr_key)

    def init_localized_array_value(
        self,
        arr_key: AttributePath,
        index: int,
        attr_key: str,
        locale_dict: LocaleDict | None,
        source_key: str | None = None,
    ) -> str:
        """Load one array element field from a wire locale dictionary.

        Same copy as init_localized_value() into "<arr_key>.<index>.<attr_key>",
        but nothing is applied: the element may not exist yet, so the caller
        places the returned value itself.

        Example:
            >>> items.append({
            ...     "header": model.init_localized_array_value("items", 0, "header", l10n),
            ... })

        Returns:
            The active locale's value, or empty string if absent
        """
        path = PATH_SEPARATOR.join((arr_key, str(index), attr_key))
        slot = self._copy_locales(path, locale_dict or {}, source_key or attr_key)
        return slot.get(self._locale, EMPTY_VALUE)

    def inflate_locales(
        self,
        path_map: Mapping[AttributePath, OutputKey],
        index: int | None = None,
    ) -> InflatedLocales:
        """Build a wire locale dictionary from the Locale Store.

        Every locale found in any mapped slot gets the full set of output
        keys; values missing for a locale are emitted as empty strings.

        Args:
            path_map: Attribute path -> output key. Paths may contain
                "{index}" (e.g., "items.{index}.title")
            index: Replaces "{index}" in every path when given

        Returns:
            {locale: {output_key: value}}

        Example:
            >>> model.inflate_locales({"title": "subHeader"})
            {'en': {'subHeader': 'World'}, 'fr': {'subHeader': 'Monde'}}
        """
        inflated: InflatedLocales = {}
        for path, output_key in path_map.items():
            if index is not None:
                path = path.replace(INDEX_PLACEHOLDER, str(index))
            slot = self._locale_store.get(path)
            if slot is None:
                continue
            for locale, value in slot.items():
                inflated.setdefault(locale, {})[output_key] = value or EMPTY_VALUE

        for fields in inflated.values():
            for output_key in path_map.values():
                fields.setdefault(output_key, EMPTY_VALUE)
        return inflated

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self._locale!r}, paths={len(self._locale_store)})"
