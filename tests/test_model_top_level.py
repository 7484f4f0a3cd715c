"""Tests for top-level LocalizedField attributes of a LocalizedModel.

Covers loading a wire payload, switching locale, writing under the active
locale and symmetrical inflation.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from localizedmodel import LocalizedField
from tests.helpers.models import LOCALIZATIONS, TOP_LEVEL_JSON, Card

EN = LOCALIZATIONS["en"]
FR = LOCALIZATIONS["fr"]


class TestLoading:
    """init_localized_value applies the active locale immediately."""

    def test_default_english_attributes_are_set(self) -> None:
        card = Card().from_json(TOP_LEVEL_JSON)

        assert card.header == EN["header"]
        assert card.description == EN["description"]

    def test_custom_attribute_key_translation(self) -> None:
        """'title' is loaded from and inflated to the external key 'subHeader'."""
        card = Card().from_json(TOP_LEVEL_JSON)
        payload = card.to_json()

        assert card.title == EN["subHeader"]
        assert payload["localizations"]["en"]["subHeader"] == EN["subHeader"]

    def test_init_returns_applied_value(self) -> None:
        card = Card()

        assert card.init_localized_value("header", LOCALIZATIONS) == EN["header"]

    def test_absent_payload_leaves_empty_slot(self) -> None:
        card = Card()
        card.header = "kept"

        assert card.init_localized_value("header", None) == ""
        assert card.header == "kept"
        assert dict(card.locale_store["header"]) == {}

    def test_missing_field_loads_as_empty_string(self) -> None:
        card = Card().from_json({"localizations": {"en": {"header": "H"}, "fr": {}}})

        assert card.description == ""
        assert dict(card.locale_store["description"]) == {"en": "", "fr": ""}

    def test_active_locale_absent_from_payload(self) -> None:
        """Loading under a locale the payload lacks applies and backfills ''."""
        card = Card(locale="de").from_json(TOP_LEVEL_JSON)

        assert card.header == ""
        assert card.locale_store["header"]["de"] == ""

    def test_reload_replaces_previous_locales(self) -> None:
        card = Card().from_json(TOP_LEVEL_JSON)

        card.init_localized_value("header", {"es": {"header": "hola"}})

        assert dict(card.locale_store["header"]) == {"es": "hola", "en": ""}
        assert card.header == ""


class TestLocalize:
    """localize() swaps every tracked attribute."""

    def test_localize_will_swap_values(self) -> None:
        card = Card().from_json(TOP_LEVEL_JSON)
        assert card.header == EN["header"]

        card.localize("fr")

        assert card.header == FR["header"]
        assert card.title == FR["subHeader"]

    def test_round_trip(self) -> None:
        card = Card().from_json(TOP_LEVEL_JSON)

        card.localize("fr").localize("en")

        assert card.header == EN["header"]
        assert card.locale == "en"

    def test_unknown_locale_reads_empty(self) -> None:
        card = Card().from_json(TOP_LEVEL_JSON)

        card.localize("de")

        assert card.header == ""
        assert card.locale_store["header"]["de"] == ""

    def test_untracked_field_untouched(self) -> None:
        """Fields never written keep their default and stay untracked."""
        card = Card()

        card.localize("fr")

        assert card.header == ""
        assert "header" not in card.locale_store


class TestWriteUnderActiveLocale:
    """Assignments are mirrored into the store under the active locale."""

    def test_update_respective_locale_values(self) -> None:
        card = Card().from_json(TOP_LEVEL_JSON)
        card.header = "englishtest"
        card.localize("fr")
        card.header = "frenchtest"

        payload = card.to_json()

        assert payload["localizations"]["en"]["header"] == "englishtest"
        assert payload["localizations"]["fr"]["header"] == "frenchtest"

    def test_other_locales_unchanged(self) -> None:
        card = Card().from_json(TOP_LEVEL_JSON).localize("fr")

        card.header = "x"
        payload = card.to_json()

        assert payload["localizations"]["fr"]["header"] == "x"
        assert payload["localizations"]["en"]["header"] == EN["header"]
        assert payload["localizations"]["fr"]["description"] == FR["description"]

    def test_new_instance_setting_attribute_will_serialize(self) -> None:
        card = Card()
        card.header = "first value"
        card.localize("fr")
        card.header = "french value"

        payload = card.to_json()

        assert payload["localizations"]["en"]["header"] == "first value"
        assert payload["localizations"]["fr"]["header"] == "french value"


class TestSymmetry:
    """Every inflated locale carries every declared output key."""

    def test_serialization_is_symmetrical_for_empty_values(self) -> None:
        card = Card()
        card.header = "first value"
        card.localize("fr")
        card.header = "french value"

        localizations = card.to_json()["localizations"]

        assert localizations == {
            "en": {"header": "first value", "description": "", "subHeader": ""},
            "fr": {"header": "french value", "description": "", "subHeader": ""},
        }

    def test_fresh_model_inflates_to_nothing(self) -> None:
        assert Card().to_json() == {"localizations": {}}


class TestLocalizedField:
    """Descriptor behaviour."""

    def test_class_access_returns_descriptor(self) -> None:
        assert isinstance(Card.header, LocalizedField)
        assert Card.header.name == "header"

    def test_custom_default(self) -> None:
        class Banner(Card):
            caption = LocalizedField(default="(none)")

        banner = Banner()

        assert banner.caption == "(none)"
        assert "caption" not in banner.locale_store

    def test_write_stores_live_value(self) -> None:
        card = Card()

        card.header = "Hello"

        assert card.header == "Hello"
        assert dict(card.locale_store["header"]) == {"en": "Hello"}

    @pytest.mark.parametrize("locale", ["fr", "pt-BR", "zh_Hant"])
    def test_write_after_switch(self, locale: str) -> None:
        card = Card().localize(locale)

        card.header = "value"

        assert dict(card.locale_store["header"]) == {locale: "value"}
