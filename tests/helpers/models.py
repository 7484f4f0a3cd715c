"""Application models and wire payloads shared across tests.

Each model mirrors a typical consumer: it declares its translatable
surface, loads a wire payload in from_json() and rebuilds it in to_json().
"""

from __future__ import annotations

from typing import Any

from localizedmodel import LocalizedField, LocalizedModel

LOCALIZATIONS: dict[str, dict[str, str]] = {
    "en": {
        "header": "this is a header",
        "subHeader": "this is a subheader",
        "description": "this is a description",
    },
    "fr": {
        "header": "il s’agit d’un en-tête",
        "subHeader": "ceci est un sous-titre",
        "description": "il s’agit d’une description",
    },
}

TOP_LEVEL_JSON: dict[str, Any] = {"localizations": LOCALIZATIONS}
NESTED_JSON: dict[str, Any] = {"secondLevel": {"localizations": LOCALIZATIONS}}
ARRAY_JSON: dict[str, Any] = {"objArray": [{"localizations": LOCALIZATIONS}]}


class Card(LocalizedModel):
    """Top-level translatable fields; 'title' travels as 'subHeader'."""

    header = LocalizedField()
    description = LocalizedField()
    title = LocalizedField()

    def from_json(self, data: dict[str, Any]) -> Card:
        self.init_localized_value("header", data["localizations"])
        self.init_localized_value("description", data["localizations"])
        self.init_localized_value("title", data["localizations"], "subHeader")
        return self

    def to_json(self) -> dict[str, Any]:
        return {
            "localizations": self.inflate_locales(
                {"header": "header", "description": "description", "title": "subHeader"}
            )
        }


class NestedCard(LocalizedModel):
    """Translatable fields on a nested mapping."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.second_level = self.localize_object(
            "second_level", {"header": "", "title": "", "description": ""}
        )

    def from_json(self, data: dict[str, Any]) -> NestedCard:
        localizations = data["secondLevel"]["localizations"]
        self.init_localized_value("second_level.header", localizations, "header")
        self.init_localized_value("second_level.title", localizations, "subHeader")
        self.init_localized_value("second_level.description", localizations, "description")
        return self

    def to_json(self) -> dict[str, Any]:
        return {
            "secondLevel": {
                "localizations": self.inflate_locales(
                    {
                        "second_level.header": "header",
                        "second_level.title": "subHeader",
                        "second_level.description": "description",
                    }
                )
            }
        }


class CardList(LocalizedModel):
    """Translatable fields on every element of an array."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.items = self.localize_array("items", ["header", "title", "description"])

    def from_json(self, data: dict[str, Any]) -> CardList:
        for index, element in enumerate(data["objArray"]):
            localizations = element.get("localizations")
            self.items.append(
                {
                    "header": self.init_localized_array_value(
                        "items", index, "header", localizations
                    ),
                    "title": self.init_localized_array_value(
                        "items", index, "title", localizations, "subHeader"
                    ),
                    "description": self.init_localized_array_value(
                        "items", index, "description", localizations
                    ),
                }
            )
        return self

    def to_json(self) -> dict[str, Any]:
        return {
            "objArray": [
                {
                    "localizations": self.inflate_locales(
                        {
                            "items.{index}.header": "header",
                            "items.{index}.title": "subHeader",
                            "items.{index}.description": "description",
                        },
                        index,
                    )
                }
                for index in range(len(self.items))
            ]
        }
