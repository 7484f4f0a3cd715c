"""localizedmodel - runtime localization layer for structured data models.

A model holds one live value per translatable attribute while a hidden
Locale Store keeps that attribute's value in every known locale. Switching
the active locale rewrites every translatable attribute in place,
recursively across nested models, mappings and arrays.

Public API:
    LocalizedModel - Base class: localize(), init_localized_value(),
                     init_localized_array_value(), inflate_locales()
    LocalizedField - Declared translatable string attribute
    LocalizedObject - Tracked nested mapping (LocalizedModel.localize_object)
    LocalizedArray - Tracked array of mappings (LocalizedModel.localize_array)
    LocaleStore - Attribute path -> locale -> string
    get_by_path / set_by_path - Path accessor over nested containers

Exceptions:
    LocalizationError - Base exception class
    PathError - Path write on a non-container
    InvalidLocaleError - Malformed or (strict mode) unknown locale code
    DepthLimitExceededError - Model graph nested deeper than max_depth
    ArrayElementError - Non-mapping stored in a LocalizedArray

Submodules:
    localizedmodel.model - Locale Store, fields, containers, locale switch
    localizedmodel.core - Path accessor and depth guard
    localizedmodel.diagnostics - Error types, codes and templates
    localizedmodel.locale_utils - Locale code validation and Babel lookups
"""

from .core.paths import get_by_path, set_by_path
from .diagnostics import (
    ArrayElementError,
    DepthLimitExceededError,
    InvalidLocaleError,
    LocalizationError,
    PathError,
)
from .model import (
    LocaleStore,
    LocalizedArray,
    LocalizedField,
    LocalizedModel,
    LocalizedObject,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localizedmodel")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArrayElementError",
    "DepthLimitExceededError",
    "InvalidLocaleError",
    "LocaleStore",
    "LocalizationError",
    "LocalizedArray",
    "LocalizedField",
    "LocalizedModel",
    "LocalizedObject",
    "PathError",
    "__version__",
    "get_by_path",
    "set_by_path",
]
