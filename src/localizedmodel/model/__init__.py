"""Localized models: Locale Store, tracked fields and containers, locale switch.

Submodules:
    store      - LocaleStore (attribute path -> locale -> string)
    fields     - LocalizedField descriptor
    containers - LocalizedObject, LocalizedArray
    model      - LocalizedModel (interception, localize, init/inflate)
    traversal  - LocaleWalker (recursive locale switch)

Python 3.13+.
"""

from .containers import LocalizedArray, LocalizedObject
from .fields import LocalizedField
from .model import LocalizedModel
from .store import LocaleStore
from .traversal import LocaleWalker

__all__ = [
    "LocaleStore",
    "LocaleWalker",
    "LocalizedArray",
    "LocalizedField",
    "LocalizedModel",
    "LocalizedObject",
]
