from __future__ import annotations

from cvflow.constants.labels import (
    ENGLISH,
    FRENCH,
    LabelSet,
    SanitizerRules,
    get_labels,
    list_labels,
)
from cvflow.constants.layout import Align, FontVariant, LayoutConfig

__all__ = [
    "Align",
    "ENGLISH",
    "FRENCH",
    "FontVariant",
    "LabelSet",
    "LayoutConfig",
    "SanitizerRules",
    "get_labels",
    "list_labels",
]
