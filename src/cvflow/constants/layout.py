"""Layout constants shared by the assembler and the block renderers.

All measurements are in millimetres except font sizes, which are points.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

__all__ = ["Align", "FontVariant", "LayoutConfig"]


class FontVariant(StrEnum):
    """Font style, spelled the way fpdf2 expects it in ``set_font``."""

    REGULAR = ""
    BOLD = "B"
    ITALIC = "I"


class Align(StrEnum):
    """Horizontal placement of a single text line."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class LayoutConfig:
    """Immutable page geometry and typography for one document.

    The defaults reproduce the one-page Harvard style CV: A4, 14 mm margins
    and a 10 pt body.
    """

    page_width: float = 210.0
    page_height: float = 297.0
    margin: float = 14.0
    font_family: str = "Helvetica"
    base_font_size: float = 10.0
    line_height: float = 4.5

    # Section titles
    section_title_reserve: float = 12.0
    section_title_padding_before: float = 3.0
    section_title_padding_after: float = 7.0
    section_rule_offset: float = 1.0
    section_rule_thickness: float = 0.5

    # Item headers (job, degree, certification, project)
    item_header_reserve: float = 9.0

    # Paragraphs
    paragraph_padding: float = 2.0
    paragraph_gap: float = 2.0

    # Document header
    name_font_size: float = 15.0
    headline_font_size: float = 11.0

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def right_edge(self) -> float:
        return self.page_width - self.margin

    @classmethod
    def letter(cls) -> LayoutConfig:
        """Geometry used for cover letters (wider margins, airier paragraphs)."""
        return cls(margin=20.0, paragraph_gap=3.0)

    def with_overrides(self, **changes: float | str) -> LayoutConfig:
        """Return a copy with *changes* applied."""
        return replace(self, **changes)
