"""Drawable blocks produced by the assembler.

A block is pure data with no position. ``Block`` is a closed union; the
renderer matches on it exhaustively, so adding a kind here means adding a
case there.
"""

from __future__ import annotations

from dataclasses import dataclass

from cvflow.constants.layout import Align, FontVariant

__all__ = [
    "Block",
    "ItemHeader",
    "Paragraph",
    "SectionTitle",
    "SkillRow",
    "Spacer",
    "TextLine",
]


@dataclass(frozen=True, slots=True)
class SectionTitle:
    text: str


@dataclass(frozen=True, slots=True)
class ItemHeader:
    """Two-line header of a dated entity (job, degree, certification).

    Line 1 is ``left_bold`` with ``right_text`` flush right. Line 2 holds
    ``left_italic`` and ``right_text2`` and is drawn when either is set.
    """

    left_bold: str
    right_text: str = ""
    left_italic: str | None = None
    right_text2: str | None = None
    right_variant: FontVariant = FontVariant.REGULAR
    spacing_after: float = 0.0


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str
    justify: bool = False


@dataclass(frozen=True, slots=True)
class SkillRow:
    label: str
    content: str


@dataclass(frozen=True, slots=True)
class TextLine:
    """A single unwrapped line, used for document and letter headings.

    ``size`` of ``None`` means the base font size.
    """

    text: str
    variant: FontVariant = FontVariant.REGULAR
    size: float | None = None
    align: Align = Align.LEFT
    spacing_after: float = 0.0


@dataclass(frozen=True, slots=True)
class Spacer:
    height: float


Block = SectionTitle | ItemHeader | Paragraph | SkillRow | TextLine | Spacer
