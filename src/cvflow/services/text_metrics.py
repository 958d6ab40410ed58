"""Collaborator interfaces the layout engine draws and measures against.

The engine never computes glyph metrics or encodes PDF bytes itself. Any
object satisfying these protocols (fpdf2, a browser canvas bridge, a test
double) can be plugged in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from cvflow.constants.layout import FontVariant

__all__ = ["Canvas", "PageWriter", "TextMetrics"]


class TextMetrics(Protocol):
    """Deterministic, side-effect-free font measurements."""

    def measure_width(self, text: str, variant: FontVariant, size: float) -> float:
        """Width of *text* set in *variant* at *size* points."""
        ...

    def wrap_to_width(
        self,
        text: str,
        width: float,
        variant: FontVariant,
        size: float,
    ) -> list[str]:
        """Split *text* into lines no wider than *width*."""
        ...

    def line_height(self, size: float) -> float:
        """Vertical distance between two wrapped lines at *size* points."""
        ...


class PageWriter(Protocol):
    """Primitive drawing operations on a paged document."""

    @property
    def page_width(self) -> float: ...

    @property
    def page_height(self) -> float: ...

    @property
    def page_count(self) -> int: ...

    def add_page(self) -> None: ...

    def set_font(self, variant: FontVariant, size: float) -> None: ...

    def draw_text(self, x: float, y: float, text: str) -> None:
        """Draw *text* with its baseline starting at (*x*, *y*)."""
        ...

    def draw_rule(self, x1: float, y1: float, x2: float, y2: float, thickness: float) -> None: ...

    def output(self, path: Path) -> Path: ...


class Canvas(TextMetrics, PageWriter, Protocol):
    """A page writer that can also measure text."""
