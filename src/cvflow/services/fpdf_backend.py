"""fpdf2 implementation of the measuring and drawing collaborators."""

from __future__ import annotations

from pathlib import Path

from fpdf import FPDF
from fpdf.enums import MethodReturnValue

from cvflow.constants.layout import FontVariant

__all__ = ["FpdfCanvas"]

# jsPDF and most word processors space lines at 1.15 em.
LINE_HEIGHT_FACTOR = 1.15


class FpdfCanvas:
    """Measure and draw on an A4 ``FPDF`` document in millimetres.

    The first page is opened on construction. Core fonts are encoded as
    windows-1252 so en-dashes, curly quotes and bullets can be drawn;
    characters outside that code page make fpdf2 raise, and the error is left
    to propagate.
    """

    def __init__(self, font_family: str = "Helvetica") -> None:
        self._family = font_family
        self._pdf = FPDF(orientation="P", unit="mm", format="A4")
        self._pdf.core_fonts_encoding = "windows-1252"
        # Pagination is driven by the flow cursor, never by fpdf2.
        self._pdf.set_auto_page_break(auto=False)
        self._pdf.c_margin = 0
        self._pdf.set_draw_color(0, 0, 0)
        self._pdf.add_page()
        self.set_font(FontVariant.REGULAR, 10)

    # ------------------------------------------------------------------
    # PageWriter
    # ------------------------------------------------------------------

    @property
    def page_width(self) -> float:
        return self._pdf.w

    @property
    def page_height(self) -> float:
        return self._pdf.h

    @property
    def page_count(self) -> int:
        return self._pdf.pages_count

    def add_page(self) -> None:
        self._pdf.add_page()

    def set_font(self, variant: FontVariant, size: float) -> None:
        self._pdf.set_font(self._family, str(variant), size)

    def draw_text(self, x: float, y: float, text: str) -> None:
        self._pdf.text(x, y, text)

    def draw_rule(self, x1: float, y1: float, x2: float, y2: float, thickness: float) -> None:
        self._pdf.set_line_width(thickness)
        self._pdf.line(x1, y1, x2, y2)

    def output(self, path: Path) -> Path:
        path = Path(path)
        self._pdf.output(str(path))
        return path

    def to_bytes(self) -> bytes:
        return bytes(self._pdf.output())

    # ------------------------------------------------------------------
    # TextMetrics
    # ------------------------------------------------------------------

    def measure_width(self, text: str, variant: FontVariant, size: float) -> float:
        self.set_font(variant, size)
        return self._pdf.get_string_width(text)

    def wrap_to_width(
        self,
        text: str,
        width: float,
        variant: FontVariant,
        size: float,
    ) -> list[str]:
        if not text:
            return []
        self.set_font(variant, size)
        lines = self._pdf.multi_cell(
            width,
            self.line_height(size),
            text,
            dry_run=True,
            output=MethodReturnValue.LINES,
        )
        return [line.strip() for line in lines]

    def line_height(self, size: float) -> float:
        return size * LINE_HEIGHT_FACTOR / self._pdf.k
