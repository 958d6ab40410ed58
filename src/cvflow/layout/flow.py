"""Vertical flow cursor and page-break logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cvflow.constants.layout import LayoutConfig
    from cvflow.services.text_metrics import PageWriter

__all__ = ["FlowCursor", "FlowState"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FlowState:
    """Mutable position of the flow within one document.

    Attributes:
        page_index: Zero-based index of the page being filled.
        cursor_y: Baseline of the next line, measured from the page top.
        page_height: Height of every page.
        margin: Top, bottom and side margin.
        content_width: Width available between the side margins.
    """

    page_index: int
    cursor_y: float
    page_height: float
    margin: float
    content_width: float

    @property
    def bottom_limit(self) -> float:
        return self.page_height - self.margin


class FlowCursor:
    """Drives pagination for a single document.

    Renderers call :meth:`reserve` with the height they are about to draw,
    then :meth:`advance` once they have drawn it. A cursor belongs to one
    generation call and is discarded with it.
    """

    def __init__(self, writer: PageWriter, config: LayoutConfig) -> None:
        self._writer = writer
        self.state = FlowState(
            page_index=0,
            cursor_y=config.margin,
            page_height=config.page_height,
            margin=config.margin,
            content_width=config.content_width,
        )

    @property
    def y(self) -> float:
        return self.state.cursor_y

    @property
    def page_index(self) -> int:
        return self.state.page_index

    @property
    def usable_height(self) -> float:
        """Height between the top and bottom margins of an empty page."""
        return self.state.page_height - 2 * self.state.margin

    def fits(self, height: float) -> bool:
        """Return ``True`` if *height* fits below the cursor on this page."""
        return self.state.cursor_y + height <= self.state.bottom_limit

    def reserve(self, height: float) -> None:
        """Start a new page unless *height* fits on the current one."""
        if self.fits(height):
            return
        self._writer.add_page()
        self.state.page_index += 1
        self.state.cursor_y = self.state.margin
        logger.debug(
            "Page break before a %.1f mm block, now on page %d",
            height,
            self.state.page_index + 1,
        )

    def advance(self, height: float) -> None:
        """Move the cursor down by *height* after drawing."""
        self.state.cursor_y += height
