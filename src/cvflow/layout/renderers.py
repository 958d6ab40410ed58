"""Block renderers.

Each renderer reserves the height it needs on the flow cursor, draws, then
advances the cursor. ``render_block`` dispatches on the block union.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from cvflow.constants.layout import Align, FontVariant
from cvflow.layout.wrap import greedy_wrap, justify_line, split_hard_lines
from cvflow.models.blocks import (
    Block,
    ItemHeader,
    Paragraph,
    SectionTitle,
    SkillRow,
    Spacer,
    TextLine,
)
from cvflow.services.sanitizer import clean_text, normalize_skill_list

if TYPE_CHECKING:
    from collections.abc import Callable

    from cvflow.constants.layout import LayoutConfig
    from cvflow.layout.flow import FlowCursor
    from cvflow.services.text_metrics import Canvas

__all__ = ["RenderContext", "render_block"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Everything a renderer needs for one document."""

    canvas: Canvas
    cursor: FlowCursor
    config: LayoutConfig

    def measurer(self, variant: FontVariant, size: float | None = None) -> Callable[[str], float]:
        font_size = size if size is not None else self.config.base_font_size

        def measure(text: str) -> float:
            return self.canvas.measure_width(text, variant, font_size)

        return measure


def render_block(block: Block, ctx: RenderContext) -> None:
    """Draw *block* at the cursor, breaking the page first if needed."""
    match block:
        case SectionTitle():
            _render_section_title(block, ctx)
        case ItemHeader():
            _render_item_header(block, ctx)
        case Paragraph():
            _render_paragraph(block, ctx)
        case SkillRow():
            _render_skill_row(block, ctx)
        case TextLine():
            _render_text_line(block, ctx)
        case Spacer():
            ctx.cursor.advance(block.height)
        case _:
            assert_never(block)


# ---------------------------------------------------------------------------
# Section titles and headers


def _render_section_title(block: SectionTitle, ctx: RenderContext) -> None:
    cfg = ctx.config
    ctx.cursor.reserve(cfg.section_title_reserve)
    ctx.cursor.advance(cfg.section_title_padding_before)

    y = ctx.cursor.y
    ctx.canvas.set_font(FontVariant.BOLD, cfg.base_font_size + 1)
    ctx.canvas.draw_text(cfg.margin, y, clean_text(block.text).upper())
    rule_y = y + cfg.section_rule_offset
    ctx.canvas.draw_rule(cfg.margin, rule_y, cfg.right_edge, rule_y, cfg.section_rule_thickness)
    ctx.cursor.advance(cfg.section_title_padding_after)


def _draw_flush_right(ctx: RenderContext, text: str, variant: FontVariant, y: float) -> None:
    size = ctx.config.base_font_size
    width = ctx.canvas.measure_width(text, variant, size)
    ctx.canvas.set_font(variant, size)
    ctx.canvas.draw_text(ctx.config.right_edge - width, y, text)


def _render_item_header(block: ItemHeader, ctx: RenderContext) -> None:
    cfg = ctx.config
    size = cfg.base_font_size
    ctx.cursor.reserve(cfg.item_header_reserve)

    ctx.canvas.set_font(FontVariant.BOLD, size)
    ctx.canvas.draw_text(cfg.margin, ctx.cursor.y, clean_text(block.left_bold))
    right = clean_text(block.right_text)
    if right:
        _draw_flush_right(ctx, right, block.right_variant, ctx.cursor.y)
    ctx.cursor.advance(cfg.line_height)

    italic = clean_text(block.left_italic)
    right2 = clean_text(block.right_text2)
    if italic or right2:
        if italic:
            ctx.canvas.set_font(FontVariant.ITALIC, size)
            ctx.canvas.draw_text(cfg.margin, ctx.cursor.y, italic)
        if right2:
            _draw_flush_right(ctx, right2, FontVariant.REGULAR, ctx.cursor.y)
        ctx.cursor.advance(cfg.line_height)

    if block.spacing_after:
        ctx.cursor.advance(block.spacing_after)


def _render_text_line(block: TextLine, ctx: RenderContext) -> None:
    text = clean_text(block.text)
    if not text:
        return

    cfg = ctx.config
    size = block.size if block.size is not None else cfg.base_font_size
    ctx.cursor.reserve(max(block.spacing_after, cfg.line_height))

    if block.align is Align.LEFT:
        x = cfg.margin
    else:
        width = ctx.canvas.measure_width(text, block.variant, size)
        x = (cfg.page_width - width) / 2 if block.align is Align.CENTER else cfg.right_edge - width

    ctx.canvas.set_font(block.variant, size)
    ctx.canvas.draw_text(x, ctx.cursor.y, text)
    ctx.cursor.advance(block.spacing_after)


# ---------------------------------------------------------------------------
# Paragraphs


def _justified_lines(text: str, ctx: RenderContext) -> list[tuple[str, bool]]:
    """Wrap *text* with the metrics backend; flag the last line of each hard paragraph."""
    size = ctx.config.base_font_size
    width = ctx.config.content_width
    lines: list[tuple[str, bool]] = []
    for segment in split_hard_lines(text):
        if not segment:
            lines.append(("", True))
            continue
        wrapped = ctx.canvas.wrap_to_width(segment, width, FontVariant.REGULAR, size)
        lines.extend((line, i == len(wrapped) - 1) for i, line in enumerate(wrapped))
    return lines


def _render_paragraph(block: Paragraph, ctx: RenderContext) -> None:
    text = clean_text(block.text)
    if not text:
        return

    cfg = ctx.config
    measure = ctx.measurer(FontVariant.REGULAR)
    if block.justify:
        lines = _justified_lines(text, ctx)
        line_height = ctx.canvas.line_height(cfg.base_font_size)
    else:
        lines = [(line, True) for line in greedy_wrap(text, cfg.content_width, measure)]
        line_height = cfg.line_height

    height = len(lines) * line_height + cfg.paragraph_padding
    # A block taller than a page is flowed line by line instead.
    per_line = height > ctx.cursor.usable_height
    if not per_line:
        ctx.cursor.reserve(height)

    ctx.canvas.set_font(FontVariant.REGULAR, cfg.base_font_size)
    for line, is_last in lines:
        if per_line:
            ctx.cursor.reserve(line_height)
            ctx.canvas.set_font(FontVariant.REGULAR, cfg.base_font_size)
        y = ctx.cursor.y
        if block.justify and not is_last:
            for offset, word in justify_line(line, cfg.content_width, measure):
                ctx.canvas.draw_text(cfg.margin + offset, y, word)
        elif line:
            ctx.canvas.draw_text(cfg.margin, y, line)
        ctx.cursor.advance(line_height)

    ctx.cursor.advance(cfg.paragraph_padding + cfg.paragraph_gap)


# ---------------------------------------------------------------------------
# Skill rows


def _render_skill_row(block: SkillRow, ctx: RenderContext) -> None:
    content = normalize_skill_list(block.content)
    if not content:
        logger.debug("Skipping empty skill row %r", block.label)
        return

    cfg = ctx.config
    label_width = ctx.canvas.measure_width(block.label, FontVariant.BOLD, cfg.base_font_size)
    lines = greedy_wrap(
        content,
        cfg.content_width,
        ctx.measurer(FontVariant.REGULAR),
        first_width=cfg.content_width - label_width,
    )
    height = len(lines) * cfg.line_height
    per_line = height > ctx.cursor.usable_height
    if not per_line:
        ctx.cursor.reserve(height)

    for i, line in enumerate(lines):
        if per_line:
            ctx.cursor.reserve(cfg.line_height)
        y = ctx.cursor.y
        if i == 0:
            ctx.canvas.set_font(FontVariant.BOLD, cfg.base_font_size)
            ctx.canvas.draw_text(cfg.margin, y, block.label)
        ctx.canvas.set_font(FontVariant.REGULAR, cfg.base_font_size)
        x = cfg.margin + label_width if i == 0 else cfg.margin
        ctx.canvas.draw_text(x, y, line)
        ctx.cursor.advance(cfg.line_height)
