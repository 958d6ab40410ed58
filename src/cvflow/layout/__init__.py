"""Pagination and block rendering."""

from cvflow.layout.flow import FlowCursor, FlowState
from cvflow.layout.renderers import RenderContext, render_block
from cvflow.layout.wrap import greedy_wrap, justify_line, split_hard_lines

__all__ = [
    "FlowCursor",
    "FlowState",
    "RenderContext",
    "greedy_wrap",
    "justify_line",
    "render_block",
    "split_hard_lines",
]
