"""Line breaking and justification.

Both functions take a ``measure`` callable so they stay independent of any
font backend; the renderers bind it to the current font and size.
"""

from __future__ import annotations

from collections.abc import Callable

from cvflow.utils.text import collapse_whitespace

__all__ = ["greedy_wrap", "justify_line", "split_hard_lines"]

Measure = Callable[[str], float]


def split_hard_lines(text: str) -> list[str]:
    """Split *text* on newlines, collapsing whitespace inside each line.

    Runs of blank lines shrink to one empty entry; leading and trailing blank
    lines are dropped.
    """
    segments: list[str] = []
    for raw in text.split("\n"):
        segment = collapse_whitespace(raw)
        if segment or (segments and segments[-1]):
            segments.append(segment)
    while segments and not segments[-1]:
        segments.pop()
    return segments


def greedy_wrap(
    text: str,
    width: float,
    measure: Measure,
    first_width: float | None = None,
) -> list[str]:
    """Pack as many whitespace-delimited tokens as fit on each line.

    Args:
        text: Text to wrap. Newlines force a break.
        width: Maximum line width.
        measure: Returns the rendered width of a string.
        first_width: Narrower budget for the very first line (hanging label).

    Returns:
        The lines, with single spaces between tokens. A token wider than the
        budget is placed alone on its line and never split.
    """
    lines: list[str] = []
    for segment in split_hard_lines(text):
        if not segment:
            lines.append("")
            continue

        current: list[str] = []
        for token in segment.split(" "):
            limit = first_width if first_width is not None and not lines else width
            if current and measure(" ".join([*current, token])) > limit:
                lines.append(" ".join(current))
                current = [token]
            else:
                current.append(token)
        if current:
            lines.append(" ".join(current))
    return lines


def justify_line(line: str, width: float, measure: Measure) -> list[tuple[float, str]]:
    """Place the words of *line* so the last one ends exactly at *width*.

    The leftover space is shared evenly between the gaps. The result depends
    only on the words, not on the spacing already present in *line*, so
    justifying a justified line gives the same offsets.

    Returns:
        ``(x_offset, word)`` pairs relative to the line start. A single word,
        or a line already too wide to stretch, keeps natural spacing.
    """
    words = line.split()
    if not words:
        return []

    widths = [measure(word) for word in words]
    space = measure(" ")
    if len(words) > 1:
        gap = (width - sum(widths)) / (len(words) - 1)
    else:
        gap = space
    if gap < space:
        gap = space

    placed: list[tuple[float, str]] = []
    x = 0.0
    for word, word_width in zip(words, widths, strict=True):
        placed.append((x, word))
        x += word_width + gap
    return placed
