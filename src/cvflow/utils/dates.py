"""Date formatting for item headers and letter headings."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cvflow.constants.labels import LabelSet

__all__ = ["DATE_RANGE_SEPARATOR", "format_date_range", "format_letter_date"]

DATE_RANGE_SEPARATOR = " – "


def format_date_range(
    start: str | None,
    end: str | None,
    is_current: bool = False,
    present: str = "Present",
) -> str:
    """Return a range like ``2021-09 – 2023-06``.

    Dates are shown as given (the profile stores ``YYYY-MM``). A current
    position ends with *present* instead of the end date, so the dash is
    never followed by an empty string.
    """
    start_str = (start or "").strip()
    end_str = present if is_current else (end or "").strip()

    if start_str and end_str:
        return f"{start_str}{DATE_RANGE_SEPARATOR}{end_str}"
    return start_str or end_str


def format_letter_date(day: date, labels: LabelSet) -> str:
    """Format *day* the way the letter heading expects (``Le 3 mars 2026``)."""
    return labels.letter_date.format(
        day=day.day,
        month=labels.months[day.month - 1],
        year=day.year,
    )
