"""Utility functions and helpers"""

from cvflow.utils.dates import format_date_range, format_letter_date
from cvflow.utils.text import coerce_text, collapse_whitespace, strip_protocol

__all__ = [
    "coerce_text",
    "collapse_whitespace",
    "format_date_range",
    "format_letter_date",
    "strip_protocol",
]
