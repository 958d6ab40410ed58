"""Text coercion helpers shared by the data models and the sanitizer."""

from __future__ import annotations

import re
from typing import Any

from cvflow.errors import TextCoercionError

__all__ = ["coerce_text", "collapse_whitespace", "strip_protocol"]

_WHITESPACE = re.compile(r"\s+")
_PROTOCOL = re.compile(r"^https?://")


def coerce_text(value: Any) -> str:
    """Return *value* as a string.

    ``None`` becomes ``""``; strings are returned unchanged.

    Raises:
        TextCoercionError: If ``str(value)`` itself fails.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as exc:
        msg = f"Cannot convert {type(value).__name__} value to text"
        raise TextCoercionError(msg) from exc


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def strip_protocol(url: str) -> str:
    """Remove a leading ``http://`` or ``https://``."""
    return _PROTOCOL.sub("", url)
