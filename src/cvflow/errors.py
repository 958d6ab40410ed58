"""Exceptions raised by the layout engine."""

from __future__ import annotations

__all__ = ["DocumentGenerationError", "TextCoercionError"]


class TextCoercionError(ValueError):
    """Raised when a field value cannot be turned into text."""


class DocumentGenerationError(RuntimeError):
    """Raised when a document cannot be laid out.

    The underlying collaborator failure (an unmeasurable glyph, a writer error)
    is available as ``__cause__``.
    """
