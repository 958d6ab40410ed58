"""Runtime configuration.

Layout defaults live in :class:`~cvflow.constants.layout.LayoutConfig`. A
deployment can override a few of them through environment variables (or a
``.env`` file):

- ``CVFLOW_MARGIN``: page margin in millimetres
- ``CVFLOW_BASE_FONT_SIZE``: body font size in points
- ``CVFLOW_LINE_HEIGHT``: fixed line advance in millimetres
- ``CVFLOW_LOCALE``: label set code (``fr`` or ``en``)
- ``CVFLOW_LOG_LEVEL``: log level used by the CLI
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from cvflow.constants.labels import LabelSet, get_labels
from cvflow.constants.layout import LayoutConfig

__all__ = ["get_locale", "get_log_level", "load_layout_config"]

logger = logging.getLogger(__name__)

load_dotenv()

_FLOAT_OVERRIDES = {
    "CVFLOW_MARGIN": "margin",
    "CVFLOW_BASE_FONT_SIZE": "base_font_size",
    "CVFLOW_LINE_HEIGHT": "line_height",
}


def load_layout_config(base: LayoutConfig | None = None) -> LayoutConfig:
    """Return *base* with any valid environment overrides applied.

    Values that are not positive numbers are logged and ignored.
    """
    config = base or LayoutConfig()
    changes: dict[str, float] = {}
    for env_name, field_name in _FLOAT_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a number", env_name, raw)
            continue
        if value <= 0:
            logger.warning("Ignoring %s=%r: must be positive", env_name, raw)
            continue
        changes[field_name] = value
    return config.with_overrides(**changes) if changes else config


def get_locale(default: str = "fr") -> LabelSet:
    """Return the label set named by ``CVFLOW_LOCALE``, else *default*."""
    code = os.getenv("CVFLOW_LOCALE") or default
    try:
        return get_labels(code)
    except ValueError:
        logger.warning("Ignoring CVFLOW_LOCALE=%r: unknown locale", code)
        return get_labels(default)


def get_log_level() -> str:
    return os.getenv("CVFLOW_LOG_LEVEL", "WARNING").upper()
