"""Document generation service.

Assembles blocks from a profile (or a cover letter), flows them onto pages
of a canvas and returns the finished document. Writing bytes is left to the
canvas.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from cvflow.constants.labels import FRENCH
from cvflow.constants.layout import LayoutConfig
from cvflow.errors import DocumentGenerationError, TextCoercionError
from cvflow.layout.flow import FlowCursor
from cvflow.layout.renderers import RenderContext, render_block
from cvflow.services.assembler import assemble_cv, assemble_letter
from cvflow.services.fpdf_backend import FpdfCanvas
from cvflow.services.sanitizer import clean_text, prepare_letter

if TYPE_CHECKING:
    from cvflow.constants.labels import LabelSet
    from cvflow.models.blocks import Block
    from cvflow.models.profile import Profile
    from cvflow.services.text_metrics import Canvas

__all__ = [
    "RenderedDocument",
    "build_cover_letter_pdf",
    "build_cv_pdf",
    "cv_filename",
    "generate_cover_letter",
    "generate_cv",
    "letter_filename",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderedDocument:
    """A fully laid out document, ready to be written by its canvas.

    Attributes:
        canvas: The page writer holding the drawn pages.
        page_count: Number of pages used.
        filename: Suggested file name for the export.
        subject: Resolved subject line (cover letters only).
    """

    canvas: Canvas
    page_count: int
    filename: str
    subject: str | None = None

    def save(self, output_dir: Path) -> Path:
        """Write the document as ``output_dir / filename``."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        return self.canvas.output(output_dir / self.filename)


# -----------------------------------------------------------------------
# File names


def _sanitize_filename(name: str) -> str:
    """Replace characters that are invalid in file names."""
    sanitized = re.sub(r'[<>:"/\\|?*]', "_", name)
    return sanitized.strip(". ")


def cv_filename(profile: Profile) -> str:
    name = re.sub(r"\s+", "_", clean_text(profile.full_name))
    return f"CV_{_sanitize_filename(name) or 'profile'}_Harvard.pdf"


def letter_filename(profile: Profile, labels: LabelSet = FRENCH) -> str:
    parts = clean_text(profile.full_name).split()
    first_name = _sanitize_filename(parts[0]) if parts else ""
    return f"{labels.letter_file_prefix}_{first_name or 'candidat'}.pdf"


# -----------------------------------------------------------------------
# Layout


def _fit_to_canvas(config: LayoutConfig, canvas: Canvas) -> LayoutConfig:
    """Use the canvas page size when it differs from *config*."""
    if (config.page_width, config.page_height) == (canvas.page_width, canvas.page_height):
        return config
    return config.with_overrides(page_width=canvas.page_width, page_height=canvas.page_height)


def _flow(blocks: list[Block], canvas: Canvas, config: LayoutConfig) -> int:
    """Render *blocks* in order and return the number of pages used."""
    cursor = FlowCursor(canvas, config)
    ctx = RenderContext(canvas=canvas, cursor=cursor, config=config)
    for block in blocks:
        render_block(block, ctx)
    return cursor.page_index + 1


# -----------------------------------------------------------------------
# Public API


def generate_cv(
    profile: Profile,
    target_job_title: str,
    canvas: Canvas,
    *,
    config: LayoutConfig | None = None,
    labels: LabelSet = FRENCH,
) -> RenderedDocument:
    """Lay out the CV of *profile* on *canvas*.

    Args:
        profile: Read-only profile snapshot.
        target_job_title: Used as the headline when the profile has none.
        canvas: Measuring page writer; must have its first page open.
        config: Page geometry and typography.
        labels: Section titles and localized tokens.

    Raises:
        TextCoercionError: If a field cannot be turned into text.
        DocumentGenerationError: If the canvas fails to measure or draw.
    """
    config = _fit_to_canvas(config or LayoutConfig(), canvas)
    try:
        blocks = assemble_cv(profile, target_job_title, labels, config)
        pages = _flow(blocks, canvas, config)
    except TextCoercionError:
        raise
    except Exception as exc:
        logger.exception("Failed to lay out CV for %s", profile.full_name)
        msg = f"Could not lay out the CV: {exc}"
        raise DocumentGenerationError(msg) from exc

    logger.info("Laid out CV with %d blocks on %d page(s)", len(blocks), pages)
    return RenderedDocument(canvas=canvas, page_count=pages, filename=cv_filename(profile))


def generate_cover_letter(
    profile: Profile,
    company: str,
    job_title: str,
    body: str,
    canvas: Canvas,
    *,
    config: LayoutConfig | None = None,
    labels: LabelSet = FRENCH,
    today: date | None = None,
) -> RenderedDocument:
    """Clean the AI-written *body* and lay the letter out on *canvas*.

    The subject line is pulled out of the body (or synthesized from
    *job_title*) and the trailing contact footer is removed, since the
    letter heading already identifies the candidate.

    Raises:
        TextCoercionError: If an input cannot be turned into text.
        DocumentGenerationError: If the canvas fails to measure or draw.
    """
    config = _fit_to_canvas(config or LayoutConfig.letter(), canvas)
    try:
        letter = prepare_letter(body, job_title, profile.full_name, labels)
        blocks = assemble_letter(company, letter, labels, today)
        pages = _flow(blocks, canvas, config)
    except TextCoercionError:
        raise
    except Exception as exc:
        logger.exception("Failed to lay out cover letter for %s", profile.full_name)
        msg = f"Could not lay out the cover letter: {exc}"
        raise DocumentGenerationError(msg) from exc

    logger.info("Laid out cover letter on %d page(s)", pages)
    return RenderedDocument(
        canvas=canvas,
        page_count=pages,
        filename=letter_filename(profile, labels),
        subject=letter.subject,
    )


def build_cv_pdf(
    profile: Profile,
    target_job_title: str,
    output_path: Path,
    *,
    config: LayoutConfig | None = None,
    labels: LabelSet = FRENCH,
) -> Path:
    """Render a CV with fpdf2 and write it to *output_path*."""
    config = config or LayoutConfig()
    canvas = FpdfCanvas(config.font_family)
    generate_cv(profile, target_job_title, canvas, config=config, labels=labels)
    return canvas.output(Path(output_path))


def build_cover_letter_pdf(
    profile: Profile,
    company: str,
    job_title: str,
    body: str,
    output_path: Path,
    *,
    config: LayoutConfig | None = None,
    labels: LabelSet = FRENCH,
    today: date | None = None,
) -> Path:
    """Render a cover letter with fpdf2 and write it to *output_path*."""
    config = config or LayoutConfig.letter()
    canvas = FpdfCanvas(config.font_family)
    generate_cover_letter(
        profile,
        company,
        job_title,
        body,
        canvas,
        config=config,
        labels=labels,
        today=today,
    )
    return canvas.output(Path(output_path))
