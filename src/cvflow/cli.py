from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from cvflow.config import get_locale, get_log_level, load_layout_config
from cvflow.constants.labels import get_labels, list_labels
from cvflow.constants.layout import LayoutConfig
from cvflow.errors import DocumentGenerationError
from cvflow.models.profile import GeneratedContent, Profile
from cvflow.services.document_generator import (
    RenderedDocument,
    generate_cover_letter,
    generate_cv,
)
from cvflow.services.fpdf_backend import FpdfCanvas


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvflow",
        description="Lay out a CV or a cover letter as a PDF.",
    )
    parser.add_argument(
        "--locale",
        choices=list_labels(),
        default=None,
        help="Label language (defaults to CVFLOW_LOCALE, then fr)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    cv = sub.add_parser("cv", help="Render a CV from a profile JSON file")
    cv.add_argument("profile", type=Path, help="Profile JSON file")
    cv.add_argument("output", type=Path, help="Output PDF file or directory")
    cv.add_argument("--target", default="", help="Target job title for the headline")

    letter = sub.add_parser("letter", help="Render a cover letter")
    letter.add_argument("profile", type=Path, help="Profile JSON file")
    letter.add_argument(
        "letter",
        type=Path,
        help="Letter body as plain text, or a generated-content JSON file",
    )
    letter.add_argument("output", type=Path, help="Output PDF file or directory")
    letter.add_argument("--company", default="", help="Company the letter is sent to")
    letter.add_argument("--job-title", default="", help="Job title applied for")
    return parser


def _load_profile(path: Path) -> Profile:
    return Profile.model_validate_json(path.read_text(encoding="utf-8"))


def _load_letter_body(path: Path) -> str:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return GeneratedContent.model_validate_json(raw).cover_letter_body
    return raw


def _write(document: RenderedDocument, output: Path) -> Path:
    if output.is_dir() or not output.suffix:
        return document.save(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    return document.canvas.output(output)


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse *argv* and render the requested document.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)
    labels = get_labels(args.locale) if args.locale else get_locale()

    try:
        profile = _load_profile(args.profile)
    except (OSError, ValidationError) as exc:
        print(f"❌ Could not read profile {args.profile}: {exc}")
        return 1

    if args.command == "cv":
        config = load_layout_config()
        canvas = FpdfCanvas(config.font_family)
        try:
            document = generate_cv(profile, args.target, canvas, config=config, labels=labels)
        except DocumentGenerationError as exc:
            print(f"❌ {exc}")
            return 1
    else:
        try:
            body = _load_letter_body(args.letter)
        except (OSError, ValidationError) as exc:
            print(f"❌ Could not read letter {args.letter}: {exc}")
            return 1
        config = load_layout_config(LayoutConfig.letter())
        canvas = FpdfCanvas(config.font_family)
        try:
            document = generate_cover_letter(
                profile,
                args.company,
                args.job_title,
                body,
                canvas,
                config=config,
                labels=labels,
            )
        except DocumentGenerationError as exc:
            print(f"❌ {exc}")
            return 1
        print(f"📨 {document.subject}")

    path = _write(document, args.output)
    print(f"✅ Wrote {path} ({document.page_count} page(s))")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
