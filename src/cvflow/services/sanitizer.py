"""Cleanup of free-form, AI-generated text.

Markup stripping must run before any width measurement so the wrapped and
justified lines match the characters that are actually drawn. The letter
helpers pull the subject line out of the body and drop the contact footer
the model tends to append, since the letter already has its own heading.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

from cvflow.utils.text import coerce_text

if TYPE_CHECKING:
    from cvflow.constants.labels import LabelSet, SanitizerRules

__all__ = [
    "LetterText",
    "clean_text",
    "extract_subject",
    "normalize_skill_list",
    "prepare_letter",
    "strip_signature",
]

_BOLD = re.compile(r"\*\*|__")
_ITALIC = re.compile(r"(?<![*\w])\*(?=\S)([^*\n]+?)(?<=\S)\*(?![*\w])")
_HEADING = re.compile(r"^#+\s", re.MULTILINE)
_NEWLINES = re.compile(r"\s*\n\s*")
_SPACE_BEFORE_COMMA = re.compile(r"\s+,")
_TRAILING_DASH = re.compile(r"\s*[-–—]\s*$")
_CONTACT_SEPARATORS = re.compile(r"[\s|•·,;:./()\-–—]+")


def clean_text(value: Any) -> str:
    """Coerce *value* to text and strip Markdown emphasis and heading markers."""
    text = coerce_text(value)
    text = _BOLD.sub("", text)
    text = _ITALIC.sub(r"\1", text)
    text = _HEADING.sub("", text)
    return text.strip()


def normalize_skill_list(value: Any) -> str:
    """Clean a skill string and turn line breaks into comma separators."""
    text = _NEWLINES.sub(", ", clean_text(value))
    return _SPACE_BEFORE_COMMA.sub(",", text)


# ---------------------------------------------------------------------------
# Subject line


def _alternation(patterns: tuple[str, ...]) -> str:
    return "|".join(f"(?:{pattern})" for pattern in patterns)


def _name_pattern(name: str) -> str:
    return r"\s+".join(re.escape(part) for part in name.split())


def _tidy_subject(subject: str, candidate_name: str, labels: LabelSet) -> str:
    rules = labels.rules
    content = re.sub(
        rf"^(?:{_alternation(rules.subject_labels)})\s*:\s*",
        "",
        subject,
        flags=re.IGNORECASE,
    )
    if rules.unsolicited_prefixes:
        content = re.sub(
            rf"^(?:{_alternation(rules.unsolicited_prefixes)})\s*[-–—:]?\s*",
            "",
            content,
            flags=re.IGNORECASE,
        )
    if candidate_name.strip():
        content = re.sub(
            rf"[-–—]\s*{_name_pattern(candidate_name)}$",
            "",
            content,
            flags=re.IGNORECASE,
        )
    return _TRAILING_DASH.sub("", content).strip()


def extract_subject(
    body: str,
    job_title: str,
    candidate_name: str,
    labels: LabelSet,
) -> tuple[str, str]:
    """Split the displayed subject line from the letter body.

    The first line starting with a subject label (``Objet :``) is removed
    from the body and becomes the subject. Without one, the subject is
    built from *job_title*. Either way the subject is tidied: the label, an
    "unsolicited application" prefix and a trailing candidate name are
    removed, then the label is put back.

    Returns:
        ``(subject, body)``
    """
    pattern = re.compile(
        rf"^((?:{_alternation(labels.rules.subject_labels)})\s*:.*)$",
        re.MULTILINE | re.IGNORECASE,
    )
    default = labels.default_subject.format(job_title=clean_text(job_title))

    match = pattern.search(body)
    if match:
        subject = clean_text(match.group(1))
        body = (body[: match.start()] + body[match.end() :]).strip()
    else:
        subject = default

    content = _tidy_subject(subject, candidate_name, labels)
    if not content:
        content = _tidy_subject(default, candidate_name, labels)
    return labels.subject_line.format(subject=content), body


# ---------------------------------------------------------------------------
# Signature block


class _ScanState(Enum):
    DROPPING = auto()
    KEEPING = auto()


def _is_contact_line(line: str, contact: re.Pattern[str], label: re.Pattern[str]) -> bool:
    """Return ``True`` if *line* holds only contact tokens, labels and separators."""
    residue, found = contact.subn(" ", line)
    if not found:
        return False
    residue = label.sub(" ", residue)
    return not _CONTACT_SEPARATORS.sub("", residue)


def strip_signature(body: str, candidate_name: str, rules: SanitizerRules) -> str:
    """Drop a trailing contact footer from *body*.

    Lines are scanned from the end. While ``DROPPING``, blank lines are
    skipped and contact lines are removed. A contact line holds nothing
    but email addresses, URLs or phone numbers (plus labels such as
    ``Tel:`` and separators); a sentence that merely mentions one is prose.
    A line with the candidate's name is kept and the scan keeps dropping,
    since the footer's contact lines usually sit around the name. A closing
    salutation, or any other line, is kept and switches to ``KEEPING``;
    from there every line is kept verbatim. Ambiguous short lines are
    therefore kept rather than deleted.
    """
    contact = re.compile(_alternation(rules.contact_patterns))
    label = re.compile(rf"\b(?:{_alternation(rules.contact_labels)})\b", re.IGNORECASE)
    closing = re.compile(_alternation(rules.closing_tokens), re.IGNORECASE)
    name = candidate_name.strip().lower()

    kept: list[str] = []
    state = _ScanState.DROPPING
    for line in reversed(body.split("\n")):
        if state is _ScanState.KEEPING:
            kept.append(line)
            continue

        stripped = line.strip()
        if not stripped or _is_contact_line(stripped, contact, label):
            continue

        kept.append(line)
        is_name = bool(name) and name in stripped.lower()
        if is_name and not closing.search(stripped):
            continue
        state = _ScanState.KEEPING

    kept.reverse()
    return "\n".join(kept)


@dataclass(frozen=True, slots=True)
class LetterText:
    subject: str
    body: str


def prepare_letter(
    body: Any,
    job_title: Any,
    candidate_name: Any,
    labels: LabelSet,
) -> LetterText:
    """Run the full letter cleanup: markup, subject, then signature."""
    name = clean_text(candidate_name)
    subject, text = extract_subject(clean_text(body), coerce_text(job_title), name, labels)
    return LetterText(subject=subject, body=strip_signature(text, name, labels.rules))
