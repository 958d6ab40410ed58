"""Turn a profile or a cover letter into an ordered list of blocks.

A section only appears when it has content: an empty list or a blank
string contributes no title, no entries and no vertical space.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from cvflow.constants.layout import Align, FontVariant, LayoutConfig
from cvflow.models.blocks import (
    Block,
    ItemHeader,
    Paragraph,
    SectionTitle,
    SkillRow,
    Spacer,
    TextLine,
)
from cvflow.services.sanitizer import clean_text
from cvflow.utils.dates import format_date_range, format_letter_date
from cvflow.utils.text import strip_protocol

if TYPE_CHECKING:
    from cvflow.constants.labels import LabelSet
    from cvflow.models.profile import (
        Certification,
        Education,
        Experience,
        Profile,
        Project,
    )
    from cvflow.services.sanitizer import LetterText

__all__ = ["assemble_cv", "assemble_letter"]

CONTACT_SEPARATOR = " • "


# -----------------------------------------------------------------------
# CV sections


def _header_blocks(profile: Profile, target_job_title: str, config: LayoutConfig) -> list[Block]:
    blocks: list[Block] = []

    name = clean_text(profile.full_name)
    if name:
        blocks.append(
            TextLine(
                name.upper(),
                FontVariant.BOLD,
                config.name_font_size,
                Align.CENTER,
                spacing_after=6,
            )
        )

    headline = clean_text(profile.availability) or clean_text(target_job_title)
    if headline:
        blocks.append(
            TextLine(
                headline.upper(),
                FontVariant.BOLD,
                config.headline_font_size,
                Align.CENTER,
                spacing_after=6,
            )
        )

    contact = [clean_text(v) for v in (profile.location, profile.email, profile.phone)]
    contact = [part for part in contact if part]
    if contact:
        blocks.append(
            TextLine(CONTACT_SEPARATOR.join(contact), align=Align.CENTER, spacing_after=5)
        )

    links = [strip_protocol(clean_text(v)) for v in (profile.linkedin, profile.portfolio)]
    links = [link for link in links if link]
    if links:
        blocks.append(TextLine(CONTACT_SEPARATOR.join(links), align=Align.CENTER, spacing_after=5))

    if blocks:
        blocks.append(Spacer(5))
    return blocks


def _education_blocks(entries: list[Education], labels: LabelSet) -> list[Block]:
    blocks: list[Block] = [SectionTitle(labels.education_title)]
    for edu in entries:
        end = clean_text(edu.end_date)
        blocks.append(
            ItemHeader(
                left_bold=edu.school,
                right_text=labels.graduated.format(date=end) if end else "",
                left_italic=edu.degree,
                right_text2=edu.start_date,
                spacing_after=1,
            )
        )
    return blocks


def _experience_blocks(entries: list[Experience], labels: LabelSet) -> list[Block]:
    blocks: list[Block] = [SectionTitle(labels.experience_title)]
    for exp in entries:
        blocks.append(
            ItemHeader(
                left_bold=exp.company,
                right_text=exp.location,
                left_italic=exp.role,
                right_text2=format_date_range(
                    exp.start_date,
                    exp.end_date,
                    exp.is_current,
                    labels.present,
                ),
            )
        )
        if clean_text(exp.description):
            blocks.append(Paragraph(exp.description, justify=False))
    return blocks


def _project_blocks(entries: list[Project], labels: LabelSet) -> list[Block]:
    blocks: list[Block] = [SectionTitle(labels.projects_title)]
    for project in entries:
        technologies = clean_text(project.technologies)
        blocks.append(
            ItemHeader(
                left_bold=project.name,
                right_text=f"[{technologies}]" if technologies else "",
                right_variant=FontVariant.ITALIC,
            )
        )
        if clean_text(project.description):
            blocks.append(Paragraph(project.description, justify=False))
    return blocks


def _skill_blocks(profile: Profile, labels: LabelSet) -> list[Block]:
    rows = [
        SkillRow(label, content)
        for label, content in (
            (labels.technical_label, profile.skills),
            (labels.languages_label, profile.languages),
            (labels.interests_label, profile.interests),
        )
        if clean_text(content)
    ]
    if not rows:
        return []
    return [SectionTitle(labels.skills_title), *rows]


def _certification_blocks(entries: list[Certification], labels: LabelSet) -> list[Block]:
    blocks: list[Block] = [SectionTitle(labels.certifications_title)]
    for cert in entries:
        blocks.append(
            ItemHeader(
                left_bold=cert.name,
                right_text=cert.date,
                left_italic=cert.issuer or None,
                right_text2=strip_protocol(clean_text(cert.url)) or None,
            )
        )
    return blocks


def assemble_cv(
    profile: Profile,
    target_job_title: str,
    labels: LabelSet,
    config: LayoutConfig | None = None,
) -> list[Block]:
    """Build the block list of a CV.

    Order: heading, profile (bio), education, experience, projects,
    skills/languages/interests, certifications.
    """
    config = config or LayoutConfig()
    blocks = _header_blocks(profile, target_job_title, config)

    bio = clean_text(profile.bio)
    if bio:
        blocks += [SectionTitle(labels.profile_title), Paragraph(bio, justify=True)]
    if profile.education:
        blocks += _education_blocks(profile.education, labels)
    if profile.experiences:
        blocks += _experience_blocks(profile.experiences, labels)
    if profile.projects:
        blocks += _project_blocks(profile.projects, labels)
    blocks += _skill_blocks(profile, labels)
    if profile.certifications:
        blocks += _certification_blocks(profile.certifications, labels)
    return blocks


# -----------------------------------------------------------------------
# Cover letter


def assemble_letter(
    company: str,
    letter: LetterText,
    labels: LabelSet,
    today: date | None = None,
) -> list[Block]:
    """Build the block list of a cover letter from its cleaned text.

    The heading holds the date, the recipient, the company (left out when
    unknown) and the subject. Every non-blank body line becomes its own
    justified paragraph.
    """
    today = today or date.today()
    blocks: list[Block] = [
        TextLine(format_letter_date(today, labels), align=Align.RIGHT, spacing_after=15),
        TextLine(labels.recipient_line, FontVariant.BOLD, spacing_after=5),
    ]

    company_name = clean_text(company)
    if company_name and company_name.lower() not in labels.ignored_companies:
        blocks.append(TextLine(company_name, FontVariant.BOLD, spacing_after=15))
    else:
        blocks.append(Spacer(10))

    blocks.append(TextLine(letter.subject, FontVariant.BOLD, spacing_after=15))
    blocks += [
        Paragraph(line.strip(), justify=True) for line in letter.body.split("\n") if line.strip()
    ]
    return blocks
