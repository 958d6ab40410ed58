"""Localized labels and text-cleanup rules.

Documents are French by default, so ``FRENCH`` is the default label set.
``ENGLISH`` mirrors it for English-language applications.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_CONTACT_LABELS",
    "DEFAULT_CONTACT_PATTERNS",
    "ENGLISH",
    "FRENCH",
    "LabelSet",
    "SanitizerRules",
    "get_labels",
    "list_labels",
]

# Whole contact tokens: email address, URL, phone number. A phone number
# starts with "+" or has at least nine digits, so year ranges never match.
DEFAULT_CONTACT_PATTERNS: tuple[str, ...] = (
    r"[\w.+\-]+@[\w\-]+(?:\.[\w\-]+)+",
    r"(?:https?://|www\.)\S+",
    r"\+\d(?:[\s().\-]*\d){6,}",
    r"\(?\d(?:[\s().\-]*\d){8,}",
)

# Words that may precede a contact token on a footer line ("Tel: ...").
DEFAULT_CONTACT_LABELS: tuple[str, ...] = (
    r"t[ée]l(?:[ée]phone)?",
    r"phone",
    r"mobile",
    r"portable",
    r"e-?mail",
    r"mail",
    r"linkedin",
    r"portfolio",
    r"site(?:\s+web)?",
    r"website",
)


@dataclass(frozen=True)
class SanitizerRules:
    """Patterns driving subject extraction and signature removal.

    Every entry is a regular expression fragment, so a deployment can widen
    the matching for another phone format or salutation without code changes.
    A footer line is a contact line only when it holds nothing but
    ``contact_patterns`` matches, ``contact_labels`` and separators.
    """

    subject_labels: tuple[str, ...]
    closing_tokens: tuple[str, ...]
    unsolicited_prefixes: tuple[str, ...] = ()
    contact_patterns: tuple[str, ...] = DEFAULT_CONTACT_PATTERNS
    contact_labels: tuple[str, ...] = DEFAULT_CONTACT_LABELS


@dataclass(frozen=True)
class LabelSet:
    """Every user-visible string the assembler emits for one language."""

    code: str
    profile_title: str
    education_title: str
    experience_title: str
    projects_title: str
    skills_title: str
    certifications_title: str
    technical_label: str
    languages_label: str
    interests_label: str
    present: str
    graduated: str  # format string with a ``{date}`` placeholder
    subject_line: str  # format string with a ``{subject}`` placeholder
    default_subject: str  # format string with a ``{job_title}`` placeholder
    recipient_line: str
    letter_file_prefix: str
    letter_date: str  # format string with ``{day}``, ``{month}``, ``{year}``
    months: tuple[str, ...]
    rules: SanitizerRules
    ignored_companies: tuple[str, ...] = ("source web",)


FRENCH = LabelSet(
    code="fr",
    profile_title="Profil",
    education_title="Formation",
    experience_title="Expérience professionnelle",
    projects_title="Projets & réalisations",
    skills_title="Compétences & intérêts",
    certifications_title="Certifications",
    technical_label="Technique : ",
    languages_label="Langue : ",
    interests_label="Intérêts : ",
    present="Présent",
    graduated="Diplômé: {date}",
    subject_line="Objet : {subject}",
    default_subject="Candidature pour le poste de {job_title}",
    recipient_line="À l'attention du recruteur",
    letter_file_prefix="Lettre",
    letter_date="Le {day} {month} {year}",
    months=(
        "janvier",
        "février",
        "mars",
        "avril",
        "mai",
        "juin",
        "juillet",
        "août",
        "septembre",
        "octobre",
        "novembre",
        "décembre",
    ),
    rules=SanitizerRules(
        subject_labels=(r"Objet",),
        closing_tokens=(r"Cordialement", r"Bien à vous", r"Sincèrement"),
        unsolicited_prefixes=(r"Candidature\s+Spontanée(?:\s+pour\s+le\s+poste\s+de)?",),
    ),
)

ENGLISH = LabelSet(
    code="en",
    profile_title="Profile",
    education_title="Education",
    experience_title="Experience",
    projects_title="Projects",
    skills_title="Skills & interests",
    certifications_title="Certifications",
    technical_label="Technical: ",
    languages_label="Languages: ",
    interests_label="Interests: ",
    present="Present",
    graduated="Graduated: {date}",
    subject_line="Subject: {subject}",
    default_subject="Application for the {job_title} position",
    recipient_line="To the hiring manager",
    letter_file_prefix="Letter",
    letter_date="{month} {day}, {year}",
    months=(
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    rules=SanitizerRules(
        subject_labels=(r"Subject", r"Re"),
        closing_tokens=(
            r"Sincerely",
            r"Best regards",
            r"Kind regards",
            r"Regards",
            r"Yours truly",
        ),
        unsolicited_prefixes=(
            r"(?:Unsolicited|Spontaneous)\s+Application(?:\s+for(?:\s+the)?)?",
        ),
    ),
)

_REGISTRY: dict[str, LabelSet] = {
    "fr": FRENCH,
    "en": ENGLISH,
}


def get_labels(code: str) -> LabelSet:
    """Return the label set registered under *code*.

    Raises:
        ValueError: If no label set with that code exists.
    """
    try:
        return _REGISTRY[code.lower()]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown locale {code!r}. Available: {available}"
        raise ValueError(msg) from None


def list_labels() -> list[str]:
    """Return sorted codes of all registered label sets."""
    return sorted(_REGISTRY)
