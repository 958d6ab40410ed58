"""Read-only snapshots of the candidate profile and the generated content.

These records are built outside the engine (editor UI, import, AI backend)
and handed over per generation call. They are frozen: the engine only reads
them. Both camelCase keys (as exported by the web app) and snake_case field
names are accepted.
"""

from __future__ import annotations

import uuid
from typing import Annotated

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cvflow.utils.text import coerce_text

__all__ = [
    "Certification",
    "Education",
    "Experience",
    "GeneratedContent",
    "Profile",
    "Project",
]

# Any scalar is accepted and stored as its string form.
Text = Annotated[str, BeforeValidator(coerce_text)]


def _new_id() -> str:
    return uuid.uuid4().hex


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class Experience(_Record):
    """A job or internship. ``company`` is the employing organization."""

    id: Text = Field(default_factory=_new_id)
    company: Text = ""
    role: Text = ""
    location: Text = ""
    start_date: Text = ""  # YYYY-MM
    end_date: Text = ""  # empty while the position is current
    is_current: bool = False
    description: Text = ""


class Project(_Record):
    """A personal or academic project."""

    id: Text = Field(default_factory=_new_id)
    name: Text = ""
    description: Text = ""
    technologies: Text = ""  # comma separated


class Education(_Record):
    """A degree or training programme."""

    id: Text = Field(default_factory=_new_id)
    school: Text = ""
    degree: Text = ""
    start_date: Text = ""
    end_date: Text = ""


class Certification(_Record):
    """A certificate or licence."""

    id: Text = Field(default_factory=_new_id)
    name: Text = ""
    issuer: Text = ""
    date: Text = ""
    url: Text = ""


class Profile(_Record):
    """The master profile rendered into a CV."""

    full_name: Text = ""
    email: Text = ""
    phone: Text = ""
    location: Text = ""
    linkedin: Text = ""
    portfolio: Text = ""
    bio: Text = ""
    availability: Text = ""  # headline, e.g. "Seeking a 2026 apprenticeship"
    skills: Text = ""
    languages: Text = ""
    interests: Text = ""
    experiences: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)


class GeneratedContent(_Record):
    """Application package produced by the AI backend for one job offer."""

    cover_letter_body: Text = Field(
        "",
        validation_alias=AliasChoices("coverLetter", "coverLetterBody", "cover_letter_body"),
    )
    match_score: float = Field(0.0, ge=0, le=100)
    missing_skills: list[Text] = Field(default_factory=list)
    analysis: Text = ""
    optimized_profile: Profile | None = None
