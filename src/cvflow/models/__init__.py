"""Data models and type definitions"""

from cvflow.models.blocks import (
    Block,
    ItemHeader,
    Paragraph,
    SectionTitle,
    SkillRow,
    Spacer,
    TextLine,
)
from cvflow.models.profile import (
    Certification,
    Education,
    Experience,
    GeneratedContent,
    Profile,
    Project,
)

__all__ = [
    "Block",
    "Certification",
    "Education",
    "Experience",
    "GeneratedContent",
    "ItemHeader",
    "Paragraph",
    "Profile",
    "Project",
    "SectionTitle",
    "SkillRow",
    "Spacer",
    "TextLine",
]
