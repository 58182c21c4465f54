"""
Content Context

Responsibilities:
- Normalizes raw resume content trees into typed entries
- Extracts plain text (and styled segments) from rich-text documents
- Parses and formats loosely formatted dates

Owns: Resume content structures, rich-text extraction, date formatting
Never: Decides which sections are shown or how they look
"""

from folio.contexts.content.dates import (
    calculate_duration,
    format_date,
    format_date_range,
    parse_date,
)
from folio.contexts.content.exceptions import InvalidResumeStructureError
from folio.contexts.content.resume_data_structure import (
    AwardEntry,
    BulletItem,
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ProjectEntry,
    PublicationEntry,
    ResumeContent,
    SkillItem,
    SkillsData,
    VolunteerEntry,
)
from folio.contexts.content.rich_text import (
    TextSegment,
    extract_formatted_text,
    extract_plain_text,
    extract_single_line,
    is_empty_content,
)

__all__ = [
    # Content tree
    "ResumeContent",
    "ContactInfo",
    "ExperienceEntry",
    "EducationEntry",
    "SkillsData",
    "SkillItem",
    "LanguageEntry",
    "CertificationEntry",
    "ProjectEntry",
    "AwardEntry",
    "VolunteerEntry",
    "PublicationEntry",
    "BulletItem",
    # Rich text
    "TextSegment",
    "extract_plain_text",
    "extract_single_line",
    "extract_formatted_text",
    "is_empty_content",
    # Dates
    "parse_date",
    "format_date",
    "format_date_range",
    "calculate_duration",
    # Errors
    "InvalidResumeStructureError",
]
