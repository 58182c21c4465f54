"""
Resume Content Data Structures

Defines dataclasses for the resume content tree: contact details, list-type entries
(experience, education, projects, ...), bullet items and skills.

Content arrives as JSON-serializable mappings with camelCase keys. ResumeContent.from_dict()
normalizes every accepted shape into these dataclasses:
- Every "enabled" and per-field "*Enabled" flag becomes a bool (only an explicit False
  disables; absence means visible)
- Missing lists become empty lists, missing strings become ""
- Missing ids get deterministic ids ("{prefix}-{index}")
- Legacy shapes (plain-string bullets, bare rich-text bullets, plain-string skills)
  are converted to their record form
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from folio.contexts.content.exceptions import InvalidResumeStructureError
from folio.contexts.content.rich_text import RichText, plain_text_to_doc

SKILL_BUCKETS = ("technical", "soft", "other")


def _enabled(data: Mapping[str, Any], key: str = "enabled") -> bool:
    return data.get(key) is not False


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _records(data: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _entry_id(data: Mapping[str, Any], prefix: str, index: int) -> str:
    return str(data.get("id") or f"{prefix}-{index}")


@dataclass
class BulletItem:
    """
    One achievement or responsibility line under an entry.

    Attributes:
        id: Stable identifier
        enabled: False hides the bullet
        content: Rich-text document holding the bullet text
    """

    id: str
    enabled: bool = True
    content: RichText = None

    @classmethod
    def from_value(cls, value: Any, default_id: str) -> "BulletItem":
        """
        Normalize any accepted bullet shape.

        Accepts a plain string, a bare rich-text document ({"type": "doc", ...}) or a
        {id, enabled, content} record whose content is a document or a plain string.
        Anything else becomes an empty bullet.
        """
        if isinstance(value, str):
            return cls(id=default_id, content=plain_text_to_doc(value))

        if not isinstance(value, Mapping):
            return cls(id=default_id, content=plain_text_to_doc(""))

        if value.get("type") == "doc":
            return cls(id=default_id, content=value)

        content = value.get("content")
        if isinstance(content, Mapping) and content.get("type") == "doc":
            document = content
        else:
            document = plain_text_to_doc(content if isinstance(content, str) else "")

        return cls(
            id=str(value.get("id") or default_id),
            enabled=_enabled(value),
            content=document,
        )


def _bullets(data: Mapping[str, Any], entry_id: str) -> List[BulletItem]:
    value = data.get("bullets")
    if not isinstance(value, list):
        return []
    return [
        BulletItem.from_value(item, f"{entry_id}-bullet-{index}")
        for index, item in enumerate(value)
    ]


@dataclass
class ContactInfo:
    """
    Contact details with per-field visibility flags.

    Attributes:
        name: Full name (falls back to first_name + last_name when empty)
        first_name: Given name
        last_name: Family name
        email, phone, location, linkedin, github, portfolio: Contact values
        *_enabled: False hides the matching field
    """

    name: str = ""
    name_enabled: bool = True
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    email_enabled: bool = True
    phone: str = ""
    phone_enabled: bool = True
    location: str = ""
    location_enabled: bool = True
    linkedin: str = ""
    linkedin_enabled: bool = True
    github: str = ""
    github_enabled: bool = True
    portfolio: str = ""
    portfolio_enabled: bool = True

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ContactInfo":
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            name=_text(data, "name"),
            name_enabled=_enabled(data, "nameEnabled"),
            first_name=_text(data, "firstName"),
            last_name=_text(data, "lastName"),
            email=_text(data, "email"),
            email_enabled=_enabled(data, "emailEnabled"),
            phone=_text(data, "phone"),
            phone_enabled=_enabled(data, "phoneEnabled"),
            location=_text(data, "location"),
            location_enabled=_enabled(data, "locationEnabled"),
            linkedin=_text(data, "linkedin"),
            linkedin_enabled=_enabled(data, "linkedinEnabled"),
            github=_text(data, "github"),
            github_enabled=_enabled(data, "githubEnabled"),
            portfolio=_text(data, "portfolio"),
            portfolio_enabled=_enabled(data, "portfolioEnabled"),
        )


@dataclass
class ExperienceEntry:
    """
    One job.

    Attributes:
        company: Employer name
        position: Job title
        location: Work location
        start_date, end_date: Loosely formatted date strings
        current: Ongoing role (end date renders as "Present")
        date_enabled: Controls the whole date range
        bullets: Achievement bullets
    """

    id: str
    enabled: bool = True
    company: str = ""
    company_enabled: bool = True
    position: str = ""
    position_enabled: bool = True
    location: str = ""
    location_enabled: bool = True
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    date_enabled: bool = True
    bullets: List[BulletItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "ExperienceEntry":
        entry_id = _entry_id(data, "exp", index)
        return cls(
            id=entry_id,
            enabled=_enabled(data),
            company=_text(data, "company"),
            company_enabled=_enabled(data, "companyEnabled"),
            position=_text(data, "position"),
            position_enabled=_enabled(data, "positionEnabled"),
            location=_text(data, "location"),
            location_enabled=_enabled(data, "locationEnabled"),
            start_date=_text(data, "startDate"),
            end_date=_text(data, "endDate"),
            current=data.get("current") is True,
            date_enabled=_enabled(data, "dateEnabled"),
            bullets=_bullets(data, entry_id),
        )


@dataclass
class EducationEntry:
    """
    One degree.

    Attributes:
        institution: School name
        degree: Degree name ("B.S.")
        field: Field of study, displayed as "{degree} in {field}"
        graduation_date: Loosely formatted date string
        gpa: Displayed as "GPA: {gpa}"
    """

    id: str
    enabled: bool = True
    institution: str = ""
    institution_enabled: bool = True
    degree: str = ""
    degree_enabled: bool = True
    field: str = ""
    field_enabled: bool = True
    graduation_date: str = ""
    date_enabled: bool = True
    gpa: str = ""
    gpa_enabled: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "EducationEntry":
        return cls(
            id=_entry_id(data, "edu", index),
            enabled=_enabled(data),
            institution=_text(data, "institution"),
            institution_enabled=_enabled(data, "institutionEnabled"),
            degree=_text(data, "degree"),
            degree_enabled=_enabled(data, "degreeEnabled"),
            field=_text(data, "field"),
            field_enabled=_enabled(data, "fieldEnabled"),
            graduation_date=_text(data, "graduationDate"),
            date_enabled=_enabled(data, "dateEnabled"),
            gpa=_text(data, "gpa"),
            gpa_enabled=_enabled(data, "gpaEnabled"),
        )


@dataclass
class SkillItem:
    """A single named skill inside a skills bucket."""

    id: str
    enabled: bool = True
    name: str = ""


@dataclass
class SkillsData:
    """
    Skills grouped into the technical, soft and other buckets.

    Legacy content stores each bucket as a list of plain strings (optionally under
    technicalLegacy/softLegacy/otherLegacy); both shapes load into SkillItem lists.
    """

    technical: List[SkillItem] = field(default_factory=list)
    soft: List[SkillItem] = field(default_factory=list)
    other: List[SkillItem] = field(default_factory=list)

    def bucket(self, name: str) -> List[SkillItem]:
        return getattr(self, name)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SkillsData":
        if not isinstance(data, Mapping):
            return cls()

        buckets: Dict[str, List[SkillItem]] = {}
        for bucket in SKILL_BUCKETS:
            values = data.get(bucket)
            if not isinstance(values, list) or not values:
                values = data.get(f"{bucket}Legacy")
            if not isinstance(values, list):
                values = []

            items = []
            for index, value in enumerate(values):
                default_id = f"skill-{bucket}-{index}"
                if isinstance(value, str):
                    items.append(SkillItem(id=default_id, name=value))
                elif isinstance(value, Mapping):
                    items.append(
                        SkillItem(
                            id=str(value.get("id") or default_id),
                            enabled=_enabled(value),
                            name=_text(value, "name"),
                        )
                    )
            buckets[bucket] = items

        return cls(**buckets)


@dataclass
class LanguageEntry:
    id: str
    enabled: bool = True
    language: str = ""
    fluency: str = ""
    fluency_enabled: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "LanguageEntry":
        return cls(
            id=_entry_id(data, "lang", index),
            enabled=_enabled(data),
            language=_text(data, "language"),
            fluency=_text(data, "fluency"),
            fluency_enabled=_enabled(data, "fluencyEnabled"),
        )


@dataclass
class CertificationEntry:
    id: str
    enabled: bool = True
    name: str = ""
    name_enabled: bool = True
    issuer: str = ""
    issuer_enabled: bool = True
    date: str = ""
    date_enabled: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "CertificationEntry":
        return cls(
            id=_entry_id(data, "cert", index),
            enabled=_enabled(data),
            name=_text(data, "name"),
            name_enabled=_enabled(data, "nameEnabled"),
            issuer=_text(data, "issuer"),
            issuer_enabled=_enabled(data, "issuerEnabled"),
            date=_text(data, "date"),
            date_enabled=_enabled(data, "dateEnabled"),
        )


@dataclass
class ProjectEntry:
    """
    One project.

    Attributes:
        name: Project name
        description: Plain-text description
        technologies: Displayed as "Technologies: a, b"
        link: Project URL
        bullets: Optional achievement bullets
    """

    id: str
    enabled: bool = True
    name: str = ""
    name_enabled: bool = True
    description: str = ""
    description_enabled: bool = True
    technologies: List[str] = field(default_factory=list)
    technologies_enabled: bool = True
    link: str = ""
    link_enabled: bool = True
    bullets: List[BulletItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "ProjectEntry":
        entry_id = _entry_id(data, "proj", index)
        technologies = data.get("technologies")
        return cls(
            id=entry_id,
            enabled=_enabled(data),
            name=_text(data, "name"),
            name_enabled=_enabled(data, "nameEnabled"),
            description=_text(data, "description"),
            description_enabled=_enabled(data, "descriptionEnabled"),
            technologies=(
                [str(t) for t in technologies if t] if isinstance(technologies, list) else []
            ),
            technologies_enabled=_enabled(data, "technologiesEnabled"),
            link=_text(data, "link"),
            link_enabled=_enabled(data, "linkEnabled"),
            bullets=_bullets(data, entry_id),
        )


@dataclass
class AwardEntry:
    id: str
    enabled: bool = True
    title: str = ""
    title_enabled: bool = True
    date: str = ""
    date_enabled: bool = True
    issuer: str = ""
    issuer_enabled: bool = True
    description: str = ""
    description_enabled: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "AwardEntry":
        return cls(
            id=_entry_id(data, "award", index),
            enabled=_enabled(data),
            title=_text(data, "title"),
            title_enabled=_enabled(data, "titleEnabled"),
            date=_text(data, "date"),
            date_enabled=_enabled(data, "dateEnabled"),
            issuer=_text(data, "issuer"),
            issuer_enabled=_enabled(data, "issuerEnabled"),
            description=_text(data, "description"),
            description_enabled=_enabled(data, "descriptionEnabled"),
        )


@dataclass
class VolunteerEntry:
    id: str
    enabled: bool = True
    organization: str = ""
    organization_enabled: bool = True
    role: str = ""
    role_enabled: bool = True
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    date_enabled: bool = True
    description: str = ""
    description_enabled: bool = True
    bullets: List[BulletItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "VolunteerEntry":
        entry_id = _entry_id(data, "vol", index)
        return cls(
            id=entry_id,
            enabled=_enabled(data),
            organization=_text(data, "organization"),
            organization_enabled=_enabled(data, "organizationEnabled"),
            role=_text(data, "role"),
            role_enabled=_enabled(data, "roleEnabled"),
            start_date=_text(data, "startDate"),
            end_date=_text(data, "endDate"),
            current=data.get("current") is True,
            date_enabled=_enabled(data, "dateEnabled"),
            description=_text(data, "description"),
            description_enabled=_enabled(data, "descriptionEnabled"),
            bullets=_bullets(data, entry_id),
        )


@dataclass
class PublicationEntry:
    id: str
    enabled: bool = True
    title: str = ""
    title_enabled: bool = True
    publisher: str = ""
    publisher_enabled: bool = True
    date: str = ""
    date_enabled: bool = True
    link: str = ""
    link_enabled: bool = True
    description: str = ""
    description_enabled: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "PublicationEntry":
        return cls(
            id=_entry_id(data, "pub", index),
            enabled=_enabled(data),
            title=_text(data, "title"),
            title_enabled=_enabled(data, "titleEnabled"),
            publisher=_text(data, "publisher"),
            publisher_enabled=_enabled(data, "publisherEnabled"),
            date=_text(data, "date"),
            date_enabled=_enabled(data, "dateEnabled"),
            link=_text(data, "link"),
            link_enabled=_enabled(data, "linkEnabled"),
            description=_text(data, "description"),
            description_enabled=_enabled(data, "descriptionEnabled"),
        )


# Section key (also the content key) -> entry class for list-type sections
ENTRY_SECTIONS = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "languages": LanguageEntry,
    "certifications": CertificationEntry,
    "projects": ProjectEntry,
    "awards": AwardEntry,
    "volunteer": VolunteerEntry,
    "publications": PublicationEntry,
}


@dataclass
class ResumeContent:
    """
    Complete resume content tree for one render.

    Attributes:
        contact: Contact details
        target_title: Headline rendered under the name
        summary: Rich-text professional summary
        summary_enabled: False hides the summary section
        experience ... publications: Entry lists in display order
        skills: Skills buckets
    """

    contact: ContactInfo = field(default_factory=ContactInfo)
    target_title: str = ""
    target_title_enabled: bool = True
    summary: RichText = None
    summary_enabled: bool = True
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: SkillsData = field(default_factory=SkillsData)
    languages: List[LanguageEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    awards: List[AwardEntry] = field(default_factory=list)
    volunteer: List[VolunteerEntry] = field(default_factory=list)
    publications: List[PublicationEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ResumeContent":
        """
        Build a normalized content tree from its camelCase mapping.

        Args:
            data: Resume content mapping (None yields an empty resume)

        Returns:
            ResumeContent with every optional field defaulted

        Raises:
            InvalidResumeStructureError: If data is not a mapping
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidResumeStructureError(
                f"Resume content must be a mapping, got {type(data).__name__}"
            )

        entries = {
            key: [
                entry_cls.from_dict(record, index)
                for index, record in enumerate(_records(data, key))
            ]
            for key, entry_cls in ENTRY_SECTIONS.items()
        }

        summary = data.get("summary")
        if not isinstance(summary, (Mapping, str)):
            summary = None

        return cls(
            contact=ContactInfo.from_dict(data.get("contact")),
            target_title=_text(data, "targetTitle"),
            target_title_enabled=_enabled(data, "targetTitleEnabled"),
            summary=summary,
            summary_enabled=_enabled(data, "summaryEnabled"),
            skills=SkillsData.from_dict(data.get("skills")),
            **entries,
        )
