"""
Section Visibility Resolver

Decides, once per render, what is visible: which sections render and in what order, which
entries and bullets survive, and which fields of each entry are shown. Templates consume
the resulting VisibleResume and never re-check enabled flags themselves, so every template
suppresses exactly the same content.

Rules:
- sectionOrder is deduplicated (first occurrence wins) before anything else
- A section with sectionSettings[key].enabled == False is dropped
- Entries and bullets with enabled == False are dropped; bullets with no text are dropped
- Disabled fields are blanked on a copy of the entry (the input is never mutated)
- A section left with zero entries is dropped, heading included
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Iterable, List

from folio.contexts.content.resume_data_structure import (
    ENTRY_SECTIONS,
    SKILL_BUCKETS,
    BulletItem,
    ContactInfo,
    ResumeContent,
)
from folio.contexts.content.rich_text import extract_plain_text, is_empty_content
from folio.contexts.layout.logger import log_section_skipped, log_visibility_summary
from folio.contexts.styling.design import SECTION_KEYS, ResumeDesign

SKILL_CATEGORY_LABELS = {
    "technical": "Technical Skills",
    "soft": "Soft Skills",
    "other": "Other Skills",
}

# A disabled date flag hides every date-like field of an entry
DATE_FIELDS = ("date", "start_date", "end_date", "graduation_date", "current")

CONTACT_FIELDS = ("email", "phone", "location", "linkedin", "github", "portfolio")


@dataclass
class SkillGroup:
    """One non-empty skills category."""

    label: str
    names: List[str] = field(default_factory=list)


@dataclass
class VisibleResume:
    """
    Visibility-resolved content for one render.

    Attributes:
        contact: Contact details with disabled fields blanked (name already resolved)
        target_title: Headline, "" when absent or disabled
        summary: Summary plain text, "" when absent, empty or disabled
        section_order: Body sections to render, deduplicated and non-empty ("contact" excluded)
        entries: Section key -> visible entries (summary: [text], skills: [SkillGroup])
        show_header: Whether the contact header renders
    """

    contact: ContactInfo
    target_title: str = ""
    summary: str = ""
    section_order: List[str] = field(default_factory=list)
    entries: Dict[str, List[Any]] = field(default_factory=dict)
    show_header: bool = True

    def has_section(self, key: str) -> bool:
        return key in self.section_order

    def section_entries(self, key: str) -> List[Any]:
        return self.entries.get(key, [])

    def ordered(self, keys: Iterable[str]) -> List[str]:
        """Visible sections among keys, in render order."""
        wanted = set(keys)
        return [key for key in self.section_order if key in wanted]


def dedupe_section_order(section_order: Iterable[str]) -> List[str]:
    """
    Remove repeated section keys, keeping the first occurrence of each.

    Example:
        >>> dedupe_section_order(["experience", "skills", "experience", "education"])
        ['experience', 'skills', 'education']
    """
    seen = set()
    result = []
    for key in section_order:
        if key in seen:
            continue
        seen.add(key)
        result.append(key)
    return result


def visible_bullets(bullets: Iterable[BulletItem]) -> List[BulletItem]:
    """Enabled bullets that carry non-whitespace text."""
    return [b for b in bullets if b.enabled and not is_empty_content(b.content)]


def blank_disabled_fields(entry):
    """
    Return a copy of an entry with every field whose *_enabled flag is False blanked.

    "date_enabled" covers all date-like fields (start/end/graduation date and current).
    Entries with bullets also get their bullets filtered. The input is never mutated.
    """
    changes: Dict[str, Any] = {}
    for entry_field in fields(entry):
        name = entry_field.name
        if not name.endswith("_enabled") or getattr(entry, name):
            continue
        base = name[: -len("_enabled")]
        targets = DATE_FIELDS if base == "date" else (base,)
        for target in targets:
            if hasattr(entry, target):
                changes[target] = type(getattr(entry, target))()

    if hasattr(entry, "bullets"):
        changes["bullets"] = visible_bullets(entry.bullets)

    return replace(entry, **changes) if changes else entry


def visible_contact(contact: ContactInfo) -> ContactInfo:
    """Contact copy with disabled fields blanked and the display name resolved into name."""
    blanked = blank_disabled_fields(contact)
    name = blanked.display_name if contact.name_enabled else ""
    return replace(blanked, name=name)


def skill_groups(content: ResumeContent) -> List[SkillGroup]:
    """Non-empty skill categories in technical, soft, other order."""
    groups = []
    for bucket in SKILL_BUCKETS:
        names = [
            skill.name.strip()
            for skill in content.skills.bucket(bucket)
            if skill.enabled and skill.name.strip()
        ]
        if names:
            groups.append(SkillGroup(label=SKILL_CATEGORY_LABELS[bucket], names=names))
    return groups


def _section_entries(content: ResumeContent, key: str) -> List[Any]:
    if key == "summary":
        if not content.summary_enabled or is_empty_content(content.summary):
            return []
        return [extract_plain_text(content.summary).strip()]
    if key == "skills":
        return skill_groups(content)
    if key in ENTRY_SECTIONS:
        entries = [blank_disabled_fields(entry) for entry in getattr(content, key) if entry.enabled]
        if key == "languages":
            # A language line without a language name has nothing to show
            entries = [entry for entry in entries if entry.language.strip()]
        return entries
    return []


def resolve_visibility(content: ResumeContent, design: ResumeDesign) -> VisibleResume:
    """
    Resolve everything that is visible for a render.

    Args:
        content: Normalized resume content
        design: Complete design configuration

    Returns:
        VisibleResume consumed by every template
    """
    contact = visible_contact(content.contact)
    target_title = content.target_title.strip() if content.target_title_enabled else ""

    section_order: List[str] = []
    entries: Dict[str, List[Any]] = {}
    skipped: List[str] = []

    for key in dedupe_section_order(design.section_order):
        if key == "contact":
            continue
        if key not in SECTION_KEYS:
            log_section_skipped(key, "unknown section key")
            continue
        if not design.settings_for(key).enabled:
            log_section_skipped(key, "disabled in section settings")
            skipped.append(key)
            continue

        section_entries = _section_entries(content, key)
        if not section_entries:
            log_section_skipped(key, "no visible entries")
            skipped.append(key)
            continue

        section_order.append(key)
        entries[key] = section_entries

    has_contact_items = any(getattr(contact, name) for name in CONTACT_FIELDS)
    show_header = design.settings_for("contact").enabled and bool(
        contact.name or target_title or has_contact_items
    )

    log_visibility_summary(section_order, skipped)

    return VisibleResume(
        contact=contact,
        target_title=target_title,
        summary=entries.get("summary", [""])[0],
        section_order=section_order,
        entries=entries,
        show_header=show_header,
    )
