"""
Template Renderer Base

Every template is a TemplateRenderer subclass. The base class composes a single-column
document body from the shared primitives; subclasses change the per-template style table
(text_style), the traits (glyphs, labels, contact order) and, for two-column layouts, how
sections are distributed between the main column and a sidebar.

All renderers consume the same VisibleResume, so suppression of disabled or empty
sections and entries is identical across templates.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from folio.contexts.content.dates import format_date, format_date_range
from folio.contexts.content.resume_data_structure import (
    AwardEntry,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ProjectEntry,
    PublicationEntry,
    VolunteerEntry,
)
from folio.contexts.layout.document_tree import Box, Link, Node, Style, Text
from folio.contexts.layout.primitives import (
    LOCATION_FIRST,
    ContactItem,
    bullet_list,
    contact_items,
    entry_block,
    entry_header,
    header_block,
    inline_contact_row,
    paragraph,
    section_block,
    section_heading,
    simple_list_entry,
    title_line,
)
from folio.contexts.layout.visibility import SkillGroup, VisibleResume
from folio.contexts.styling.design import ResumeDesign
from folio.contexts.styling.resolver import (
    DEFAULT_LINE_HEIGHT,
    ComputedStyles,
    heading_decoration,
    resolve_font_family,
    resolve_line_height,
)
from folio.utils.text_processing import clean_url, ensure_scheme

DEFAULT_SECTION_LABELS = {
    "contact": "Contact",
    "summary": "Summary",
    "experience": "Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
    "certifications": "Certifications",
    "awards": "Awards",
    "languages": "Languages",
    "volunteer": "Volunteer",
    "publications": "Publications",
}

MAIN_SECTIONS = ("summary", "experience", "projects", "volunteer", "publications")
SIDEBAR_SECTIONS = ("skills", "education", "certifications", "awards", "languages")

SKILL_COLUMN_WIDTHS = {1: "100%", 2: "50%", 3: "33.33%"}

WHITE = "#ffffff"


def section_labels(**overrides: str) -> Dict[str, str]:
    """Default section labels with per-template overrides."""
    return {**DEFAULT_SECTION_LABELS, **overrides}


@dataclass(frozen=True)
class TemplateTraits:
    """
    Per-template glyphs, labels and defaults.

    Attributes:
        separator: Glyph between inline contact items
        bullet: Bullet marker glyph
        skills_joiner: Joiner for inline skills (single category)
        languages_joiner: Joiner for the inline languages line
        contact_order: Order of contact fields
        labels: Default section headings (replaced by sectionSettings customTitle)
        line_height: Line height when the design sets none
        header_alignment: Header alignment when the design sets none
        heading_letter_spacing: Letter spacing for "caps" headings
    """

    separator: str = "|"
    bullet: str = "•"
    skills_joiner: str = " • "
    languages_joiner: str = " • "
    contact_order: Tuple[str, ...] = LOCATION_FIRST
    labels: Mapping[str, str] = field(default_factory=section_labels)
    line_height: float = DEFAULT_LINE_HEIGHT
    header_alignment: str = "center"
    heading_letter_spacing: float = 1


class TemplateRenderer:
    """
    Single-column layout strategy and base class for all templates.

    Subclasses set the class attributes below and override style hooks. compose() is the
    only entry point used by the document assembler.
    """

    template_id = "classic"
    name = "Classic"
    description = "Traditional single-column layout with clean typography"
    category = "traditional"
    has_sidebar = False
    traits = TemplateTraits()

    main_sections: Sequence[str] = MAIN_SECTIONS
    sidebar_sections: Sequence[str] = SIDEBAR_SECTIONS

    def __init__(self, visible: VisibleResume, design: ResumeDesign, styles: ComputedStyles):
        self.visible = visible
        self.design = design
        self.styles = self.adjust_styles(styles)
        self.font_family = resolve_font_family(design)
        self.line_height = resolve_line_height(design, self.traits.line_height)
        self.header_alignment = design.header_alignment or self.traits.header_alignment
        self.heading_style_name = design.resolved_heading_style

    @classmethod
    def metadata(cls) -> Dict[str, Any]:
        return {
            "id": cls.template_id,
            "name": cls.name,
            "description": cls.description,
            "category": cls.category,
            "has_sidebar": cls.has_sidebar,
        }

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def adjust_styles(self, styles: ComputedStyles) -> ComputedStyles:
        """Hook for templates that tighten or loosen the resolved styles."""
        return styles

    def page_style(self) -> Style:
        """Page padding plus inherited text style."""
        page = self.styles.page
        return {
            "padding_top": page.top,
            "padding_right": page.right,
            "padding_bottom": page.bottom,
            "padding_left": page.left,
            "font_family": self.font_family,
            "font_size": self.styles.fonts.body,
            "color": self.styles.colors.text,
            "background_color": self.styles.colors.background,
            "line_height": self.line_height,
        }

    def compose(self) -> List[Node]:
        """Body nodes for the page: header once, then every visible section in order."""
        nodes: List[Node] = []
        header = self.build_header()
        if header is not None:
            nodes.append(header)
        nodes.extend(self.build_sections(self.visible.section_order))
        return nodes

    def build_sections(self, keys: Sequence[str], column: str = "main") -> List[Box]:
        sections = []
        for key in keys:
            section = self.build_section(key, column)
            if section is not None:
                sections.append(section)
        return sections

    def build_section(self, key: str, column: str = "main") -> Optional[Box]:
        """
        Build one section: heading plus body.

        Returns None when the section is not visible; visibility was decided upstream, so
        this only guards against keys the VisibleResume does not carry.
        """
        if not self.visible.has_section(key):
            return None
        builder = getattr(self, f"build_{key}_body")
        body = [node for node in builder(self.visible.section_entries(key), column) if node]
        return section_block(key, self.build_heading(key, column), body, self.section_style(column))

    def split_columns(self) -> Tuple[List[str], List[str]]:
        """Visible section keys for (main, sidebar), each in render order."""
        return (
            self.visible.ordered(self.main_sections),
            self.visible.ordered(self.sidebar_sections),
        )

    # ------------------------------------------------------------------
    # Style table
    # ------------------------------------------------------------------

    def font(self, size: float, **extra: Any) -> Style:
        style = {"font_family": self.font_family, "font_size": size}
        style.update(extra)
        return style

    def text_style(self, kind: str, column: str = "main") -> Style:
        """
        Style for a kind of text node.

        Kinds: name, target_title, contact, contact_link, separator, heading, entry_title,
        entry_subtitle, entry_meta, date, body, bullet_marker, bullet_text, link, category,
        technologies.
        """
        fonts = self.styles.fonts
        colors = self.styles.colors
        table = {
            "name": self.font(fonts.name, font_weight=700, color=colors.primary, margin_bottom=10),
            "target_title": self.font(fonts.section, color=colors.muted, margin_bottom=12),
            "contact": self.font(fonts.small, color=colors.text),
            "contact_link": self.font(
                fonts.small, color=colors.accent, text_decoration="none"
            ),
            "separator": self.font(fonts.small, color=colors.muted, margin_left=8, margin_right=8),
            "heading": self.font(
                fonts.section, font_weight=700, color=colors.primary, margin_bottom=8
            ),
            "entry_title": self.font(fonts.body, font_weight=700, color=colors.text),
            "entry_subtitle": self.font(fonts.body, color=colors.text),
            "entry_meta": self.font(fonts.body, color=colors.muted),
            "date": self.font(fonts.small, color=colors.muted),
            "body": self.font(fonts.body, color=colors.text, line_height=self.line_height),
            "bullet_marker": self.font(fonts.body, color=colors.text, width=10),
            "bullet_text": self.font(fonts.body, color=colors.text, flex=1, line_height=1.4),
            "link": self.font(fonts.small, color=colors.accent, text_decoration="none"),
            "category": self.font(fonts.body, font_weight=700, color=colors.text),
            "technologies": self.font(fonts.small, color=colors.muted, margin_top=2),
        }
        return table[kind]

    def heading_text_style(self, column: str = "main") -> Style:
        style = self.text_style("heading", column)
        style.update(
            heading_decoration(
                self.heading_style_name, self.styles, self.traits.heading_letter_spacing
            )
        )
        return style

    def section_style(self, column: str = "main") -> Style:
        return {"margin_bottom": self.styles.spacing.section}

    def entry_style(self, column: str = "main") -> Style:
        return {"margin_bottom": self.styles.spacing.item}

    def bullet_list_style(self, column: str = "main") -> Style:
        return {"margin_top": 4, "padding_left": 2}

    def header_style(self) -> Style:
        centered = self.header_alignment != "left"
        return {
            "flex_direction": "column",
            "margin_bottom": self.styles.spacing.section,
            "align_items": "center" if centered else "flex-start",
            "text_align": "center" if centered else "left",
            "width": "100%",
        }

    def bullet_marker(self, key: str) -> str:
        return self.traits.bullet

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def section_title(self, key: str) -> str:
        custom = self.design.settings_for(key).custom_title
        return custom or self.traits.labels.get(key) or DEFAULT_SECTION_LABELS[key]

    def header_contact_items(self) -> List[ContactItem]:
        return contact_items(self.visible.contact, self.traits.contact_order)

    def build_contact_block(self) -> Optional[Box]:
        centered = self.header_alignment != "left"
        return inline_contact_row(
            self.header_contact_items(),
            self.traits.separator,
            self.text_style("contact"),
            self.text_style("contact_link"),
            self.text_style("separator"),
            row_style={
                "justify_content": "center" if centered else "flex-start",
                "margin_top": 8,
                "width": "100%",
            },
        )

    def build_header(self) -> Optional[Box]:
        if not self.visible.show_header:
            return None
        return header_block(
            self.visible.contact.name,
            self.visible.target_title,
            self.text_style("name"),
            self.text_style("target_title"),
            self.build_contact_block(),
            self.header_style(),
        )

    def build_heading(self, key: str, column: str = "main") -> Node:
        return section_heading(self.section_title(key), self.heading_text_style(column), key)

    # ------------------------------------------------------------------
    # Section bodies
    # ------------------------------------------------------------------

    def bullets_for(self, entry, key: str, column: str = "main") -> Optional[Box]:
        return bullet_list(
            entry.bullets,
            self.bullet_marker(key),
            self.text_style("bullet_marker", column),
            self.text_style("bullet_text", column),
            self.bullet_list_style(column),
            self.styles.spacing.bullet,
            section_key=key,
        )

    def date_range(self, start: str, end: str, current: bool) -> str:
        return format_date_range(start, end, current, self.design.date_format)

    def date(self, value: str) -> str:
        return format_date(value, self.design.date_format)

    def build_summary_body(self, entries: List[str], column: str = "main") -> List[Node]:
        return [paragraph(text, self.text_style("body", column), "summary-text", "summary") for text in entries]

    def experience_title_line(self, entry: ExperienceEntry, column: str = "main") -> Optional[Box]:
        company = entry.company
        if company and entry.position:
            company = f" at {company}"
        return title_line(
            [
                (entry.position, self.text_style("entry_title", column), "entry-title"),
                (company, self.text_style("entry_subtitle", column), "entry-subtitle"),
                (
                    f" | {entry.location}" if entry.location else "",
                    self.text_style("entry_meta", column),
                    "entry-location",
                ),
            ],
            section_key="experience",
        )

    def build_experience_body(
        self, entries: List[ExperienceEntry], column: str = "main"
    ) -> List[Node]:
        return [
            entry_block(
                "experience",
                [
                    entry_header(
                        self.experience_title_line(entry, column),
                        self.date_range(entry.start_date, entry.end_date, entry.current),
                        self.text_style("date", column),
                        "experience",
                        stacked=column == "sidebar",
                    ),
                    self.bullets_for(entry, "experience", column),
                ],
                self.entry_style(column),
            )
            for entry in entries
        ]

    def degree_text(self, entry: EducationEntry) -> str:
        if entry.degree and entry.field:
            return f"{entry.degree} in {entry.field}"
        return entry.degree or entry.field

    def build_education_body(
        self, entries: List[EducationEntry], column: str = "main"
    ) -> List[Node]:
        nodes = []
        for entry in entries:
            degree = title_line(
                [(self.degree_text(entry), self.text_style("entry_title", column), "entry-title")],
                section_key="education",
            )
            nodes.append(
                entry_block(
                    "education",
                    [
                        entry_header(
                            degree,
                            self.date(entry.graduation_date),
                            self.text_style("date", column),
                            "education",
                            stacked=column == "sidebar",
                        ),
                        paragraph(
                            entry.institution,
                            self.text_style("entry_subtitle", column),
                            "entry-subtitle",
                            "education",
                        ),
                        paragraph(
                            f"GPA: {entry.gpa}" if entry.gpa else "",
                            self.text_style("entry_meta", column),
                            "entry-gpa",
                            "education",
                        ),
                    ],
                    self.entry_style(column),
                )
            )
        return nodes

    def skills_columns(self) -> int:
        columns = self.design.settings_for("skills").columns or 2
        return columns if columns in SKILL_COLUMN_WIDTHS else 2

    def build_skills_body(self, groups: List[SkillGroup], column: str = "main") -> List[Node]:
        """
        One category: all skills inline. Several: a grid of categories, one per cell.
        """
        if len(groups) == 1:
            return [
                Text(
                    text=self.traits.skills_joiner.join(groups[0].names),
                    style=self.text_style("body", column),
                    role="skills-inline",
                    section_key="skills",
                )
            ]

        width = SKILL_COLUMN_WIDTHS[self.skills_columns()] if column == "main" else "100%"
        cells: List[Node] = [
            Box(
                children=[
                    Text(
                        text=f"{group.label}:",
                        style=self.text_style("category", column),
                        role="skill-category-name",
                        section_key="skills",
                    ),
                    Text(
                        text=", ".join(group.names),
                        style=self.text_style("body", column),
                        role="skill-list",
                        section_key="skills",
                    ),
                ],
                style={"width": width, "margin_bottom": 4, "padding_right": 8},
                role="skill-category",
                section_key="skills",
            )
            for group in groups
        ]
        return [
            Box(
                children=cells,
                style={"flex_direction": "row", "flex_wrap": "wrap"},
                role="skills-grid",
                section_key="skills",
            )
        ]

    def project_link(self, entry: ProjectEntry, column: str = "main") -> Optional[Link]:
        if not entry.link:
            return None
        return Link(
            text=clean_url(entry.link),
            href=ensure_scheme(entry.link),
            style=self.text_style("link", column),
            role="entry-link",
            section_key="projects",
        )

    def build_projects_body(self, entries: List[ProjectEntry], column: str = "main") -> List[Node]:
        nodes = []
        for entry in entries:
            header = Box(
                children=[
                    node
                    for node in (
                        paragraph(
                            entry.name,
                            self.text_style("entry_title", column),
                            "entry-title",
                            "projects",
                        ),
                        self.project_link(entry, column),
                    )
                    if node is not None
                ],
                style={"flex_direction": "row", "justify_content": "space-between", "margin_bottom": 2},
                role="entry-header",
                section_key="projects",
            )
            technologies = ""
            if entry.technologies:
                technologies = f"Technologies: {', '.join(entry.technologies)}"
            nodes.append(
                entry_block(
                    "projects",
                    [
                        header if header.children else None,
                        paragraph(
                            entry.description,
                            {**self.text_style("body", column), "margin_bottom": 4, "line_height": 1.4},
                            "entry-description",
                            "projects",
                        ),
                        self.bullets_for(entry, "projects", column),
                        paragraph(
                            technologies,
                            self.text_style("technologies", column),
                            "entry-technologies",
                            "projects",
                        ),
                    ],
                    self.entry_style(column),
                )
            )
        return nodes

    def list_entry_styles(self, column: str = "main") -> Dict[str, Style]:
        return {
            "title": self.text_style("entry_title", column),
            "subtitle": self.text_style("entry_meta", column),
            "date": self.text_style("date", column),
            "description": {**self.text_style("body", column), "margin_top": 2},
            "link": self.text_style("link", column),
            "entry": self.entry_style(column),
        }

    def build_certifications_body(
        self, entries: List[CertificationEntry], column: str = "main"
    ) -> List[Node]:
        styles = self.list_entry_styles(column)
        return [
            simple_list_entry(
                "certifications",
                entry.name,
                entry.issuer,
                self.date(entry.date),
                "",
                styles,
                stacked=column == "sidebar",
            )
            for entry in entries
        ]

    def build_awards_body(self, entries: List[AwardEntry], column: str = "main") -> List[Node]:
        styles = self.list_entry_styles(column)
        return [
            simple_list_entry(
                "awards",
                entry.title,
                entry.issuer,
                self.date(entry.date),
                entry.description,
                styles,
                stacked=column == "sidebar",
            )
            for entry in entries
        ]

    def language_text(self, entry: LanguageEntry) -> str:
        if entry.fluency:
            return f"{entry.language} ({entry.fluency})"
        return entry.language

    def build_languages_body(self, entries: List[LanguageEntry], column: str = "main") -> List[Node]:
        texts = [self.language_text(entry).strip() for entry in entries]
        line = self.traits.languages_joiner.join(t for t in texts if t)
        if not line:
            return []
        return [
            Text(
                text=line,
                style=self.text_style("body", column),
                role="languages-inline",
                section_key="languages",
            )
        ]

    def volunteer_title_line(self, entry: VolunteerEntry, column: str = "main") -> Optional[Box]:
        organization = entry.organization
        if organization and entry.role:
            organization = f" at {organization}"
        return title_line(
            [
                (entry.role, self.text_style("entry_title", column), "entry-title"),
                (organization, self.text_style("entry_subtitle", column), "entry-subtitle"),
            ],
            section_key="volunteer",
        )

    def build_volunteer_body(
        self, entries: List[VolunteerEntry], column: str = "main"
    ) -> List[Node]:
        return [
            entry_block(
                "volunteer",
                [
                    entry_header(
                        self.volunteer_title_line(entry, column),
                        self.date_range(entry.start_date, entry.end_date, entry.current),
                        self.text_style("date", column),
                        "volunteer",
                        stacked=column == "sidebar",
                    ),
                    paragraph(
                        entry.description,
                        {**self.text_style("body", column), "margin_top": 2},
                        "entry-description",
                        "volunteer",
                    ),
                    self.bullets_for(entry, "volunteer", column),
                ],
                self.entry_style(column),
            )
            for entry in entries
        ]

    def build_publications_body(
        self, entries: List[PublicationEntry], column: str = "main"
    ) -> List[Node]:
        styles = self.list_entry_styles(column)
        return [
            simple_list_entry(
                "publications",
                entry.title,
                entry.publisher,
                self.date(entry.date),
                entry.description,
                styles,
                link=(
                    ContactItem("link", clean_url(entry.link), ensure_scheme(entry.link))
                    if entry.link
                    else None
                ),
                stacked=column == "sidebar",
                subtitle_inline=False,
            )
            for entry in entries
        ]


class SidebarTemplateRenderer(TemplateRenderer):
    """
    Two-column layout: a main column and a sidebar.

    Sections in main_sections go to the main column and sections in sidebar_sections go to
    the sidebar; the two tables are disjoint, so every visible section appears exactly once.
    """

    has_sidebar = True
    sidebar_side = "right"
    sidebar_width: Any = "30%"

    def main_column_style(self) -> Style:
        return {"flex": 1, "padding_right": 20}

    def sidebar_column_style(self) -> Style:
        return {"width": self.sidebar_width, "padding_left": 12}

    def sidebar_lead(self) -> List[Node]:
        """Nodes placed above the sidebar sections (e.g. the header in sidebar layouts)."""
        return []

    def compose(self) -> List[Node]:
        nodes: List[Node] = []
        header = self.build_header()
        if header is not None:
            nodes.append(header)
        nodes.append(self.build_columns())
        return nodes

    def build_columns(self) -> Box:
        main_keys, sidebar_keys = self.split_columns()
        main = Box(
            children=self.build_sections(main_keys, "main"),
            style=self.main_column_style(),
            role="main",
        )
        sidebar = Box(
            children=self.sidebar_lead() + self.build_sections(sidebar_keys, "sidebar"),
            style=self.sidebar_column_style(),
            role="sidebar",
        )
        columns = [sidebar, main] if self.sidebar_side == "left" else [main, sidebar]
        return Box(children=columns, style={"flex_direction": "row", "flex": 1}, role="columns")
