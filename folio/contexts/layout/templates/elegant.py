"""
Elegant template: decorated centered header, headings trailed by a hairline, italic summary
and em-dash bullets.
"""

from typing import List, Optional

from folio.contexts.content.resume_data_structure import ExperienceEntry
from folio.contexts.layout.document_tree import Box, Node, Style, Text
from folio.contexts.layout.primitives import paragraph, section_heading, title_line
from folio.contexts.layout.templates.base import TemplateRenderer, TemplateTraits, section_labels
from folio.contexts.layout.visibility import SkillGroup


class ElegantTemplate(TemplateRenderer):
    """Best for: senior professionals, academia, consulting."""

    template_id = "elegant"
    name = "Elegant"
    description = "Refined single-column layout with decorative header and hairline section rules"
    category = "professional"
    traits = TemplateTraits(
        separator="|",
        bullet="—",
        skills_joiner="  ·  ",
        line_height=1.25,
        heading_letter_spacing=2,
        labels=section_labels(
            summary="Profile",
            experience="Professional Experience",
            skills="Expertise",
            projects="Notable Projects",
            awards="Honors & Awards",
            volunteer="Community Involvement",
        ),
    )

    def text_style(self, kind: str, column: str = "main") -> Style:
        fonts = self.styles.fonts
        colors = self.styles.colors
        style = super().text_style(kind, column)

        if kind == "name":
            style.update(
                font_size=fonts.name + 2,
                letter_spacing=2,
                text_transform="uppercase",
            )
        elif kind == "target_title":
            style.update(font_style="italic", letter_spacing=1, margin_bottom=14)
        elif kind == "separator":
            style.update(margin_left=10, margin_right=10)
        elif kind == "heading":
            style.update(letter_spacing=1, margin_bottom=0)
        elif kind == "entry_title":
            style.update(font_size=fonts.body + 1)
        elif kind == "entry_subtitle":
            style.update(color=colors.accent, margin_top=1)
        elif kind in ("entry_meta", "date"):
            style.update(font_size=fonts.small, font_style="italic")
        elif kind == "bullet_marker":
            style.update(width=14, color=colors.accent)
        elif kind == "category":
            style.update(
                font_size=fonts.small,
                color=colors.primary,
                text_transform="uppercase",
                letter_spacing=1,
                margin_bottom=3,
            )
        return style

    def heading_text_style(self, column: str = "main") -> Style:
        style = self.text_style("heading", column)
        if self.heading_style_name == "caps":
            style.update(text_transform="uppercase", letter_spacing=self.traits.heading_letter_spacing)
        return style

    def build_heading(self, key: str, column: str = "main") -> Node:
        colors = self.styles.colors
        rule = {"flex": 1, "height": 1, "background_color": colors.muted, "margin_left": 16}
        heading = section_heading(self.section_title(key), self.heading_text_style(column), key, rule=rule)
        if self.heading_style_name != "underline":
            heading.style["margin_bottom"] = 10
            return heading
        underline = Box(
            style={"width": 60, "height": 2, "background_color": colors.accent, "margin_top": 4},
            role="decoration",
            section_key=key,
        )
        return Box(
            children=[heading, underline],
            style={"margin_bottom": 10},
            role="section-heading-row",
            section_key=key,
        )

    def build_summary_body(self, entries: List[str], column: str = "main") -> List[Node]:
        style = self.text_style("body", column)
        style.update(line_height=1.5, text_align="justify", font_style="italic")
        return [paragraph(text, style, "summary-text", "summary") for text in entries]

    def entry_style(self, column: str = "main") -> Style:
        return {"margin_bottom": self.styles.spacing.item + 2}

    def bullet_list_style(self, column: str = "main") -> Style:
        return {"margin_top": 6, "padding_left": 4}

    def header_style(self) -> Style:
        style = super().header_style()
        style.update(padding_bottom=16)
        return style

    def build_header(self) -> Optional[Box]:
        header = super().build_header()
        if header is None:
            return None
        accent = self.styles.colors.accent
        line = {"width": 40, "height": 1, "background_color": accent}
        ornament = Box(
            children=[
                Box(style=dict(line), role="decoration"),
                Box(
                    style={
                        "width": 8,
                        "height": 8,
                        "background_color": accent,
                        "margin_left": 12,
                        "margin_right": 12,
                        "transform": "rotate(45deg)",
                    },
                    role="decoration",
                ),
                Box(style=dict(line), role="decoration"),
            ],
            style={
                "flex_direction": "row",
                "align_items": "center",
                "justify_content": "center",
                "margin_bottom": 12,
            },
            role="decoration",
        )
        bottom_line = Box(
            style={
                "width": "100%",
                "height": 1,
                "background_color": self.styles.colors.muted,
                "margin_top": 12,
            },
            role="decoration",
        )
        header.children = [ornament, *header.children, bottom_line]
        return header

    def experience_title_line(self, entry: ExperienceEntry, column: str = "main") -> Optional[Box]:
        # Position, company and location on their own lines
        return title_line(
            [
                (entry.position, self.text_style("entry_title", column), "entry-title"),
                (entry.company, self.text_style("entry_subtitle", column), "entry-subtitle"),
                (entry.location, self.text_style("entry_meta", column), "entry-location"),
            ],
            style={"flex_direction": "column", "flex": 1},
            section_key="experience",
        )

    def build_skills_body(self, groups: List[SkillGroup], column: str = "main") -> List[Node]:
        if len(groups) == 1:
            return super().build_skills_body(groups, column)
        body = {**self.text_style("body", column), "line_height": 1.4}
        return [
            Box(
                children=[
                    Text(
                        text=group.label,
                        style=self.text_style("category", column),
                        role="skill-category-name",
                        section_key="skills",
                    ),
                    Text(
                        text=self.traits.skills_joiner.join(group.names),
                        style=dict(body),
                        role="skill-list",
                        section_key="skills",
                    ),
                ],
                style={"margin_bottom": 6},
                role="skill-category",
                section_key="skills",
            )
            for group in groups
        ]
