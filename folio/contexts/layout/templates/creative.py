"""
Creative template: bold full-bleed header band, accent bars beside headings, a tinted
summary card, date badges and skill tags.
"""

from typing import List, Optional

from folio.contexts.layout.document_tree import Box, Node, Style, Text
from folio.contexts.layout.primitives import EMAIL_FIRST, section_heading
from folio.contexts.layout.templates.base import (
    WHITE,
    TemplateRenderer,
    TemplateTraits,
    section_labels,
)
from folio.contexts.layout.visibility import SkillGroup

HEADER_TEXT = "rgba(255,255,255,0.9)"


def tint(color: str, alpha_hex: str) -> str:
    """Append a two-digit alpha to a #rrggbb color."""
    if color.startswith("#") and len(color) == 7:
        return f"{color}{alpha_hex}"
    return color


class CreativeTemplate(TemplateRenderer):
    """Best for: design, marketing and creative roles."""

    template_id = "creative"
    name = "Creative"
    description = "Bold header band with accent bars, skill tags and a highlighted summary"
    category = "creative"
    traits = TemplateTraits(
        bullet="▸",
        contact_order=EMAIL_FIRST,
        heading_letter_spacing=2,
        labels=section_labels(summary="About Me"),
    )

    def text_style(self, kind: str, column: str = "main") -> Style:
        fonts = self.styles.fonts
        colors = self.styles.colors
        style = super().text_style(kind, column)

        if kind == "name":
            style.update(font_size=fonts.name + 4, color=WHITE, letter_spacing=1)
        elif kind == "target_title":
            style.update(
                font_size=fonts.section + 2,
                color="rgba(255,255,255,0.85)",
                font_weight=500,
                margin_bottom=14,
            )
        elif kind in ("contact", "contact_link"):
            style.update(color=HEADER_TEXT, margin_left=8, margin_right=8, margin_bottom=2)
        elif kind == "heading":
            style.update(margin_bottom=0)
        elif kind == "entry_title":
            style.update(font_size=fonts.body + 1)
        elif kind == "entry_subtitle":
            style.update(color=colors.accent, font_weight=500)
        elif kind == "entry_meta":
            style.update(font_size=fonts.small, color=colors.muted)
        elif kind == "date":
            style.update(
                font_size=fonts.small - 1,
                color=WHITE,
                font_weight=500,
                background_color=colors.primary,
                padding_left=8,
                padding_right=8,
                padding_top=3,
                padding_bottom=3,
                border_radius=3,
            )
        elif kind == "bullet_marker":
            style.update(width=16, color=colors.accent, font_weight=700)
        elif kind == "body":
            style.update(line_height=1.4)
        return style

    def heading_text_style(self, column: str = "main") -> Style:
        # The accent bar replaces the underline rule
        style = self.text_style("heading", column)
        if self.heading_style_name == "caps":
            style.update(text_transform="uppercase", letter_spacing=self.traits.heading_letter_spacing)
        return style

    def build_heading(self, key: str, column: str = "main") -> Node:
        accent_bar = {
            "width": 4,
            "height": 18,
            "background_color": self.styles.colors.accent,
            "margin_right": 10,
        }
        heading = section_heading(
            self.section_title(key), self.heading_text_style(column), key, accent_bar=accent_bar
        )
        heading.style["margin_bottom"] = 10
        return heading

    def entry_style(self, column: str = "main") -> Style:
        item = self.styles.spacing.item
        return {
            "margin_bottom": item,
            "padding_bottom": item,
            "border_bottom_width": 1,
            "border_bottom_color": tint(self.styles.colors.muted, "40"),
        }

    def bullet_list_style(self, column: str = "main") -> Style:
        return {"margin_top": 6}

    def build_contact_block(self) -> Optional[Box]:
        block = super().build_contact_block()
        if block is not None:
            # Item margins space the row instead of separators
            block.children = [child for child in block.children if child.role != "separator"]
            block.style["justify_content"] = "center"
        return block

    def build_header(self) -> Optional[Box]:
        header = super().build_header()
        if header is None:
            return None
        page = self.styles.page
        header.style.update(
            align_items="center",
            text_align="center",
            background_color=self.styles.colors.primary,
            # Bleed past the page padding to the page edges
            margin_top=-page.top,
            margin_left=-page.left,
            margin_right=-page.right,
            padding_top=page.top + 10,
            padding_bottom=20,
            padding_left=page.left,
            padding_right=page.right,
        )
        header.style.pop("width", None)
        return header

    def build_summary_body(self, entries: List[str], column: str = "main") -> List[Node]:
        colors = self.styles.colors
        paragraphs = [node for node in super().build_summary_body(entries, column) if node]
        if not paragraphs:
            return []
        return [
            Box(
                children=paragraphs,
                style={
                    "background_color": tint(colors.accent, "15"),
                    "padding": 12,
                    "border_radius": 4,
                    "border_left_width": 3,
                    "border_left_color": colors.accent,
                },
                role="summary-box",
                section_key="summary",
            )
        ]

    def build_skills_body(self, groups: List[SkillGroup], column: str = "main") -> List[Node]:
        colors = self.styles.colors
        tags: List[Node] = [
            Box(
                children=[
                    Text(
                        text=name,
                        style=self.font(self.styles.fonts.small, color=colors.primary),
                        role="skill-item",
                        section_key="skills",
                    )
                ],
                style={
                    "background_color": tint(colors.accent, "20"),
                    "padding_left": 10,
                    "padding_right": 10,
                    "padding_top": 4,
                    "padding_bottom": 4,
                    "border_radius": 12,
                    "border_width": 1,
                    "border_color": colors.accent,
                },
                role="skill-tag",
                section_key="skills",
            )
            for group in groups
            for name in group.names
        ]
        return [
            Box(
                children=tags,
                style={"flex_direction": "row", "flex_wrap": "wrap", "gap": 6},
                role="skills-tags",
                section_key="skills",
            )
        ]
