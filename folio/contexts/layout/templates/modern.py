"""
Modern template: full-height colored sidebar on the left holding the name, contact details
and the sidebar sections; accent-ruled headings in the main column.
"""

from typing import List

from folio.contexts.layout.document_tree import Box, Node, Style, Text
from folio.contexts.layout.primitives import header_block, section_heading, stacked_contact_items
from folio.contexts.layout.templates.base import WHITE, SidebarTemplateRenderer, TemplateTraits
from folio.contexts.layout.visibility import SkillGroup

SIDEBAR_WIDTH = 180
SIDEBAR_PADDING = 16
SIDEBAR_TEXT = "rgba(255,255,255,0.9)"
SIDEBAR_SUBTLE = "rgba(255,255,255,0.8)"


class ModernTemplate(SidebarTemplateRenderer):
    """Best for: tech, design and other modern industries."""

    template_id = "modern"
    name = "Modern"
    description = "Two-column layout with a colored sidebar for contact details and skills"
    category = "modern"
    sidebar_side = "left"
    sidebar_width = SIDEBAR_WIDTH
    traits = TemplateTraits(bullet="•")

    @property
    def margin(self) -> float:
        return self.styles.page.top

    def page_style(self) -> Style:
        style = super().page_style()
        style.update(padding_top=self.margin, padding_bottom=self.margin, padding_left=0, padding_right=0)
        return style

    def sidebar_column_style(self) -> Style:
        return {
            "width": SIDEBAR_WIDTH,
            "background_color": self.styles.colors.primary,
            "color": WHITE,
            "padding_left": SIDEBAR_PADDING,
            "padding_right": SIDEBAR_PADDING,
            "padding_bottom": SIDEBAR_PADDING,
            # Extend to the top edge of the page
            "margin_top": -self.margin,
            "padding_top": self.margin,
        }

    def main_column_style(self) -> Style:
        return {"flex": 1, "padding_left": 24, "padding_right": self.margin}

    def text_style(self, kind: str, column: str = "main") -> Style:
        fonts = self.styles.fonts
        style = super().text_style(kind, column)
        if kind == "bullet_marker":
            style.update(width=8, color=self.styles.colors.accent)
        elif kind == "bullet_text":
            style.update(line_height=self.line_height)
        elif kind == "entry_subtitle":
            style.update(color=self.styles.colors.muted)

        if column != "sidebar":
            if kind == "heading":
                style.update(margin_bottom=10)
            return style

        # Sidebar: white text on the primary color
        if kind == "heading":
            style.update(
                font_size=fonts.small,
                color=WHITE,
                text_transform="uppercase",
                letter_spacing=1,
            )
        elif kind in ("entry_title", "category"):
            style.update(font_size=fonts.small, color=WHITE)
        elif kind == "name":
            style.update(font_size=fonts.name - 4, color=WHITE)
        elif kind == "target_title":
            style.update(font_size=fonts.small, color=SIDEBAR_SUBTLE, margin_bottom=16)
        else:
            style.update(
                font_size=fonts.small - 1,
                color=SIDEBAR_TEXT,
                margin_bottom=3,
            )
        return style

    def heading_text_style(self, column: str = "main") -> Style:
        if column == "sidebar":
            return self.text_style("heading", column)
        style = super().heading_text_style(column)
        style.update(
            padding_bottom=4,
            border_bottom_width=2,
            border_bottom_color=self.styles.colors.accent,
        )
        return style

    def section_style(self, column: str = "main") -> Style:
        if column == "sidebar":
            return {"margin_bottom": 16}
        return super().section_style(column)

    def build_header(self):
        # The header lives at the top of the sidebar
        return None

    def sidebar_lead(self) -> List[Node]:
        if not self.visible.show_header:
            return []

        contact = None
        items = stacked_contact_items(
            self.header_contact_items(),
            self.text_style("contact", "sidebar"),
            self.text_style("contact_link", "sidebar"),
        )
        if items is not None:
            heading = section_heading(
                self.section_title("contact"), self.text_style("heading", "sidebar"), "contact"
            )
            contact = Box(children=[heading, items], style={"margin_bottom": 16}, role="contact-block")

        header = header_block(
            self.visible.contact.name,
            self.visible.target_title,
            self.text_style("name", "sidebar"),
            self.text_style("target_title", "sidebar"),
            contact,
            {"flex_direction": "column"},
        )
        return [header]

    def build_skills_body(self, groups: List[SkillGroup], column: str = "main") -> List[Node]:
        if column != "sidebar":
            return super().build_skills_body(groups, column)
        style = self.text_style("body", column)
        return [
            Text(text=f"• {name}", style=dict(style), role="skill-item", section_key="skills")
            for group in groups
            for name in group.names
        ]

    def language_text(self, entry) -> str:
        if entry.fluency:
            return f"{entry.language} - {entry.fluency}"
        return entry.language

    def build_languages_body(self, entries, column: str = "main") -> List[Node]:
        if column != "sidebar":
            return super().build_languages_body(entries, column)
        style = self.text_style("body", column)
        return [
            Text(text=self.language_text(entry), style=dict(style), role="language", section_key="languages")
            for entry in entries
            if entry.language
        ]
