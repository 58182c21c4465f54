"""
Executive template: full-bleed header band in the primary color (name and title on the
left, contact panel on the right) above a two-column body with a ruled right sidebar.
"""

from typing import Optional

from folio.contexts.layout.document_tree import Box, Style
from folio.contexts.layout.primitives import EMAIL_FIRST, split_header_block, stacked_contact_items
from folio.contexts.layout.templates.base import (
    WHITE,
    SidebarTemplateRenderer,
    TemplateTraits,
    section_labels,
)

HEADER_TEXT = "rgba(255,255,255,0.9)"


class ExecutiveTemplate(SidebarTemplateRenderer):
    """Best for: senior leadership and executive roles."""

    template_id = "executive"
    name = "Executive"
    description = "Bold header band with a two-column body for senior leadership roles"
    category = "professional"
    sidebar_side = "right"
    sidebar_width = "28%"
    traits = TemplateTraits(
        contact_order=EMAIL_FIRST,
        labels=section_labels(summary="Professional Summary"),
    )

    def main_column_style(self) -> Style:
        return {"flex": 1, "padding_right": 20}

    def sidebar_column_style(self) -> Style:
        return {
            "width": self.sidebar_width,
            "padding_left": 12,
            "border_left_width": 1,
            "border_left_color": self.styles.colors.muted,
        }

    def text_style(self, kind: str, column: str = "main") -> Style:
        fonts = self.styles.fonts
        colors = self.styles.colors
        style = super().text_style(kind, column)

        if kind == "name":
            style.update(color=WHITE, letter_spacing=0.5)
        elif kind == "target_title":
            style.update(
                color=HEADER_TEXT,
                font_weight=500,
                text_transform="uppercase",
                letter_spacing=1,
                margin_bottom=14,
            )
        elif kind in ("contact", "contact_link"):
            style.update(color=HEADER_TEXT, margin_bottom=3, text_align="right")
        elif kind == "heading":
            style.update(
                border_bottom_width=1,
                border_bottom_color=colors.accent if column == "sidebar" else colors.muted,
                padding_bottom=2 if column == "sidebar" else 3,
                text_transform="uppercase",
                letter_spacing=0.5 if column == "sidebar" else 1,
            )
            if column == "sidebar":
                style.update(font_size=fonts.section - 1, margin_bottom=6)
        elif kind == "body" and column == "main":
            style.update(text_align="justify")

        if column == "sidebar":
            if kind == "entry_title":
                style.update(font_size=fonts.body - 1)
            elif kind in ("entry_subtitle", "entry_meta"):
                style.update(font_size=fonts.small, color=colors.muted)
            elif kind == "date":
                style.update(font_size=fonts.small - 1, font_style="italic")
            elif kind == "category":
                style.update(font_size=fonts.small, margin_bottom=2)
            elif kind == "body":
                style.update(font_size=fonts.small, line_height=1.4)
        return style

    def heading_text_style(self, column: str = "main") -> Style:
        # Fixed uppercase ruled headings in both columns
        return self.text_style("heading", column)

    def entry_style(self, column: str = "main") -> Style:
        if column == "sidebar":
            return {"margin_bottom": 8}
        return super().entry_style(column)

    def build_header(self) -> Optional[Box]:
        if not self.visible.show_header:
            return None

        page = self.styles.page
        contact_panel = stacked_contact_items(
            self.header_contact_items(),
            self.text_style("contact"),
            self.text_style("contact_link"),
            column_style={"width": "35%", "align_items": "flex-end", "justify_content": "center"},
        )
        return split_header_block(
            self.visible.contact.name,
            self.visible.target_title,
            self.text_style("name"),
            self.text_style("target_title"),
            contact_panel,
            {
                "flex_direction": "row",
                "justify_content": "space-between",
                "align_items": "flex-start",
                "background_color": self.styles.colors.primary,
                # Bleed past the page padding to the page edges
                "margin_top": -page.top,
                "margin_left": -page.left,
                "margin_right": -page.right,
                "padding_top": page.top,
                "padding_left": page.left,
                "padding_right": page.right,
                "padding_bottom": 20,
                "margin_bottom": self.styles.spacing.section,
            },
            content_style={"flex": 1, "padding_right": 20},
        )
