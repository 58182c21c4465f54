"""
Compact template: dense two-column layout with a ruled right sidebar, tighter spacing and
line height, fitting more content on one page.
"""

from dataclasses import replace

from folio.contexts.layout.document_tree import Style
from folio.contexts.layout.primitives import EMAIL_FIRST
from folio.contexts.layout.templates.base import SidebarTemplateRenderer, TemplateTraits
from folio.contexts.styling.resolver import ComputedStyles


class CompactTemplate(SidebarTemplateRenderer):
    """Best for: experienced candidates with a lot of content."""

    template_id = "compact"
    name = "Compact"
    description = "Dense two-column layout that fits more content on a single page"
    category = "modern"
    sidebar_side = "right"
    sidebar_width = "35%"
    traits = TemplateTraits(separator="•", contact_order=EMAIL_FIRST, line_height=1.1)

    def adjust_styles(self, styles: ComputedStyles) -> ComputedStyles:
        spacing = styles.spacing
        return replace(
            styles,
            spacing=replace(
                spacing,
                section=max(8, spacing.section - 4),
                item=max(4, spacing.item - 2),
                bullet=max(1, spacing.bullet - 1),
            ),
        )

    def main_column_style(self) -> Style:
        return {"width": "65%", "padding_right": 12}

    def sidebar_column_style(self) -> Style:
        return {
            "width": self.sidebar_width,
            "padding_left": 12,
            "border_left_width": 1,
            "border_left_color": self.styles.colors.muted,
        }

    def header_style(self) -> Style:
        style = super().header_style()
        style.update(
            padding_bottom=8,
            border_bottom_width=1,
            border_bottom_color=self.styles.colors.primary,
        )
        return style

    def text_style(self, kind: str, column: str = "main") -> Style:
        fonts = self.styles.fonts
        colors = self.styles.colors
        style = super().text_style(kind, column)

        if kind == "name":
            style.update(font_size=fonts.name - 2, margin_bottom=8)
        elif kind == "target_title":
            style.update(font_size=fonts.section - 1, margin_bottom=10)
        elif kind in ("contact", "contact_link", "separator"):
            style.update(font_size=fonts.small - 1)
            if kind == "separator":
                style.update(margin_left=4, margin_right=4)
        elif kind == "heading":
            if column == "sidebar":
                style.update(
                    font_size=fonts.small,
                    margin_bottom=4,
                    text_transform="uppercase",
                    letter_spacing=0.5,
                )
            else:
                style.update(font_size=fonts.section - 1, margin_bottom=4)
        elif kind == "body":
            style.update(font_size=fonts.body - 1, line_height=1.2)
        elif kind in ("entry_subtitle", "entry_meta"):
            style.update(font_size=fonts.body - 1, color=colors.muted)
        elif kind == "date":
            style.update(font_size=fonts.small - 1)
        elif kind == "bullet_marker":
            style.update(width=8, font_size=fonts.body - 1, color=colors.accent)
        elif kind == "bullet_text":
            style.update(font_size=fonts.body - 1, line_height=1.25)

        if column == "sidebar":
            if kind in ("entry_title", "category"):
                style.update(font_size=fonts.small)
            elif kind in ("entry_subtitle", "entry_meta", "date"):
                style.update(font_size=fonts.small - 1)
            elif kind == "body":
                style.update(font_size=fonts.small, line_height=self.line_height)
        return style

    def heading_text_style(self, column: str = "main") -> Style:
        style = self.text_style("heading", column)
        if column == "sidebar":
            return style
        if self.heading_style_name == "caps":
            style.update(
                text_transform="uppercase",
                letter_spacing=1,
                font_size=self.styles.fonts.section - 2,
            )
        elif self.heading_style_name == "underline":
            style.update(
                border_bottom_width=1,
                border_bottom_color=self.styles.colors.accent,
                padding_bottom=2,
            )
        return style

    def bullet_list_style(self, column: str = "main") -> Style:
        return {"margin_top": 2}

    def entry_style(self, column: str = "main") -> Style:
        if column == "sidebar":
            return {"margin_bottom": 4}
        return super().entry_style(column)
