"""Minimal template: generous whitespace, light name, muted letter-spaced headings."""

from folio.contexts.layout.document_tree import Style
from folio.contexts.layout.templates.base import TemplateRenderer, TemplateTraits, section_labels


class MinimalTemplate(TemplateRenderer):
    template_id = "minimal"
    name = "Minimal"
    description = "Clean layout with generous whitespace and understated headings"
    category = "modern"
    traits = TemplateTraits(
        separator="|",
        labels=section_labels(summary="Profile"),
        header_alignment="left",
    )

    def page_style(self) -> Style:
        style = super().page_style()
        style["padding_top"] += 20
        style["padding_right"] += 10
        style["padding_left"] += 10
        return style

    def text_style(self, kind: str, column: str = "main") -> Style:
        fonts = self.styles.fonts
        muted = self.styles.colors.muted
        style = super().text_style(kind, column)
        if kind == "name":
            style.update(font_size=fonts.name + 4, font_weight=400, letter_spacing=2)
        elif kind == "target_title":
            style.update(letter_spacing=1)
        elif kind in ("contact", "contact_link"):
            style.update(color=muted)
        elif kind == "heading":
            style.update(
                font_size=fonts.small,
                font_weight=400,
                color=muted,
                letter_spacing=2,
                text_transform="uppercase",
                margin_bottom=12,
            )
        elif kind == "entry_title":
            style.update(font_size=fonts.body + 1)
        elif kind == "entry_meta":
            style.update(font_size=fonts.small, font_style="italic")
        return style

    def heading_text_style(self, column: str = "main") -> Style:
        # Headings are always small caps here; only the underline rule is honoured
        style = self.text_style("heading", column)
        if self.heading_style_name == "underline":
            style.update(
                border_bottom_width=0.5,
                border_bottom_color=self.styles.colors.muted,
                padding_bottom=3,
            )
        return style

    def header_style(self) -> Style:
        style = super().header_style()
        style.update(
            margin_bottom=24,
            border_bottom_width=0.5,
            border_bottom_color=self.styles.colors.muted,
            padding_bottom=20,
        )
        return style

    def section_style(self, column: str = "main") -> Style:
        return {"margin_bottom": self.styles.spacing.section + 4}

    def entry_style(self, column: str = "main") -> Style:
        return {"margin_bottom": self.styles.spacing.item + 2}
