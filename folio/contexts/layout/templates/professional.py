"""Professional template: single column, primary rule under the header, headings with trailing lines."""

from folio.contexts.layout.document_tree import Node, Style
from folio.contexts.layout.primitives import section_heading
from folio.contexts.layout.templates.base import TemplateRenderer, TemplateTraits, section_labels


class ProfessionalTemplate(TemplateRenderer):
    """Best for: corporate, finance, consulting."""

    template_id = "professional"
    name = "Professional"
    description = "Polished single-column layout with accent lines between sections"
    category = "professional"
    traits = TemplateTraits(
        separator="|",
        bullet="•",
        heading_letter_spacing=1.5,
        labels=section_labels(
            summary="Professional Summary",
            experience="Professional Experience",
            awards="Awards & Honors",
            volunteer="Volunteer Experience",
        ),
    )

    def text_style(self, kind: str, column: str = "main") -> Style:
        colors = self.styles.colors
        style = super().text_style(kind, column)
        if kind == "name":
            style.update(margin_bottom=8)
        elif kind == "separator":
            style.update(margin_left=6, margin_right=6)
        elif kind == "heading":
            style.update(margin_bottom=0)
        elif kind == "body":
            style.update(text_align="justify")
        elif kind == "bullet_marker":
            style.update(width=12, color=colors.accent)
        elif kind == "date":
            style.update(text_align="right")
        return style

    def heading_text_style(self, column: str = "main") -> Style:
        # The trailing line replaces the underline rule
        style = self.text_style("heading", column)
        if self.heading_style_name == "caps":
            style.update(
                text_transform="uppercase",
                letter_spacing=self.traits.heading_letter_spacing,
                font_size=self.styles.fonts.section - 1,
            )
        return style

    def build_heading(self, key: str, column: str = "main") -> Node:
        colors = self.styles.colors
        underline = self.heading_style_name == "underline"
        rule = {
            "flex": 1,
            "height": 2 if underline else 1,
            "background_color": colors.accent if underline else colors.muted,
            "margin_left": 12,
        }
        heading = section_heading(self.section_title(key), self.heading_text_style(column), key, rule=rule)
        heading.style["margin_bottom"] = 8
        return heading

    def header_style(self) -> Style:
        style = super().header_style()
        style.update(
            border_bottom_width=2,
            border_bottom_color=self.styles.colors.primary,
            padding_bottom=12,
        )
        return style
