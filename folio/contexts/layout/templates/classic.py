"""Classic template: traditional single column, inline contact row, sections in configured order."""

from folio.contexts.layout.templates.base import TemplateRenderer, TemplateTraits


class ClassicTemplate(TemplateRenderer):
    """
    Best for: traditional industries, academic positions, senior roles.

    Headings follow the design's heading style (bold, caps or underline).
    """

    template_id = "classic"
    name = "Classic"
    description = "Traditional single-column layout with clean typography"
    category = "traditional"
    traits = TemplateTraits(separator="|", bullet="•")
