"""Layout templates, one TemplateRenderer subclass per template id."""

from folio.contexts.layout.templates.base import (
    MAIN_SECTIONS,
    SIDEBAR_SECTIONS,
    SidebarTemplateRenderer,
    TemplateRenderer,
    TemplateTraits,
)
from folio.contexts.layout.templates.classic import ClassicTemplate
from folio.contexts.layout.templates.compact import CompactTemplate
from folio.contexts.layout.templates.creative import CreativeTemplate
from folio.contexts.layout.templates.elegant import ElegantTemplate
from folio.contexts.layout.templates.executive import ExecutiveTemplate
from folio.contexts.layout.templates.minimal import MinimalTemplate
from folio.contexts.layout.templates.modern import ModernTemplate
from folio.contexts.layout.templates.professional import ProfessionalTemplate

TEMPLATE_CLASSES = (
    ClassicTemplate,
    ModernTemplate,
    MinimalTemplate,
    ExecutiveTemplate,
    ProfessionalTemplate,
    CompactTemplate,
    CreativeTemplate,
    ElegantTemplate,
)

__all__ = [
    "TemplateRenderer",
    "SidebarTemplateRenderer",
    "TemplateTraits",
    "MAIN_SECTIONS",
    "SIDEBAR_SECTIONS",
    "TEMPLATE_CLASSES",
    "ClassicTemplate",
    "ModernTemplate",
    "MinimalTemplate",
    "ExecutiveTemplate",
    "ProfessionalTemplate",
    "CompactTemplate",
    "CreativeTemplate",
    "ElegantTemplate",
]
