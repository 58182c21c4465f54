"""
Layout Context

Responsibilities:
- Resolves section, entry, bullet and field visibility once per render
- Builds the document tree from shared primitives
- Hosts the eight template renderers and the template registry

Owns: Visibility rules, document tree, layout primitives, templates
Never: Parses raw content, resolves presets, or writes output files
"""

from folio.contexts.layout.document_tree import (
    Box,
    Document,
    DocumentMetadata,
    Link,
    Page,
    PageNumber,
    Text,
)
from folio.contexts.layout.registry import (
    TemplateRegistry,
    compose_template,
    get_template,
    get_template_registry,
    list_templates,
)
from folio.contexts.layout.visibility import VisibleResume, resolve_visibility

__all__ = [
    # Document tree
    "Document",
    "DocumentMetadata",
    "Page",
    "Box",
    "Text",
    "Link",
    "PageNumber",
    # Visibility
    "VisibleResume",
    "resolve_visibility",
    # Templates
    "TemplateRegistry",
    "get_template_registry",
    "get_template",
    "list_templates",
    "compose_template",
]
