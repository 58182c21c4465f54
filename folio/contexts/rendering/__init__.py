"""
Rendering Context

Responsibilities:
- Runs a render end to end (merge design, normalize content, resolve visibility, compose)
- Wraps the composed body in a sized page with an optional page-number overlay
- Registers font assets with the rendering backend once per process

Owns: Document assembly, font registration, render logging
Never: Decides visibility or per-template styling
"""

from folio.contexts.rendering.assembler import assemble_document, page_number_overlay, render_resume
from folio.contexts.rendering.exceptions import DocumentAssemblyError
from folio.contexts.rendering.fonts import (
    FontBackend,
    InMemoryFontBackend,
    fonts_registered,
    register_fonts,
)

__all__ = [
    # Assembly
    "render_resume",
    "assemble_document",
    "page_number_overlay",
    "DocumentAssemblyError",
    # Fonts
    "FontBackend",
    "InMemoryFontBackend",
    "register_fonts",
    "fonts_registered",
]
