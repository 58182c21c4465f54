"""
Document Assembler

Runs one render end to end:

    design overrides -> merge_design -> compute_styles
    content mapping  -> ResumeContent.from_dict
    (content, design) -> resolve_visibility -> template.compose()

and wraps the composed body in a single page sized by the paper size, with the page
padding applied and, when enabled, a fixed page-number overlay.

Every step is a pure function of its inputs except font registration, which happens once
per process before the first document is produced.
"""

import time
from typing import Any, Mapping, Optional, Union

from folio.contexts.content.resume_data_structure import ResumeContent
from folio.contexts.layout.document_tree import Box, Document, DocumentMetadata, Page, PageNumber
from folio.contexts.layout.registry import compose_template
from folio.contexts.layout.visibility import resolve_visibility
from folio.contexts.rendering.exceptions import DocumentAssemblyError
from folio.contexts.rendering.fonts import FontBackend, register_fonts
from folio.contexts.rendering.logger import _log_error, log_render_result, log_render_start
from folio.contexts.styling.design import PAGE_NUMBER_POSITIONS, ResumeDesign, merge_design
from folio.contexts.styling.presets import FALLBACK_PAPER_SIZE, get_paper_size, get_registry
from folio.contexts.styling.resolver import ComputedStyles, compute_styles

DOCUMENT_TITLE = "Resume"
DOCUMENT_SUBJECT = "Professional Resume"
DOCUMENT_AUTHOR = "folio"

PAGE_NUMBER_OFFSET = 15
PAGE_NUMBER_FONT_SIZE = 9
PAGE_NUMBER_PADDING = 40
PAGE_NUMBER_FALLBACK_COLOR = "#888888"


def page_number_overlay(design: ResumeDesign, styles: ComputedStyles, font_family: str) -> Optional[Box]:
    """
    Fixed "{current} / {total}" indicator repeated on every page.

    Positions: bottom-center, bottom-right, top-right (unknown values use bottom-center).
    Returns None when page numbers are off.
    """
    if not design.show_page_numbers:
        return None

    position = design.page_number_position
    if position not in PAGE_NUMBER_POSITIONS:
        position = "bottom-center"

    style = {
        "position": "absolute",
        "left": 0,
        "right": 0,
        "padding_left": PAGE_NUMBER_PADDING,
        "padding_right": PAGE_NUMBER_PADDING,
        "align_items": "center" if position == "bottom-center" else "flex-end",
    }
    if position == "top-right":
        style["top"] = PAGE_NUMBER_OFFSET
    else:
        style["bottom"] = PAGE_NUMBER_OFFSET

    number = PageNumber(
        style={
            "font_family": font_family,
            "font_size": PAGE_NUMBER_FONT_SIZE,
            "color": styles.colors.muted or PAGE_NUMBER_FALLBACK_COLOR,
        }
    )
    return Box(children=[number], style=style, role="page-number-overlay", fixed=True)


def assemble_document(
    content: ResumeContent,
    design: ResumeDesign,
    font_backend: Optional[FontBackend] = None,
) -> Document:
    """
    Compose a document from normalized content and a complete design.

    Args:
        content: Normalized resume content
        design: Complete design configuration (already merged over defaults)
        font_backend: Backend receiving font registration on the first render

    Returns:
        Document with one page

    Raises:
        DocumentAssemblyError: If the template fails while composing
        Exception: Font registration failures propagate unchanged
    """
    register_fonts(font_backend)

    start_time = time.time()
    styles = compute_styles(design)
    visible = resolve_visibility(content, design)
    renderer = compose_template(visible, design, styles)
    log_render_start(renderer.template_id, design.paper_size, visible.section_order)

    try:
        body = renderer.compose()
        page_style = renderer.page_style()
    except Exception as e:
        _log_error(f"Template '{renderer.template_id}' failed: {e}")
        raise DocumentAssemblyError(
            "Failed to compose resume document",
            template_id=renderer.template_id,
            original_error=e,
        ) from e

    overlay = page_number_overlay(design, renderer.styles, renderer.font_family)
    if overlay is not None:
        body.append(overlay)

    paper = get_paper_size(design.paper_size)
    paper_key = design.paper_size
    if paper_key not in get_registry().table("paper_sizes"):
        paper_key = FALLBACK_PAPER_SIZE
    page = Page(
        size=paper_key,
        width=paper["width"],
        height=paper["height"],
        style=page_style,
        children=body,
    )

    contact = visible.contact
    document = Document(
        metadata=DocumentMetadata(
            title=DOCUMENT_TITLE,
            author=contact.name or DOCUMENT_AUTHOR,
            subject=visible.target_title or DOCUMENT_SUBJECT,
            template_id=renderer.template_id,
            font_family=renderer.font_family,
        ),
        pages=[page],
    )

    log_render_result(document, time.time() - start_time)
    return document


def render_resume(
    content: Union[Mapping[str, Any], ResumeContent, None],
    design: Union[Mapping[str, Any], ResumeDesign, None] = None,
    font_backend: Optional[FontBackend] = None,
) -> Document:
    """
    Render raw resume content with a (possibly partial) design.

    Args:
        content: camelCase content mapping or an already-normalized ResumeContent
        design: Partial camelCase design mapping, a ResumeDesign, or None for all defaults
        font_backend: Backend receiving font registration on the first render

    Returns:
        Document with one page

    Raises:
        InvalidResumeStructureError: If content or design is not a mapping
        DocumentAssemblyError: If the template fails while composing

    Example:
        >>> document = render_resume({"contact": {"name": "Ada"}}, {"templateId": "modern"})
        >>> document.metadata.template_id
        'modern'
    """
    if not isinstance(content, ResumeContent):
        content = ResumeContent.from_dict(content)
    return assemble_document(content, merge_design(design), font_backend)
