"""
Document Tree

Backend-neutral output vocabulary: Document -> Page -> (Box | Text | Link | PageNumber).

Every node carries a style dict with snake_case keys (font_family, font_size, font_weight,
color, margin_bottom, flex_direction, ...) plus a semantic role ("section",
"section-heading", "entry", "bullet", ...) so paginating backends and tests can find
content without depending on a specific template's layout.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from folio.contexts.content.rich_text import TextSegment

Style = Dict[str, Any]

PAGE_NUMBER_FORMAT = "{page_number} / {total_pages}"


@dataclass
class Text:
    """
    A run of text.

    Attributes:
        text: Plain text
        style: Text style attributes
        role: Semantic role
        section_key: Section this node belongs to, if any
        segments: Optional inline-formatted runs for backends that support them
    """

    text: str
    style: Style = field(default_factory=dict)
    role: Optional[str] = None
    section_key: Optional[str] = None
    segments: Optional[List[TextSegment]] = None


@dataclass
class Link:
    """A run of text pointing at a URL (https://, mailto:)."""

    text: str
    href: str
    style: Style = field(default_factory=dict)
    role: Optional[str] = None
    section_key: Optional[str] = None


@dataclass
class PageNumber:
    """
    Page indicator repeated identically on every physical page.

    The backend supplies page_number/total_pages at pagination time via render().
    """

    style: Style = field(default_factory=dict)
    template: str = PAGE_NUMBER_FORMAT
    role: str = "page-number"
    section_key: Optional[str] = None
    fixed: bool = True

    def render(self, page_number: int, total_pages: int) -> str:
        return self.template.format(page_number=page_number, total_pages=total_pages)


@dataclass
class Box:
    """
    Container node.

    Attributes:
        children: Child nodes in reading order
        style: Layout and inherited text style attributes
        role: Semantic role
        section_key: Section this node belongs to, if any
        keep_together: Pagination hint; the box must not be split across pages
        fixed: Repeat the box on every page at its absolute position
    """

    children: List["Node"] = field(default_factory=list)
    style: Style = field(default_factory=dict)
    role: Optional[str] = None
    section_key: Optional[str] = None
    keep_together: bool = False
    fixed: bool = False


Node = Union[Box, Text, Link, PageNumber]


@dataclass
class Page:
    """
    Page container sized in points, padded by the resolved margins.

    Attributes:
        size: Paper size key ("letter", "a4")
        width, height: Physical size in points
        style: Page padding and inherited text style (font family, size, color, line height)
        children: Body nodes
    """

    size: str
    width: float
    height: float
    style: Style = field(default_factory=dict)
    children: List[Node] = field(default_factory=list)


@dataclass
class DocumentMetadata:
    title: str = "Resume"
    author: str = ""
    subject: str = ""
    creator: str = "folio"
    template_id: str = "classic"
    font_family: str = "Helvetica"


@dataclass
class Document:
    """Laid-out resume document ready for a paginating backend."""

    metadata: DocumentMetadata
    pages: List[Page] = field(default_factory=list)

    def walk(self) -> Iterator[Node]:
        for page in self.pages:
            for child in page.children:
                yield from walk(child)

    def find_all(self, role: Optional[str] = None, section_key: Optional[str] = None) -> List[Node]:
        """Return every node matching role and/or section_key, in document order."""
        return [
            node
            for node in self.walk()
            if (role is None or node.role == role)
            and (section_key is None or node.section_key == section_key)
        ]

    def section_keys(self) -> List[str]:
        """Section keys of rendered sections in document order."""
        return [node.section_key for node in self.find_all(role="section")]

    def text_content(self) -> str:
        return "\n".join(text_content(child) for page in self.pages for child in page.children)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": asdict(self.metadata),
            "pages": [
                {
                    "size": page.size,
                    "width": page.width,
                    "height": page.height,
                    "style": dict(page.style),
                    "children": [node_to_dict(child) for child in page.children],
                }
                for page in self.pages
            ],
        }


def walk(node: Node) -> Iterator[Node]:
    """Depth-first traversal, the node itself first."""
    yield node
    if isinstance(node, Box):
        for child in node.children:
            yield from walk(child)


def text_content(node: Node) -> str:
    """Visible text under a node; leaf runs joined by newlines."""
    texts = []
    for item in walk(node):
        if isinstance(item, (Text, Link)) and item.text:
            texts.append(item.text)
        elif isinstance(item, PageNumber):
            texts.append(item.template)
    return "\n".join(texts)


def node_to_dict(node: Node) -> Dict[str, Any]:
    """JSON-serializable form of a node (None and False attributes omitted)."""
    if isinstance(node, Box):
        result = {
            "type": "box",
            "role": node.role,
            "section_key": node.section_key,
            "keep_together": node.keep_together or None,
            "fixed": node.fixed or None,
            "style": dict(node.style),
            "children": [node_to_dict(child) for child in node.children],
        }
    elif isinstance(node, Link):
        result = {
            "type": "link",
            "role": node.role,
            "section_key": node.section_key,
            "text": node.text,
            "href": node.href,
            "style": dict(node.style),
        }
    elif isinstance(node, PageNumber):
        result = {
            "type": "page_number",
            "role": node.role,
            "template": node.template,
            "fixed": node.fixed,
            "style": dict(node.style),
        }
    else:
        result = {
            "type": "text",
            "role": node.role,
            "section_key": node.section_key,
            "text": node.text,
            "style": dict(node.style),
            "segments": [asdict(s) for s in node.segments] if node.segments else None,
        }
    return {k: v for k, v in result.items() if v is not None}
