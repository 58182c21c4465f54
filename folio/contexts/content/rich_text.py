"""
Rich Text Extraction

Converts rich-text documents (a tree of doc/paragraph/list/listItem nodes terminating in
text leaves with optional bold/italic/underline marks) to plain text or styled segments.

Accepted inputs everywhere: a rich-text document (mapping), a plain string, or None.
None and malformed nodes are treated as empty; nothing here raises.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from folio.utils.text_processing import collapse_whitespace

RichText = Union[Mapping[str, Any], str, None]

LIST_NODE_TYPES = ("bulletList", "orderedList")
SUPPORTED_MARKS = ("bold", "italic", "underline")


@dataclass
class TextSegment:
    """A run of text with inline formatting flags."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False


def _extract_from_node(node: Any) -> str:
    if not isinstance(node, Mapping):
        return ""

    if node.get("type") == "text" and isinstance(node.get("text"), str):
        return node["text"]

    children = node.get("content")
    if not isinstance(children, list):
        return ""

    texts = [_extract_from_node(child) for child in children]
    node_type = node.get("type")

    if node_type == "paragraph":
        return "".join(texts) + "\n"
    if node_type in LIST_NODE_TYPES:
        return "\n".join(texts)
    return "".join(texts)


def extract_plain_text(content: RichText) -> str:
    """
    Extract plain text from rich text, joining block-level nodes with newlines.

    Inline marks are discarded. Paragraphs end with a newline; list items are joined
    by newlines.

    Args:
        content: Rich-text document, plain string, or None

    Returns:
        Plain text ("" for None or empty documents)

    Example:
        >>> extract_plain_text({"type": "doc", "content": [
        ...     {"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}]})
        'Hello\\n'
    """
    if not content:
        return ""
    if isinstance(content, str):
        return content
    return _extract_from_node(content)


def extract_single_line(content: RichText) -> str:
    """Extract plain text as a single trimmed line (newline runs become one space)."""
    return collapse_whitespace(extract_plain_text(content))


def _segments_from_node(node: Any) -> List[TextSegment]:
    segments: List[TextSegment] = []
    if not isinstance(node, Mapping):
        return segments

    if node.get("type") == "text" and isinstance(node.get("text"), str):
        segment = TextSegment(text=node["text"])
        for mark in node.get("marks") or []:
            mark_type = mark.get("type") if isinstance(mark, Mapping) else None
            if mark_type in SUPPORTED_MARKS:
                setattr(segment, mark_type, True)
        segments.append(segment)

    children = node.get("content")
    if isinstance(children, list):
        for child in children:
            segments.extend(_segments_from_node(child))

    return segments


def extract_formatted_text(content: RichText) -> List[TextSegment]:
    """
    Extract text runs with their inline formatting preserved.

    Block structure is flattened; use extract_plain_text() when line breaks matter.
    """
    if not content:
        return []
    if isinstance(content, str):
        return [TextSegment(text=content)]
    return _segments_from_node(content)


def is_empty_content(content: RichText) -> bool:
    """True iff the extracted, trimmed plain text has zero length."""
    return len(extract_plain_text(content).strip()) == 0


def plain_text_to_doc(text: Optional[str]) -> Dict[str, Any]:
    """
    Wrap a plain string in a one-paragraph rich-text document.

    Empty text produces a document holding a single empty paragraph.
    """
    paragraph: Dict[str, Any] = {"type": "paragraph"}
    if text:
        paragraph["content"] = [{"type": "text", "text": text}]
    return {"type": "doc", "content": [paragraph]}
