"""Unit tests for the document tree helpers."""

import json

import pytest

from folio.contexts.content.rich_text import TextSegment
from folio.contexts.layout.document_tree import (
    Box,
    Document,
    DocumentMetadata,
    Link,
    Page,
    PageNumber,
    Text,
    walk,
)


def _sample_document() -> Document:
    section = Box(
        children=[
            Text(text="Experience", role="section-heading", section_key="experience"),
            Box(
                children=[
                    Text(text="Engineer", role="entry-title", section_key="experience"),
                    Text(
                        text="Shipped it",
                        role="bullet-text",
                        section_key="experience",
                        segments=[TextSegment(text="Shipped it", bold=True)],
                    ),
                ],
                role="entry",
                section_key="experience",
                keep_together=True,
            ),
        ],
        role="section",
        section_key="experience",
    )
    footer = Box(children=[PageNumber()], role="page-number-overlay", fixed=True)
    page = Page(
        size="letter",
        width=612,
        height=792,
        children=[Link(text="a@b.co", href="mailto:a@b.co", role="contact-item"), section, footer],
    )
    return Document(metadata=DocumentMetadata(author="Ada"), pages=[page])


@pytest.mark.unit
def test_walk_is_depth_first_parent_first():
    document = _sample_document()
    roles = [node.role for node in document.walk()]
    assert roles == [
        "contact-item",
        "section",
        "section-heading",
        "entry",
        "entry-title",
        "bullet-text",
        "page-number-overlay",
        "page-number",
    ]

    box = Box(children=[Text(text="x")])
    assert list(walk(box))[0] is box


@pytest.mark.unit
def test_find_all_filters_by_role_and_section():
    document = _sample_document()

    assert len(document.find_all(section_key="experience")) == 5
    assert [n.text for n in document.find_all(role="entry-title")] == ["Engineer"]
    assert document.find_all(role="entry", section_key="skills") == []
    assert document.section_keys() == ["experience"]


@pytest.mark.unit
def test_page_number_renders_on_each_page():
    number = PageNumber()
    assert number.render(2, 3) == "2 / 3"
    assert number.fixed is True
    assert PageNumber(template="Page {page_number}").render(4, 9) == "Page 4"


@pytest.mark.unit
def test_text_content_includes_links_and_page_template():
    text = _sample_document().text_content()
    assert text.splitlines() == ["a@b.co", "Experience", "Engineer", "Shipped it", "{page_number} / {total_pages}"]


@pytest.mark.unit
def test_to_dict_is_json_serializable():
    data = _sample_document().to_dict()

    assert data["metadata"]["author"] == "Ada"
    assert data["metadata"]["creator"] == "folio"
    page = data["pages"][0]
    assert (page["width"], page["height"]) == (612, 792)

    link, section, footer = page["children"]
    assert link == {
        "type": "link",
        "role": "contact-item",
        "text": "a@b.co",
        "href": "mailto:a@b.co",
        "style": {},
    }
    entry = section["children"][1]
    assert entry["keep_together"] is True
    assert "fixed" not in entry
    assert entry["children"][1]["segments"] == [
        {"text": "Shipped it", "bold": True, "italic": False, "underline": False}
    ]
    assert footer["fixed"] is True
    assert footer["children"][0]["type"] == "page_number"

    json.dumps(data)
