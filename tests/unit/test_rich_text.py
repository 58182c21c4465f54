"""Unit tests for rich-text extraction."""

import pytest

from folio.contexts.content.rich_text import (
    TextSegment,
    extract_formatted_text,
    extract_plain_text,
    extract_single_line,
    is_empty_content,
    plain_text_to_doc,
)


def paragraph(*texts):
    return {"type": "paragraph", "content": [{"type": "text", "text": t} for t in texts]}


DOC = {
    "type": "doc",
    "content": [
        paragraph("First ", "line"),
        {
            "type": "bulletList",
            "content": [
                {"type": "listItem", "content": [paragraph("one")]},
                {"type": "listItem", "content": [paragraph("two")]},
            ],
        },
    ],
}


@pytest.mark.unit
def test_extract_plain_text_blocks():
    assert extract_plain_text(DOC) == "First line\none\n\ntwo\n"


@pytest.mark.unit
def test_extract_plain_text_accepts_strings_and_none():
    assert extract_plain_text("already plain") == "already plain"
    assert extract_plain_text(None) == ""
    assert extract_plain_text({}) == ""


@pytest.mark.unit
def test_extract_plain_text_ignores_malformed_nodes():
    doc = {"type": "doc", "content": [None, 42, {"type": "text"}, paragraph("ok")]}
    assert extract_plain_text(doc) == "ok\n"


@pytest.mark.unit
def test_extract_single_line():
    assert extract_single_line(DOC) == "First line one two"


@pytest.mark.unit
def test_extract_formatted_text_marks():
    doc = {
        "type": "doc",
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "plain "},
                    {"type": "text", "text": "bold", "marks": [{"type": "bold"}]},
                    {
                        "type": "text",
                        "text": " both",
                        "marks": [{"type": "italic"}, {"type": "underline"}, {"type": "strike"}],
                    },
                ],
            }
        ],
    }
    assert extract_formatted_text(doc) == [
        TextSegment("plain "),
        TextSegment("bold", bold=True),
        TextSegment(" both", italic=True, underline=True),
    ]


@pytest.mark.unit
def test_is_empty_content():
    assert is_empty_content(None)
    assert is_empty_content("   ")
    assert is_empty_content({"type": "doc", "content": [paragraph("  ")]})
    assert is_empty_content(plain_text_to_doc(""))
    assert not is_empty_content(plain_text_to_doc("x"))


@pytest.mark.unit
def test_plain_text_to_doc_round_trip_text():
    doc = plain_text_to_doc("Shipped it")
    assert doc["type"] == "doc"
    assert extract_plain_text(doc).strip() == "Shipped it"
