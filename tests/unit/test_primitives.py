"""Unit tests for the shared layout builders and contact cleaning helpers."""

import pytest

from folio.contexts.content.resume_data_structure import BulletItem, ContactInfo
from folio.contexts.content.rich_text import plain_text_to_doc
from folio.contexts.layout.document_tree import Box, Link, Text
from folio.contexts.layout.primitives import (
    EMAIL_FIRST,
    ContactItem,
    bullet_list,
    contact_items,
    entry_block,
    entry_header,
    header_block,
    inline_contact_row,
    section_heading,
    simple_list_entry,
    title_line,
)
from folio.utils.text_processing import (
    clean_github,
    clean_linkedin,
    clean_url,
    collapse_whitespace,
    ensure_scheme,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [
        "janedoe",
        "linkedin.com/in/janedoe",
        "https://www.linkedin.com/in/janedoe/",
        "HTTP://LinkedIn.com/in/janedoe",
    ],
)
def test_clean_linkedin_variants(value):
    assert clean_linkedin(value) == "janedoe"


@pytest.mark.unit
def test_url_helpers():
    assert clean_github("https://github.com/janedoe/") == "janedoe"
    assert clean_url("https://jane.dev/") == "jane.dev"
    assert ensure_scheme("jane.dev") == "https://jane.dev"
    assert ensure_scheme("http://jane.dev") == "http://jane.dev"
    assert collapse_whitespace("Led team\n\nof five ") == "Led team of five"


@pytest.mark.unit
def test_contact_items_links_and_order():
    contact = ContactInfo(
        email="ada@example.com",
        phone="555",
        location="London",
        linkedin="https://www.linkedin.com/in/ada/",
        github="github.com/ada",
        portfolio="https://ada.dev/",
    )

    items = contact_items(contact)

    assert [item.kind for item in items] == ["location", "email", "phone", "linkedin", "github", "portfolio"]
    by_kind = {item.kind: item for item in items}
    assert by_kind["email"].href == "mailto:ada@example.com"
    assert by_kind["linkedin"] == ContactItem("linkedin", "linkedin.com/in/ada", "https://linkedin.com/in/ada")
    assert by_kind["github"] == ContactItem("github", "github.com/ada", "https://github.com/ada")
    assert by_kind["portfolio"] == ContactItem("portfolio", "ada.dev", "https://ada.dev")
    assert by_kind["phone"].href is None


@pytest.mark.unit
def test_contact_items_skip_empty_and_respect_order():
    items = contact_items(ContactInfo(email="a@b.co", phone="  ", location="Paris"), EMAIL_FIRST)
    assert [item.kind for item in items] == ["email", "location"]


@pytest.mark.unit
def test_inline_contact_row_separates_items():
    items = [ContactItem("location", "Paris"), ContactItem("email", "a@b.co", "mailto:a@b.co")]
    row = inline_contact_row(items, "|", {}, {"color": "blue"}, {})

    assert [child.role for child in row.children] == ["contact-item", "separator", "contact-item"]
    assert isinstance(row.children[0], Text)
    assert isinstance(row.children[2], Link)
    assert row.children[1].text == "|"
    assert inline_contact_row([], "|", {}, {}, {}) is None


@pytest.mark.unit
def test_header_block_omits_empty_parts():
    header = header_block("Ada", "", {"font_size": 24}, {}, None, {"margin_bottom": 10})

    assert header.role == "header"
    assert [child.role for child in header.children] == ["name"]
    assert header.children[0].style == {"font_size": 24}


@pytest.mark.unit
def test_section_heading_decorations():
    plain = section_heading("Skills", {"font_size": 12}, "skills")
    assert isinstance(plain, Text)
    assert plain.role == "section-heading"

    decorated = section_heading("Skills", {}, "skills", accent_bar={"width": 4}, rule={"flex": 1})
    assert decorated.role == "section-heading-row"
    assert [child.role for child in decorated.children] == ["decoration", "section-heading", "decoration"]
    assert decorated.children[0].style == {"width": 4}


@pytest.mark.unit
def test_bullet_list_skips_blank_bullets():
    bullets = [
        BulletItem(id="1", content=plain_text_to_doc("Shipped v2")),
        BulletItem(id="2", content=plain_text_to_doc("   ")),
    ]
    box = bullet_list(bullets, "•", {"width": 10}, {}, {"margin_top": 2}, 3, "experience")

    assert box.role == "bullet-list"
    assert len(box.children) == 1
    row = box.children[0]
    assert row.style["margin_bottom"] == 3
    assert [child.text for child in row.children] == ["•", "Shipped v2"]

    assert bullet_list(bullets[1:], "•", {}, {}, {}, 3) is None


@pytest.mark.unit
def test_title_line_and_entry_header():
    line = title_line([("Engineer", {}, "entry-title"), ("", {}, "entry-subtitle")], section_key="experience")
    assert [child.text for child in line.children] == ["Engineer"]
    assert title_line([("", {}, "entry-title")]) is None

    header = entry_header(line, "2020 - Present", {}, "experience")
    assert header.style["flex_direction"] == "row"
    assert header.children[-1].role == "entry-date"

    stacked = entry_header(None, "2020", {}, stacked=True)
    assert stacked.style["flex_direction"] == "column"
    assert entry_header(None, "", {}) is None


@pytest.mark.unit
def test_entry_block_keeps_together_and_drops_none():
    block = entry_block("awards", [None, Text(text="Prize")], {"margin_bottom": 8})

    assert isinstance(block, Box)
    assert block.keep_together is True
    assert block.role == "entry"
    assert len(block.children) == 1


@pytest.mark.unit
def test_simple_list_entry_inline_subtitle():
    styles = {key: {} for key in ("title", "subtitle", "date", "description", "link", "entry")}
    block = simple_list_entry(
        "certifications",
        "Fellow",
        "Royal Society",
        "Mar 1840",
        "",
        styles,
        link=ContactItem("link", "example.org", "https://example.org"),
    )

    texts = [node.text for node in block.children[0].children[0].children]
    assert texts == ["Fellow", " - Royal Society"]
    assert block.children[-1].role == "entry-link"
    assert block.children[-1].href == "https://example.org"
