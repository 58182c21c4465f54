"""End-to-end tests for render_resume: content + partial design -> document tree."""

import json

import pytest

from folio.contexts.content import InvalidResumeStructureError
from folio.contexts.content.resume_data_structure import ResumeContent
from folio.contexts.layout.registry import get_template_registry
from folio.contexts.layout.templates import ClassicTemplate
from folio.contexts.rendering import (
    DocumentAssemblyError,
    InMemoryFontBackend,
    fonts_registered,
    page_number_overlay,
    render_resume,
)
from folio.contexts.styling.design import merge_design
from folio.contexts.styling.resolver import compute_styles


@pytest.mark.integration
def test_default_render(full_resume):
    document = render_resume(full_resume)

    assert len(document.pages) == 1
    page = document.pages[0]
    assert (page.size, page.width, page.height) == ("letter", 612, 792)
    assert page.style["padding_top"] == 48
    assert page.style["font_family"] == "Helvetica"
    assert document.metadata.template_id == "classic"
    assert document.section_keys() == [
        "summary",
        "experience",
        "education",
        "skills",
        "projects",
        "certifications",
        "awards",
        "languages",
        "volunteer",
        "publications",
    ]
    assert document.find_all(role="page-number-overlay") == []


@pytest.mark.integration
def test_metadata(full_resume):
    document = render_resume(full_resume, {"templateId": "elegant", "fontFamily": "playfair"})

    metadata = document.metadata
    assert metadata.title == "Resume"
    assert metadata.author == "Ada Lovelace"
    assert metadata.subject == "Analytical Engine Programmer"
    assert metadata.creator == "folio"
    assert metadata.template_id == "elegant"
    assert metadata.font_family == "Playfair Display"

    anonymous = render_resume({"experience": [{"company": "Acme"}]})
    assert anonymous.metadata.author == "folio"
    assert anonymous.metadata.subject == "Professional Resume"


@pytest.mark.integration
def test_partial_sidebar_design(full_resume, sidebar_design):
    document = render_resume(full_resume, sidebar_design)
    page = document.pages[0]

    assert (page.size, page.width, page.height) == ("a4", 595.28, 841.89)
    assert document.metadata.template_id == "modern"
    # Duplicate experience and the disabled awards section are dropped
    assert sorted(document.section_keys()) == sorted(
        ["experience", "skills", "summary", "education", "projects", "certifications", "languages",
         "volunteer", "publications"]
    )
    assert document.find_all(role="section", section_key="awards") == []
    assert "Never shown" not in document.text_content()

    headings = {n.section_key: n.text for n in document.find_all(role="section-heading")}
    assert headings["projects"] == "Selected Work"

    dates = [n.text for n in document.find_all(role="entry-date", section_key="experience")]
    assert dates[0] == "Jan 1842 - Sep 1843"
    assert dates[1].endswith("Present")

    overlay = document.find_all(role="page-number-overlay")[0]
    assert overlay.style["top"] == 15
    assert overlay.style["align_items"] == "flex-end"


@pytest.mark.integration
def test_duplicate_section_order_renders_once():
    content = {
        "contact": {"name": "Jane Doe", "email": "jane@example.com"},
        "experience": [
            {
                "company": "Acme",
                "position": "Engineer",
                "bullets": [
                    {"id": "1", "enabled": True, "content": "Did X"},
                    {"id": "2", "enabled": False, "content": "Hidden"},
                ],
            }
        ],
    }
    design = {"sectionOrder": ["contact", "experience", "experience"]}

    document = render_resume(content, design)

    assert document.section_keys() == ["experience"]
    assert [n.text for n in document.find_all(role="bullet-text")] == ["Did X"]
    assert "Hidden" not in document.text_content()
    assert [n.text for n in document.find_all(role="name")] == ["Jane Doe"]


@pytest.mark.integration
@pytest.mark.parametrize(
    "position, expected",
    [
        ("bottom-center", {"bottom": 15, "align_items": "center"}),
        ("bottom-right", {"bottom": 15, "align_items": "flex-end"}),
        ("top-right", {"top": 15, "align_items": "flex-end"}),
        ("sideways", {"bottom": 15, "align_items": "center"}),
    ],
)
def test_page_number_positions(position, expected):
    design = merge_design({"showPageNumbers": True, "pageNumberPosition": position})
    overlay = page_number_overlay(design, compute_styles(design), "Helvetica")

    assert overlay.fixed is True
    for key, value in expected.items():
        assert overlay.style[key] == value
    number = overlay.children[0]
    assert number.render(1, 2) == "1 / 2"
    assert number.style["font_size"] == 9
    assert number.style["color"] == compute_styles(design).colors.muted


@pytest.mark.integration
def test_page_numbers_repeat_as_last_fixed_node(full_resume):
    document = render_resume(full_resume, {"showPageNumbers": True})
    children = document.pages[0].children
    assert children[-1].role == "page-number-overlay"
    assert children[-1].fixed

    design = merge_design()
    assert page_number_overlay(design, compute_styles(design), "Helvetica") is None


@pytest.mark.integration
def test_unknown_ids_fall_back(full_resume):
    document = render_resume(
        full_resume,
        {"templateId": "nope", "paperSize": "tabloid", "colorPresetId": "nope", "fontFamily": "nope"},
    )

    page = document.pages[0]
    assert document.metadata.template_id == "classic"
    assert (page.size, page.width, page.height) == ("letter", 612, 792)
    assert page.style["font_family"] == "Helvetica"
    assert page.style["color"] == "#1a202c"


@pytest.mark.integration
def test_custom_accent_reaches_nodes(full_resume):
    document = render_resume(full_resume, {"customAccentColor": "#ff6600", "headingStyle": "underline"})
    heading = document.find_all(role="section-heading")[0]
    assert heading.style["border_bottom_color"] == "#ff6600"


@pytest.mark.integration
def test_first_render_registers_fonts(full_resume):
    backend = InMemoryFontBackend()
    assert not fonts_registered()

    render_resume(full_resume, font_backend=backend)
    render_resume(full_resume, {"templateId": "modern"}, font_backend=backend)

    assert fonts_registered()
    assert backend.calls == len(backend.families)
    assert "Inter" in backend.families


@pytest.mark.integration
def test_content_object_and_invalid_inputs(full_resume):
    content = ResumeContent.from_dict(full_resume)
    assert render_resume(content).section_keys()[0] == "summary"

    with pytest.raises(InvalidResumeStructureError):
        render_resume(["not", "a", "mapping"])
    with pytest.raises(InvalidResumeStructureError):
        render_resume(full_resume, "classic")


@pytest.mark.integration
def test_template_failure_is_wrapped(full_resume, monkeypatch):
    def broken_compose(self):
        raise KeyError("missing style")

    monkeypatch.setattr(ClassicTemplate, "compose", broken_compose)

    with pytest.raises(DocumentAssemblyError) as exc_info:
        render_resume(full_resume)

    error = exc_info.value
    assert error.template_id == "classic"
    assert isinstance(error.original_error, KeyError)
    assert error.__cause__ is error.original_error


@pytest.mark.integration
def test_to_dict_round_trips_through_json(full_resume):
    data = json.loads(json.dumps(render_resume(full_resume, {"templateId": "creative"}).to_dict()))
    assert data["metadata"]["template_id"] == "creative"
    assert data["pages"][0]["children"][0]["role"] == "header"


@pytest.mark.integration
def test_unknown_template_ids_leave_no_state():
    registry = get_template_registry()
    content = {"contact": {"name": "Jane Doe"}}

    for index in range(1000):
        document = render_resume(content, {"templateId": f"user-supplied-{index}"})
        assert document.metadata.template_id == "classic"

    assert len(registry._cache) <= len(registry.templates)


@pytest.mark.integration
def test_blank_languages_render_no_section():
    content = {
        "contact": {"name": "Jane Doe"},
        "languages": [{"language": "", "fluency": ""}, {"language": "  "}],
        "education": [{"institution": "State University", "degree": "BSc"}],
    }
    for template in ("classic", "modern", "elegant"):
        document = render_resume(content, {"templateId": template})
        assert document.find_all(section_key="languages") == []
        assert document.section_keys() == ["education"]
