"""Every template must suppress exactly the same content."""

from collections import Counter

import pytest

from folio.contexts.layout.registry import list_templates
from folio.contexts.rendering import render_resume

TEMPLATE_IDS = [template["id"] for template in list_templates()]

HIDDEN_TEXT = (
    "Ghost",
    "Disabled Ltd",
    "Hidden bullet",
    "Hidden skill",
    "Should not render",
    "GPA",
)


@pytest.mark.integration
@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_disabled_content_never_renders(template_id, full_resume):
    document = render_resume(full_resume, {"templateId": template_id})
    text = document.text_content()

    for hidden in HIDDEN_TEXT:
        assert hidden not in text
    assert "Translated Menabrea's memoir on the Analytical Engine" in text
    assert "Published Note G, the first computer program" in text


@pytest.mark.integration
@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_same_sections_in_every_template(template_id, full_resume):
    design = {
        "templateId": template_id,
        "sectionOrder": ["contact", "experience", "summary", "experience", "skills", "awards", "languages"],
        "sectionSettings": {"awards": {"enabled": False}},
    }
    document = render_resume(full_resume, design)

    keys = document.section_keys()
    assert sorted(keys) == ["experience", "languages", "skills", "summary"]
    assert all(count == 1 for count in Counter(keys).values())
    assert document.find_all(section_key="awards") == []

    entries = document.find_all(role="entry", section_key="experience")
    assert len(entries) == 2
    assert len(document.find_all(role="bullet", section_key="experience")) == 2


@pytest.mark.integration
@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_empty_sections_are_omitted(template_id):
    content = {
        "contact": {"name": "Jane Doe"},
        "experience": [{"company": "Acme", "enabled": False}],
        "skills": {"technical": [{"name": "Go", "enabled": False}]},
        "education": [{"institution": "State University", "degree": "BSc"}],
    }
    document = render_resume(content, {"templateId": template_id})

    assert document.section_keys() == ["education"]
    assert document.find_all(role="section-heading", section_key="experience") == []
    assert document.find_all(role="section-heading", section_key="skills") == []


@pytest.mark.integration
@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_name_and_title_render_once(template_id, full_resume):
    document = render_resume(full_resume, {"templateId": template_id})

    assert [n.text.lower() for n in document.find_all(role="name")] == ["ada lovelace"]
    assert [n.text for n in document.find_all(role="target-title")] == ["Analytical Engine Programmer"]


@pytest.mark.integration
@pytest.mark.parametrize("template_id", TEMPLATE_IDS)
def test_hidden_contact_section(template_id, full_resume):
    design = {"templateId": template_id, "sectionSettings": {"contact": {"enabled": False}}}
    document = render_resume(full_resume, design)

    assert document.find_all(role="header") == []
    assert document.find_all(role="contact-item") == []
    assert "ada@example.com" not in document.text_content()
