"""Unit tests for ResumeDesign parsing and merge_design."""

import pytest

from folio.contexts.content.exceptions import InvalidResumeStructureError
from folio.contexts.styling.design import (
    DEFAULT_DESIGN,
    SECTION_KEYS,
    ResumeDesign,
    merge_design,
)


@pytest.mark.unit
def test_merge_design_defaults():
    design = merge_design()

    assert design.template_id == "classic"
    assert design.paper_size == "letter"
    assert design.line_height == 1.15
    assert design.header_alignment == "center"
    assert design.date_format == "Month Year"
    assert design.section_order == list(SECTION_KEYS)
    assert design.settings_for("skills").columns == 2
    assert all(design.settings_for(key).enabled for key in SECTION_KEYS)
    assert design.show_page_numbers is False
    assert design.page_number_position == "bottom-center"


@pytest.mark.unit
def test_merge_design_section_settings_are_merged_per_key():
    design = merge_design(
        {
            "templateId": "elegant",
            "sectionSettings": {
                "skills": {"columns": 3},
                "awards": {"enabled": False, "customTitle": "Honors"},
            },
        }
    )

    assert design.template_id == "elegant"
    assert design.settings_for("skills").columns == 3
    assert design.settings_for("skills").enabled
    assert not design.settings_for("awards").enabled
    assert design.settings_for("awards").custom_title == "Honors"
    assert design.settings_for("education").enabled


@pytest.mark.unit
def test_merge_design_does_not_mutate_defaults():
    merge_design({"sectionSettings": {"skills": {"columns": 1}}, "sectionOrder": ["skills"]})
    assert DEFAULT_DESIGN["sectionSettings"]["skills"]["columns"] == 2
    assert DEFAULT_DESIGN["sectionOrder"] == list(SECTION_KEYS)


@pytest.mark.unit
def test_merge_design_accepts_resume_design():
    original = merge_design({"templateId": "compact", "customAccentColor": "#123456"})
    again = merge_design(original)
    assert again == original


@pytest.mark.unit
def test_merge_design_rejects_non_mapping():
    with pytest.raises(InvalidResumeStructureError):
        merge_design(["classic"])


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("bold", "bold"),
        ("caps", "caps"),
        ("all-caps", "caps"),
        ("underline", "underline"),
        ("wavy", "bold"),
    ],
)
def test_resolved_heading_style(value, expected):
    assert ResumeDesign(heading_style=value).resolved_heading_style == expected


@pytest.mark.unit
def test_from_dict_reads_camel_case_and_custom_blocks():
    design = ResumeDesign.from_dict(
        {
            "templateId": "modern",
            "customMargins": {"top": 20, "bogus": 1},
            "customFontSizes": {"body": 12},
            "showPageNumbers": True,
            "pageNumberPosition": "top-right",
        }
    )

    assert design.template_id == "modern"
    assert design.custom_margins.top == 20
    assert design.custom_margins.left is None
    assert design.custom_font_sizes.body == 12
    assert design.custom_spacing is None
    assert design.show_page_numbers is True
    assert design.page_number_position == "top-right"


@pytest.mark.unit
def test_to_dict_omits_unset_values():
    data = ResumeDesign(line_height=None).to_dict()
    assert "lineHeight" not in data
    assert "customMargins" not in data
    assert data["templateId"] == "classic"


@pytest.mark.unit
def test_settings_for_unknown_key_is_enabled():
    assert ResumeDesign().settings_for("hobbies").enabled
