"""Unit tests for the legacy designer settings adapter."""

import pytest

from folio.contexts.styling.design import ResumeDesign
from folio.contexts.styling.designer_adapter import (
    convert_font_family,
    convert_to_designer_settings,
    convert_to_resume_design,
    font_size_to_preset,
    margins_to_preset,
    spacing_to_preset,
)


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [(30, "compact"), (36, "compact"), (48, "normal"), (60, "spacious")])
def test_margins_to_preset(value, expected):
    assert margins_to_preset(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [(9, "small"), (10, "normal"), (11, "normal"), (12, "large")])
def test_font_size_to_preset(value, expected):
    assert font_size_to_preset(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [(None, "normal"), (12, "compact"), (16, "normal"), (24, "relaxed")])
def test_spacing_to_preset(value, expected):
    assert spacing_to_preset(value) == expected


@pytest.mark.unit
def test_convert_font_family():
    assert convert_font_family(None) == "helvetica"
    assert convert_font_family("lato") == "lato"
    assert convert_font_family("georgia") == "merriweather"
    assert convert_font_family("papyrus") == "helvetica"


@pytest.mark.unit
def test_convert_to_resume_design():
    design = convert_to_resume_design(
        {
            "margins": 72,
            "fontSizeBody": 9,
            "sectionGap": 10,
            "textTransform": "uppercase",
            "fontFamily": "montserrat",
            "accentColor": "#abcdef",
            "dateFormat": "YYYY-MM",
        },
        {"awards": {"visible": False}, "skills": {"customTitle": "Toolbox"}},
    )

    assert design.margins == "spacious"
    assert design.font_size == "small"
    assert design.section_spacing == "compact"
    assert design.resolved_heading_style == "caps"
    assert design.font_family == "inter"
    assert design.custom_accent_color == "#abcdef"
    assert design.date_format == "MM/YYYY"
    assert not design.settings_for("awards").enabled
    assert design.settings_for("skills").custom_title == "Toolbox"
    assert design.settings_for("skills").columns == 2


@pytest.mark.unit
def test_convert_underline_heading():
    design = convert_to_resume_design({"textDecorationHeadings": "underline"})
    assert design.heading_style == "underline"


@pytest.mark.unit
def test_convert_to_designer_settings():
    settings = convert_to_designer_settings(
        ResumeDesign(margins="compact", font_size="large", heading_style="all-caps")
    )
    assert settings["margins"] == 36
    assert settings["fontSizeBody"] == 11
    assert settings["fontSizeName"] == 26
    assert settings["sectionGap"] == 16
    assert settings["textTransform"] == "uppercase"
    assert settings["textDecorationHeadings"] == "none"
    assert settings["accentColor"] == "#6366f1"


@pytest.mark.unit
def test_adapter_exported_from_styling_context():
    from folio.contexts import styling

    assert styling.convert_to_resume_design is convert_to_resume_design
    assert styling.convert_to_designer_settings is convert_to_designer_settings
    assert {"convert_to_resume_design", "convert_to_designer_settings"} <= set(styling.__all__)
