"""
Legacy Designer Settings Adapter

Converts the older free-form designer settings (absolute margins, font sizes, gaps and
CSS-like heading flags) to a preset-based ResumeDesign, and back.
"""

import copy
from typing import Any, Dict, Mapping, Optional

from folio.contexts.styling.design import DEFAULT_DESIGN, ResumeDesign, merge_design
from folio.contexts.styling.presets import (
    get_font_size_preset,
    get_margin_preset,
    get_spacing_preset,
)

VALID_FONT_KEYS = (
    "helvetica",
    "times",
    "courier",
    "inter",
    "roboto",
    "open-sans",
    "lato",
    "merriweather",
    "source-sans",
)

# Legacy font names mapped to the closest available font key
LEGACY_FONT_MAPPING = {
    "georgia": "merriweather",
    "playfair": "merriweather",
    "garamond": "merriweather",
    "cambria": "merriweather",
    "palatino": "merriweather",
    "montserrat": "inter",
    "poppins": "inter",
    "nunito": "lato",
    "raleway": "inter",
}


def margins_to_preset(margins: float) -> str:
    if margins <= 36:
        return "compact"
    if margins >= 60:
        return "spacious"
    return "normal"


def font_size_to_preset(body_size: float) -> str:
    if body_size <= 9:
        return "small"
    if body_size >= 12:
        return "large"
    return "normal"


def spacing_to_preset(gap: Optional[float]) -> str:
    if not gap:
        return "normal"
    if gap <= 12:
        return "compact"
    if gap >= 20:
        return "relaxed"
    return "normal"


def legacy_heading_style(settings: Mapping[str, Any]) -> str:
    if settings.get("textTransform") == "uppercase":
        return "caps"
    if settings.get("textDecorationHeadings") == "underline":
        return "underline"
    return "bold"


def convert_font_family(font: Optional[str]) -> str:
    if not font:
        return "helvetica"
    if font in VALID_FONT_KEYS:
        return font
    return LEGACY_FONT_MAPPING.get(font, "helvetica")


def convert_to_resume_design(
    settings: Mapping[str, Any],
    section_settings: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> ResumeDesign:
    """
    Convert legacy designer settings to a ResumeDesign.

    Args:
        settings: Legacy designer settings (camelCase keys such as margins, fontSizeBody,
                  sectionGap, textTransform, accentColor)
        section_settings: Legacy per-section settings ({visible, customTitle}); entries
                          with visible=False become enabled=False

    Returns:
        Complete ResumeDesign using the default template and section order
    """
    merged_sections = copy.deepcopy(DEFAULT_DESIGN["sectionSettings"])
    for key, value in (section_settings or {}).items():
        if key in merged_sections:
            merged_sections[key] = {
                **merged_sections[key],
                "enabled": value.get("visible") is not False,
                "customTitle": value.get("customTitle"),
            }

    date_format = settings.get("dateFormat")
    if date_format:
        date_format = date_format.replace("YYYY-MM", "MM/YYYY")

    return merge_design(
        {
            "templateId": DEFAULT_DESIGN["templateId"],
            "paperSize": settings.get("paperSize") or "letter",
            "margins": margins_to_preset(settings.get("margins") or 48),
            "fontFamily": convert_font_family(settings.get("fontFamily")),
            "fontSize": font_size_to_preset(settings.get("fontSizeBody") or 11),
            "headingStyle": legacy_heading_style(settings),
            "colorPresetId": settings.get("colorPreset") or "professional",
            "customAccentColor": settings.get("accentColor"),
            "sectionSpacing": spacing_to_preset(settings.get("sectionGap")),
            "dateFormat": date_format or "Month Year",
            "sectionSettings": merged_sections,
        }
    )


def convert_to_designer_settings(design: ResumeDesign) -> Dict[str, Any]:
    """Convert a ResumeDesign back to legacy designer settings (preset values expanded)."""
    margins = get_margin_preset(design.margins)
    fonts = get_font_size_preset(design.font_size)
    spacing = get_spacing_preset(design.section_spacing)

    return {
        "margins": margins["top"],
        "paperSize": design.paper_size,
        "fontFamily": design.font_family,
        "fontSizeBody": fonts["body"],
        "fontSizeHeadings": fonts["section"],
        "fontSizeName": fonts["name"],
        "sectionGap": spacing["section"],
        "itemGap": spacing["item"],
        "bulletSpacing": spacing["bullet"],
        "accentColor": design.custom_accent_color or "#6366f1",
        "colorPreset": design.color_preset_id,
        "textTransform": "uppercase" if design.resolved_heading_style == "caps" else "none",
        "textDecorationHeadings": (
            "underline" if design.resolved_heading_style == "underline" else "none"
        ),
        "dateFormat": design.date_format,
    }
