"""
Styling Context

Responsibilities:
- Owns the versionable preset tables (margins, font sizes, spacing, paper sizes, colors, fonts)
- Represents the declarative design configuration and merges partial designs over defaults
- Resolves a design into concrete numeric and color style values

Owns: Preset tables, design configuration, style resolution
Never: Looks at resume content or decides what is visible
"""

from folio.contexts.styling.design import (
    DATE_FORMATS,
    DEFAULT_DESIGN,
    SECTION_KEYS,
    TEMPLATE_IDS,
    CustomFontSizes,
    CustomMargins,
    CustomSpacing,
    ResumeDesign,
    SectionDisplaySettings,
    merge_design,
)
from folio.contexts.styling.designer_adapter import convert_to_designer_settings, convert_to_resume_design
from folio.contexts.styling.resolver import ComputedStyles, compute_styles

__all__ = [
    # Design configuration
    "ResumeDesign",
    "SectionDisplaySettings",
    "CustomMargins",
    "CustomFontSizes",
    "CustomSpacing",
    "DEFAULT_DESIGN",
    "merge_design",
    # Enumerations
    "SECTION_KEYS",
    "TEMPLATE_IDS",
    "DATE_FORMATS",
    # Resolution
    "ComputedStyles",
    "compute_styles",
    # Legacy designer settings
    "convert_to_resume_design",
    "convert_to_designer_settings",
]
