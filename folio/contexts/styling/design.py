"""
Resume Design Configuration

Defines the declarative design configuration consumed by the rendering engine: template,
page, typography, color, spacing, date format, section ordering and page numbering.

Designs arrive as JSON-serializable mappings using camelCase keys (the wire format shared
with editors and stored designs). ResumeDesign.from_dict() reads that format and
merge_design() layers a partial design over DEFAULT_DESIGN.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from folio.contexts.content.exceptions import InvalidResumeStructureError

SECTION_KEYS = (
    "contact",
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
)

TEMPLATE_IDS = (
    "classic",
    "modern",
    "minimal",
    "executive",
    "professional",
    "compact",
    "creative",
    "elegant",
)

DATE_FORMATS = ("MM/YYYY", "Month Year", "Mon YYYY", "YYYY")

HEADING_STYLES = ("bold", "caps", "underline")

# "all-caps" is accepted as a synonym for "caps"
HEADING_STYLE_ALIASES = {"all-caps": "caps", "allcaps": "caps", "uppercase": "caps"}

PAGE_NUMBER_POSITIONS = ("bottom-center", "bottom-right", "top-right")


@dataclass
class CustomMargins:
    """Absolute page margins in points, overriding the margin preset."""

    top: Optional[float] = None
    right: Optional[float] = None
    bottom: Optional[float] = None
    left: Optional[float] = None


@dataclass
class CustomFontSizes:
    """Absolute font sizes in points, overriding the font size preset."""

    name: Optional[float] = None
    section: Optional[float] = None
    body: Optional[float] = None


@dataclass
class CustomSpacing:
    """Absolute spacing in points, overriding the spacing preset."""

    section: Optional[float] = None
    item: Optional[float] = None


@dataclass
class SectionDisplaySettings:
    """
    Per-section display settings.

    Attributes:
        enabled: False removes the section entirely (heading included)
        custom_title: Heading text replacing the template's default label
        columns: Column count for the skills grid (1, 2 or 3)
    """

    enabled: bool = True
    custom_title: Optional[str] = None
    columns: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SectionDisplaySettings":
        if not data:
            return cls()
        return cls(
            enabled=data.get("enabled") is not False,
            custom_title=data.get("customTitle") or None,
            columns=data.get("columns"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"enabled": self.enabled}
        if self.custom_title:
            result["customTitle"] = self.custom_title
        if self.columns is not None:
            result["columns"] = self.columns
        return result


@dataclass
class ResumeDesign:
    """
    Complete design configuration for one render.

    Attributes mirror the camelCase wire format (templateId -> template_id, etc.).
    Override fields (custom_*) take precedence over their preset counterparts when present.
    """

    template_id: str = "classic"
    paper_size: str = "letter"
    margins: str = "normal"
    custom_margins: Optional[CustomMargins] = None
    font_family: str = "helvetica"
    font_size: str = "normal"
    custom_font_sizes: Optional[CustomFontSizes] = None
    heading_style: str = "bold"
    line_height: Optional[float] = None
    header_alignment: Optional[str] = None
    color_preset_id: str = "professional"
    custom_accent_color: Optional[str] = None
    section_spacing: str = "normal"
    custom_spacing: Optional[CustomSpacing] = None
    date_format: str = "Month Year"
    section_order: List[str] = field(default_factory=lambda: list(SECTION_KEYS))
    section_settings: Dict[str, SectionDisplaySettings] = field(default_factory=dict)
    show_page_numbers: bool = False
    page_number_position: str = "bottom-center"

    @property
    def resolved_heading_style(self) -> str:
        """Heading style with aliases resolved; unknown values render as "bold"."""
        style = HEADING_STYLE_ALIASES.get(self.heading_style, self.heading_style)
        return style if style in HEADING_STYLES else "bold"

    def settings_for(self, key: str) -> SectionDisplaySettings:
        """Return display settings for a section key (enabled defaults when unset)."""
        return self.section_settings.get(key) or SectionDisplaySettings()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ResumeDesign":
        """
        Build a design from its camelCase mapping.

        Missing keys take the dataclass defaults. Values are not validated against the
        known ids here; resolution falls back to documented defaults later.

        Raises:
            InvalidResumeStructureError: If data is not a mapping
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidResumeStructureError(
                f"Design must be a mapping, got {type(data).__name__}"
            )

        defaults = cls()

        def _custom(key: str, custom_cls):
            value = data.get(key)
            if not value:
                return None
            known = {k: value.get(k) for k in custom_cls.__dataclass_fields__}
            return custom_cls(**known)

        section_settings = {
            key: SectionDisplaySettings.from_dict(value)
            for key, value in (data.get("sectionSettings") or {}).items()
        }

        return cls(
            template_id=data.get("templateId") or defaults.template_id,
            paper_size=data.get("paperSize") or defaults.paper_size,
            margins=data.get("margins") or defaults.margins,
            custom_margins=_custom("customMargins", CustomMargins),
            font_family=data.get("fontFamily") or defaults.font_family,
            font_size=data.get("fontSize") or defaults.font_size,
            custom_font_sizes=_custom("customFontSizes", CustomFontSizes),
            heading_style=data.get("headingStyle") or defaults.heading_style,
            line_height=data.get("lineHeight"),
            header_alignment=data.get("headerAlignment"),
            color_preset_id=data.get("colorPresetId") or defaults.color_preset_id,
            custom_accent_color=data.get("customAccentColor") or None,
            section_spacing=data.get("sectionSpacing") or defaults.section_spacing,
            custom_spacing=_custom("customSpacing", CustomSpacing),
            date_format=data.get("dateFormat") or defaults.date_format,
            section_order=list(data.get("sectionOrder") or defaults.section_order),
            section_settings=section_settings,
            show_page_numbers=data.get("showPageNumbers") is True,
            page_number_position=data.get("pageNumberPosition") or defaults.page_number_position,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the camelCase wire format (None values omitted)."""

        def _custom(value):
            if value is None:
                return None
            return {k: v for k, v in value.__dict__.items() if v is not None}

        result = {
            "templateId": self.template_id,
            "paperSize": self.paper_size,
            "margins": self.margins,
            "customMargins": _custom(self.custom_margins),
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
            "customFontSizes": _custom(self.custom_font_sizes),
            "headingStyle": self.heading_style,
            "lineHeight": self.line_height,
            "headerAlignment": self.header_alignment,
            "colorPresetId": self.color_preset_id,
            "customAccentColor": self.custom_accent_color,
            "sectionSpacing": self.section_spacing,
            "customSpacing": _custom(self.custom_spacing),
            "dateFormat": self.date_format,
            "sectionOrder": list(self.section_order),
            "sectionSettings": {k: v.to_dict() for k, v in self.section_settings.items()},
            "showPageNumbers": self.show_page_numbers,
            "pageNumberPosition": self.page_number_position,
        }
        return {k: v for k, v in result.items() if v is not None}


DEFAULT_DESIGN: Dict[str, Any] = {
    "templateId": "classic",
    "paperSize": "letter",
    "margins": "normal",
    "fontFamily": "helvetica",
    "fontSize": "normal",
    "headingStyle": "bold",
    "lineHeight": 1.15,
    "headerAlignment": "center",
    "colorPresetId": "professional",
    "sectionSpacing": "normal",
    "dateFormat": "Month Year",
    "sectionOrder": list(SECTION_KEYS),
    "sectionSettings": {
        "contact": {"enabled": True},
        "summary": {"enabled": True},
        "experience": {"enabled": True},
        "education": {"enabled": True},
        "skills": {"enabled": True, "columns": 2},
        "projects": {"enabled": True},
        "certifications": {"enabled": True},
        "awards": {"enabled": True},
        "languages": {"enabled": True},
        "volunteer": {"enabled": True},
        "publications": {"enabled": True},
    },
    "showPageNumbers": False,
    "pageNumberPosition": "bottom-center",
}


def merge_design(overrides: Union[Mapping[str, Any], ResumeDesign, None] = None) -> ResumeDesign:
    """
    Merge a partial design over DEFAULT_DESIGN.

    Top-level keys in overrides replace defaults; sectionSettings are merged per section
    key so a partial override (e.g. only {"skills": {"columns": 3}}) keeps the other
    sections' defaults.

    Args:
        overrides: Partial camelCase design mapping, a ResumeDesign, or None

    Returns:
        Complete ResumeDesign

    Raises:
        InvalidResumeStructureError: If overrides is neither a mapping nor a ResumeDesign
    """
    if isinstance(overrides, ResumeDesign):
        overrides = overrides.to_dict()
    if overrides is None:
        overrides = {}
    if not isinstance(overrides, Mapping):
        raise InvalidResumeStructureError(
            f"Design overrides must be a mapping, got {type(overrides).__name__}"
        )

    merged = copy.deepcopy(DEFAULT_DESIGN)
    for key, value in overrides.items():
        if key == "sectionSettings" or value is None:
            continue
        merged[key] = copy.deepcopy(value)

    for key, value in (overrides.get("sectionSettings") or {}).items():
        merged["sectionSettings"][key] = {
            **merged["sectionSettings"].get(key, {}),
            **(value or {}),
        }

    return ResumeDesign.from_dict(merged)
