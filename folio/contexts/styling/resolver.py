"""
Design Resolver

Merges design overrides with preset tables into concrete numeric and color style values.

Precedence for every channel: an override field, when present, wins over the preset;
presets are always a complete fallback. Resolution is pure and deterministic.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from folio.contexts.styling.design import ResumeDesign
from folio.contexts.styling.presets import (
    get_color_preset,
    get_font_family,
    get_font_size_preset,
    get_margin_preset,
    get_spacing_preset,
)

DEFAULT_LINE_HEIGHT = 1.15


@dataclass(frozen=True)
class PagePadding:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class FontSizes:
    name: float
    section: float
    body: float
    small: float


@dataclass(frozen=True)
class Spacing:
    section: float
    item: float
    bullet: float


@dataclass(frozen=True)
class ColorSet:
    primary: str
    accent: str
    text: str
    muted: str
    background: str
    id: str = ""
    name: str = ""


@dataclass(frozen=True)
class ComputedStyles:
    """
    Concrete style bundle computed from a design.

    Attributes:
        page: Page padding on all four sides (points)
        fonts: Font sizes for name, section headings, body and small text (points)
        spacing: Gaps between sections, items and bullets (points)
        colors: Primary, accent, text, muted and background colors
    """

    page: PagePadding
    fonts: FontSizes
    spacing: Spacing
    colors: ColorSet

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def resolve_margins(design: ResumeDesign) -> PagePadding:
    """Custom margins if present (missing sides from the preset), else the margin preset."""
    margins = get_margin_preset(design.margins)
    if design.custom_margins is not None:
        overrides = {k: v for k, v in asdict(design.custom_margins).items() if v is not None}
        margins.update(overrides)
    return PagePadding(**margins)


def resolve_font_sizes(design: ResumeDesign) -> FontSizes:
    """
    Resolve font sizes.

    With custom font sizes, small is derived as max(7, body - 1); otherwise the preset for
    design.font_size is used ("normal" when the key is unknown).
    """
    preset = get_font_size_preset(design.font_size)
    custom = design.custom_font_sizes
    if custom is None:
        return FontSizes(**preset)

    name = custom.name if custom.name is not None else preset["name"]
    section = custom.section if custom.section is not None else preset["section"]
    body = custom.body if custom.body is not None else preset["body"]
    return FontSizes(name=name, section=section, body=body, small=max(7, body - 1))


def resolve_spacing(design: ResumeDesign) -> Spacing:
    """
    Resolve spacing.

    With custom spacing, bullet is derived as max(1, round(item / 2)); otherwise the preset
    for design.section_spacing is used ("normal" when the key is unknown).
    """
    preset = get_spacing_preset(design.section_spacing)
    custom = design.custom_spacing
    if custom is None:
        return Spacing(**preset)

    section = custom.section if custom.section is not None else preset["section"]
    item = custom.item if custom.item is not None else preset["item"]
    # half rounds up (5 -> 3), unlike round()
    bullet = max(1, int(item / 2 + 0.5))
    return Spacing(section=section, item=item, bullet=bullet)


def resolve_colors(design: ResumeDesign) -> ColorSet:
    """Color preset by id (first preset when unknown) with an optional accent override."""
    preset = get_color_preset(design.color_preset_id)
    if design.custom_accent_color:
        preset["accent"] = design.custom_accent_color
    return ColorSet(**preset)


def compute_styles(design: ResumeDesign) -> ComputedStyles:
    """
    Compute the concrete style bundle for a design.

    Args:
        design: Complete design configuration

    Returns:
        ComputedStyles with page padding, font sizes, spacing and colors

    Example:
        >>> styles = compute_styles(ResumeDesign(font_size="large"))
        >>> styles.fonts.body
        11
    """
    return ComputedStyles(
        page=resolve_margins(design),
        fonts=resolve_font_sizes(design),
        spacing=resolve_spacing(design),
        colors=resolve_colors(design),
    )


def resolve_font_family(design: ResumeDesign) -> str:
    """Backend font family name for the design (Helvetica when unknown)."""
    return get_font_family(design.font_family)


def resolve_line_height(design: ResumeDesign, default: float = DEFAULT_LINE_HEIGHT) -> float:
    return design.line_height or default


def heading_decoration(
    heading_style: str, styles: ComputedStyles, letter_spacing: float = 1
) -> Dict[str, Any]:
    """
    Style attributes that implement a heading style on top of a template's base heading.

    - bold: no extra attributes (base heading is already bold)
    - caps: uppercase with letter spacing, one point smaller
    - underline: accent-colored rule under the heading
    """
    if heading_style == "caps":
        return {
            "text_transform": "uppercase",
            "letter_spacing": letter_spacing,
            "font_size": styles.fonts.section - 1,
        }
    if heading_style == "underline":
        return {
            "border_bottom_width": 1,
            "border_bottom_color": styles.colors.accent,
            "padding_bottom": 3,
        }
    return {}
