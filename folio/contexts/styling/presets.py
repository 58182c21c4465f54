"""
Design Preset Tables

Loads the versionable preset tables (margins, font sizes, spacing, paper sizes, colors,
font families) from presets.yaml and provides lookups with documented fallbacks.

Unknown keys never raise: margin/font-size/spacing lookups fall back to "normal",
color lookups fall back to the first color preset, font family lookups fall back to
Helvetica, and paper size lookups fall back to letter.

Examples:
    >>> get_font_size_preset("large")["body"]
    11
    >>> get_color_preset("no-such-preset")["id"]
    'professional'
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.styling.logger import log_fallback

load_dotenv()
DEFAULT_PRESETS_PATH = Path(__file__).parent / "presets.yaml"
PRESETS_PATH = Path(os.getenv("FOLIO_PRESETS_PATH", str(DEFAULT_PRESETS_PATH)))

FALLBACK_PRESET_KEY = "normal"
FALLBACK_PAPER_SIZE = "letter"
FALLBACK_FONT_FAMILY = "Helvetica"

REQUIRED_TABLES = (
    "margins",
    "font_sizes",
    "spacing",
    "paper_sizes",
    "colors",
    "font_families",
    "builtin_families",
    "font_sources",
)


class PresetRegistry:
    """
    Registry for loading and caching the preset tables.

    The YAML file is read once on first access; later lookups hit the in-memory copy.
    Tables are returned as plain dicts/lists (OmegaConf containers are resolved away).
    """

    def __init__(self, config_path: Path = None):
        """
        Initialize the preset registry.

        Args:
            config_path: Path to presets YAML. Defaults to FOLIO_PRESETS_PATH from
                         environment, or the bundled presets.yaml
        """
        if config_path is None:
            config_path = PRESETS_PATH

        self.config_path = config_path
        self._cache: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load all preset tables, caching the result.

        Returns:
            Dict mapping table name to its contents

        Raises:
            FileNotFoundError: If the presets file does not exist
            ValueError: If a required table is missing from the file
        """
        if self._cache is not None:
            return self._cache

        if not self.config_path.exists():
            raise FileNotFoundError(f"Presets file not found: {self.config_path}")

        tables = OmegaConf.to_container(OmegaConf.load(self.config_path), resolve=True)

        missing = [name for name in REQUIRED_TABLES if name not in tables]
        if missing:
            raise ValueError(f"Presets file {self.config_path} is missing tables: {missing}")

        for name in ("margins", "font_sizes", "spacing"):
            if FALLBACK_PRESET_KEY not in tables[name]:
                raise ValueError(
                    f"Preset table '{name}' must define a '{FALLBACK_PRESET_KEY}' entry"
                )
        if not tables["colors"]:
            raise ValueError("Preset table 'colors' must contain at least one entry")

        self._cache = tables
        return tables

    def table(self, name: str) -> Any:
        """Return one preset table by name."""
        return self.load()[name]

    def clear_cache(self):
        """Clear the loaded tables so the next access re-reads the file."""
        self._cache = None

    def is_loaded(self) -> bool:
        """Check whether the tables are currently cached."""
        return self._cache is not None


_registry = PresetRegistry()


def get_registry() -> PresetRegistry:
    """Return the process-wide preset registry."""
    return _registry


def _keyed_preset(table_name: str, key: str) -> Dict[str, float]:
    table = _registry.table(table_name)
    if key in table:
        return dict(table[key])
    log_fallback(table_name, key, FALLBACK_PRESET_KEY)
    return dict(table[FALLBACK_PRESET_KEY])


def get_margin_preset(key: str) -> Dict[str, float]:
    """Return {top, right, bottom, left} for a margin preset key ("normal" fallback)."""
    return _keyed_preset("margins", key)


def get_font_size_preset(key: str) -> Dict[str, float]:
    """Return {name, section, body, small} for a font size preset key ("normal" fallback)."""
    return _keyed_preset("font_sizes", key)


def get_spacing_preset(key: str) -> Dict[str, float]:
    """Return {section, item, bullet} for a spacing preset key ("normal" fallback)."""
    return _keyed_preset("spacing", key)


def get_paper_size(key: str) -> Dict[str, float]:
    """Return {width, height} in points for a paper size key (letter fallback)."""
    table = _registry.table("paper_sizes")
    if key in table:
        return dict(table[key])
    log_fallback("paper size", key, FALLBACK_PAPER_SIZE)
    return dict(table[FALLBACK_PAPER_SIZE])


def list_color_presets() -> List[Dict[str, str]]:
    """Return all color presets in table order."""
    return [dict(preset) for preset in _registry.table("colors")]


def get_color_preset(preset_id: str) -> Dict[str, str]:
    """
    Look up a color preset by id.

    Falls back to the first table entry when the id is not found.
    """
    presets = _registry.table("colors")
    for preset in presets:
        if preset["id"] == preset_id:
            return dict(preset)
    log_fallback("color preset", preset_id, presets[0]["id"])
    return dict(presets[0])


def get_font_family(key: str) -> str:
    """Map a design font key (e.g. "open-sans") to the backend family name."""
    families = _registry.table("font_families")
    if key in families:
        return families[key]
    log_fallback("font family", key, FALLBACK_FONT_FAMILY)
    return FALLBACK_FONT_FAMILY


def is_builtin_family(family: str) -> bool:
    """Check whether a backend family ships with the backend (no assets needed)."""
    return family in _registry.table("builtin_families")


def get_font_sources() -> Dict[str, List[Dict[str, Any]]]:
    """Return the family -> [{src, weight}] table handed to the rendering backend."""
    return {
        family: [dict(source) for source in sources]
        for family, sources in _registry.table("font_sources").items()
    }


def preset_keys() -> Dict[str, List[str]]:
    """List the selectable keys for every keyed preset table."""
    return {
        "margins": list(_registry.table("margins")),
        "font_sizes": list(_registry.table("font_sizes")),
        "spacing": list(_registry.table("spacing")),
        "paper_sizes": list(_registry.table("paper_sizes")),
        "colors": [preset["id"] for preset in _registry.table("colors")],
        "font_families": list(_registry.table("font_families")),
    }
