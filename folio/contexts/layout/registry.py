from typing import Any, Dict, List, Optional, Type

from folio.contexts.layout.logger import _log_debug, log_fallback
from folio.contexts.layout.templates import TEMPLATE_CLASSES, TemplateRenderer
from folio.contexts.layout.visibility import VisibleResume
from folio.contexts.styling.design import ResumeDesign
from folio.contexts.styling.resolver import ComputedStyles

FALLBACK_TEMPLATE_ID = "classic"


class TemplateRegistry:
    """
    Registry mapping template ids to their renderer classes.

    Lookups of registered ids are cached. Unknown ids resolve to the fallback (classic)
    template without being cached, so the cache never holds more entries than templates.
    """

    def __init__(self, template_classes=TEMPLATE_CLASSES):
        """
        Initialize the template registry.

        Args:
            template_classes: Renderer classes to register. Defaults to the eight built-in
                              templates
        """
        self.templates: Dict[str, Type[TemplateRenderer]] = {
            cls.template_id: cls for cls in template_classes
        }
        if FALLBACK_TEMPLATE_ID not in self.templates:
            raise ValueError(f"Template registry must include '{FALLBACK_TEMPLATE_ID}'")
        self._cache: Dict[str, Type[TemplateRenderer]] = {}

    def get_template(self, template_id: Optional[str]) -> Type[TemplateRenderer]:
        """
        Get a renderer class by template id.

        Args:
            template_id: Template identifier (e.g., 'modern')

        Returns:
            Renderer class; the classic renderer when the id is unknown
        """
        key = template_id or ""
        if key in self._cache:
            return self._cache[key]

        template = self.templates.get(key)
        if template is None:
            log_fallback("template", template_id, FALLBACK_TEMPLATE_ID)
            return self.templates[FALLBACK_TEMPLATE_ID]

        self._cache[key] = template
        return template

    def has_template(self, template_id: str) -> bool:
        return template_id in self.templates

    def list_templates(self) -> List[Dict[str, Any]]:
        """Metadata for every registered template, in registration order."""
        return [cls.metadata() for cls in self.templates.values()]

    def clear_cache(self):
        """Clear the lookup cache."""
        self._cache.clear()

    def is_cached(self, template_id: str) -> bool:
        """
        Check if a template id lookup is in the cache.

        Args:
            template_id: Template identifier

        Returns:
            True if cached, False otherwise
        """
        return template_id in self._cache


_registry = TemplateRegistry()


def get_template_registry() -> TemplateRegistry:
    """Return the process-wide template registry."""
    return _registry


def get_template(template_id: Optional[str]) -> Type[TemplateRenderer]:
    return _registry.get_template(template_id)


def list_templates() -> List[Dict[str, Any]]:
    return _registry.list_templates()


def compose_template(
    visible: VisibleResume, design: ResumeDesign, styles: ComputedStyles
) -> TemplateRenderer:
    """
    Instantiate the renderer selected by design.template_id.

    The caller uses the returned renderer for both the page style and the body nodes
    (renderer.page_style(), renderer.compose()).
    """
    template_cls = get_template(design.template_id)
    _log_debug(f"Composing with template '{template_cls.template_id}'")
    return template_cls(visible, design, styles)

