"""
Font Registration

Hands the font asset table (family -> [{src, weight}]) to the rendering backend exactly once
per process. Built-in families (Helvetica, Times-Roman, Courier) need no assets and are skipped.

The check-and-set of the one-time guard runs under a lock, so concurrent first renders make
a single registration pass. A failing backend leaves the guard unset and the error propagates
to the caller; the next call retries.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from folio.contexts.rendering.logger import _log_debug, log_font_registration
from folio.contexts.styling.presets import get_font_sources, get_registry, is_builtin_family


class FontBackend(Protocol):
    """Rendering backend collaborator that loads font assets."""

    def register(self, family: str, sources: List[Dict[str, Any]]) -> None: ...


@dataclass
class InMemoryFontBackend:
    """
    Backend that records registrations without loading anything.

    Used when no paginating backend is attached (the document tree is the output) and in tests.

    Attributes:
        families: family -> sources, as registered
        calls: Number of register() calls received
    """

    families: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)
    calls: int = 0

    def register(self, family: str, sources: List[Dict[str, Any]]) -> None:
        self.calls += 1
        self.families[family] = [dict(source) for source in sources]


_default_backend = InMemoryFontBackend()
_registration_lock = threading.Lock()
_fonts_registered = False


def register_fonts(backend: Optional[FontBackend] = None) -> bool:
    """
    Register every non-built-in font family with the backend, once per process.

    Args:
        backend: Backend to register with. Defaults to the process-wide in-memory backend

    Returns:
        True if this call performed the registration, False if it had already happened

    Raises:
        Any exception raised by the backend, unchanged
    """
    global _fonts_registered

    if _fonts_registered:
        return False

    with _registration_lock:
        if _fonts_registered:
            return False

        target = backend if backend is not None else _default_backend
        registered = []
        for family, sources in get_font_sources().items():
            if is_builtin_family(family):
                continue
            target.register(family, sources)
            registered.append(family)

        _fonts_registered = True

    log_font_registration(registered, get_registry().table("builtin_families"))
    return True


def fonts_registered() -> bool:
    return _fonts_registered


def reset_font_registration() -> None:
    """Clear the one-time guard (tests only)."""
    global _fonts_registered
    with _registration_lock:
        _fonts_registered = False
    _log_debug("Font registration guard reset")
