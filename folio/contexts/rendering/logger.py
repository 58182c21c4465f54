"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Optional[Path] = None, template_id: Optional[str] = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session (defaults to FOLIO_LOGS_PATH)
        template_id: Template requested on the command line, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, template_id="modern")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Template": template_id or "(from design)"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(template_id: str, paper_size: str, section_order) -> None:
    """Log start of a render with its configuration."""
    _log_info(f"Rendering with template '{template_id}' on {paper_size}")
    _log_debug(f"  Section order: {', '.join(section_order) or '(empty)'}")


def log_render_result(document, elapsed_time: float) -> None:
    """
    Log the outcome of a render.

    Args:
        document: Assembled Document
        elapsed_time: Time taken to assemble, in seconds
    """
    sections = document.section_keys()
    _log_success(f"Assembled {len(sections)} sections ({elapsed_time:.3f}s)")
    _log_debug(f"  Sections: {', '.join(sections) or '(none)'}")
    _log_debug(f"  Font: {document.metadata.font_family}")


def log_font_registration(families, skipped) -> None:
    """Log which font families were handed to the backend."""
    if families:
        _log_info(f"Registered {len(families)} font families: {', '.join(families)}")
    if skipped:
        _log_debug(f"  Built-in families (no assets): {', '.join(skipped)}")
