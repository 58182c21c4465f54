"""
Layout context logger.

Provides logging interface for layout context with automatic [layout] prefix.
All layout modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[layout]"


def _log_info(message: str) -> None:
    """Log info message with [layout] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [layout] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


# High-level layout-specific logging helpers


def log_fallback(kind: str, requested, fallback) -> None:
    """Record that an unrecognized configuration value was replaced by its default."""
    _log_debug(f"Unknown {kind} '{requested}', using '{fallback}'")


def log_section_skipped(section_key: str, reason: str) -> None:
    _log_debug(f"Skipping section '{section_key}': {reason}")


def log_visibility_summary(section_order, skipped) -> None:
    """Log the final render sequence after deduplication and filtering."""
    _log_debug(f"Render order: {', '.join(section_order) or '(empty)'}")
    if skipped:
        _log_debug(f"Suppressed sections: {', '.join(skipped)}")
