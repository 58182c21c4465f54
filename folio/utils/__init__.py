"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup with provenance tracking
- URL and contact-field text cleanup
"""

from folio.utils.text_processing import clean_github, clean_linkedin, clean_url

__all__ = ["clean_github", "clean_linkedin", "clean_url"]
