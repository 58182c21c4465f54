"""
Text processing utilities for contact fields and display strings.
"""

import re

LINKEDIN_PREFIX = re.compile(r"^(https?://)?(www\.)?linkedin\.com/in/", re.IGNORECASE)
GITHUB_PREFIX = re.compile(r"^(https?://)?(www\.)?github\.com/", re.IGNORECASE)
URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def clean_linkedin(value: str) -> str:
    """
    Reduce a LinkedIn profile value to the bare username.

    Accepts the username alone or any URL form, with or without scheme and "www.".

    Example:
        >>> clean_linkedin("https://www.linkedin.com/in/janedoe/")
        'janedoe'
    """
    return LINKEDIN_PREFIX.sub("", value.strip()).rstrip("/")


def clean_github(value: str) -> str:
    """
    Reduce a GitHub profile value to the bare username.

    Example:
        >>> clean_github("github.com/janedoe")
        'janedoe'
    """
    return GITHUB_PREFIX.sub("", value.strip()).rstrip("/")


def clean_url(value: str) -> str:
    """Strip the http(s) scheme and a trailing slash for display."""
    return URL_SCHEME.sub("", value.strip()).rstrip("/")


def ensure_scheme(value: str) -> str:
    """Prefix https:// unless the value already carries an http(s) scheme."""
    value = value.strip()
    if URL_SCHEME.match(value):
        return value
    return f"https://{value}"


def collapse_whitespace(text: str) -> str:
    """
    Collapse runs of newlines into single spaces and trim the result.

    Example:
        >>> collapse_whitespace("Led team\\n\\nof five ")
        'Led team of five'
    """
    return re.sub(r"\n+", " ", text).strip()
