"""Custom exceptions for rendering context with template references."""

from typing import Optional


class DocumentAssemblyError(Exception):
    """
    Exception raised when a template fails to compose a document.

    Attributes:
        message: Error description
        template_id: Id of the template that was composing
        original_error: The exception raised by the template
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.original_error = original_error

        parts = [message]

        if template_id:
            parts.append(f"Template: {template_id}")

        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
