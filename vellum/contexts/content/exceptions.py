"""Custom exceptions for the content context."""

from typing import Any, Optional


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when resume content does not match the expected structure.

    Raised when a collection that must be a list (work, education, ...) holds
    something else, or when an entry is not a mapping. Missing optional
    fields are never an error.

    Attributes:
        message: Error description
        section: Name of the offending collection
        value: The value that failed validation
    """

    def __init__(self, message: str, section: Optional[str] = None, value: Any = None):
        self.message = message
        self.section = section
        self.value = value

        parts = [message]

        if section:
            parts.append(f"Section: {section}")

        if value is not None:
            snippet = repr(value)
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"Actual value: {snippet}")

        super().__init__("\n".join(parts))
