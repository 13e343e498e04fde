class ReviewError(Exception):
    """Base exception for review orchestration failures."""


class PromptTemplateError(ReviewError):
    """Raised when a bundled prompt template cannot be loaded."""
