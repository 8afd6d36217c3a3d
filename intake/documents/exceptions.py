class IntakeError(Exception):
    """Base class for task-scoped document intake failures.

    Instances terminate only the task that raised them; the message becomes
    the task's ``error`` text.
    """


class ClassificationError(IntakeError):
    """Raised when the classifier cannot determine a document category."""


class UnsupportedCategoryError(IntakeError):
    """Raised when a category was determined but no extractor handles it."""


class ExtractionError(IntakeError):
    """Raised when an extractor call fails."""


class ExtractionValidationError(ExtractionError):
    """Raised when extracted data is incomplete or malformed."""


class PromptLoadError(IntakeError):
    """Raised when a bundled prompt template or schema cannot be read."""
