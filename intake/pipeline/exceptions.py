class PipelineError(Exception):
    """Base exception for pipeline programming and input errors."""


class InvalidTransitionError(PipelineError):
    """Raised when a task is moved along an edge its state machine does not have."""


class FileReadError(PipelineError):
    """Raised when a submitted file cannot be read from disk."""
