class AIProviderError(Exception):
    """Raised when the AI provider returns an unusable response."""


class AIProviderNetworkError(AIProviderError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
