class AIError(Exception):
    """Base exception for all AI collaborator errors."""


class AIUnavailableError(AIError):
    """Raised when the AI provider cannot be reached or rejects the call. Retryable."""


class AIResponseError(AIError):
    """Raised when the AI provider answers with an empty or malformed response."""
