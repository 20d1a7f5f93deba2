class RedactionError(Exception):
    """Base exception for all redaction-related errors."""


class RedactionValidationError(RedactionError):
    """Raised when a redaction payload or region violates a field constraint."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class RedactionNotFoundError(RedactionError):
    """Raised when a redaction cannot be found in the store."""
