class ProductionError(Exception):
    """Base exception for all production-set errors."""


class ProductionValidationError(ProductionError):
    """Raised when a production request violates a field constraint."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class ProductionSetNotFoundError(ProductionError):
    """Raised when a production set cannot be found in the store."""
