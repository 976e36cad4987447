"""Domain exceptions for the Registry bounded context."""


class ValidationError(ValueError):
    """Raised when input violates a registry business rule.

    Raised before any mutation is attempted, so a failed validation never
    leaves partial writes behind.
    """

    pass


class TooManyWidgetsError(ValidationError):
    """Raised when a dashboard layout holds more widgets than allowed."""

    def __init__(self, count: int, limit: int):
        super().__init__(f"Too many widgets: {count} (maximum {limit})")
        self.count = count
        self.limit = limit
