"""Exceptions raised by the mortgage calculator core."""


class MortgageCalculatorError(Exception):
    """Base exception for all mortgage calculator errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidInputError(MortgageCalculatorError, ValueError):
    """Raised when loan terms violate a constraint (non-positive principal, etc.)."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason}", {"field": field, "value": value})
