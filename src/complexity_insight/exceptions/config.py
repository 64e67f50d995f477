"""Configuration and input validation exceptions."""

from .base import ComplexityInsightError


class ConfigurationError(ComplexityInsightError):
    """Raised when configuration files, variables or values are invalid."""

    pass


class ValidationError(ComplexityInsightError):
    """Raised when caller-supplied input fails validation."""

    def __init__(self, field_name: str, reason: str):
        super().__init__(
            f"Invalid {field_name}: {reason}",
            details={"field": field_name},
        )
        self.field_name = field_name
        self.reason = reason
