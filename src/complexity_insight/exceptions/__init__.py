"""Exception hierarchy for Complexity Insight."""

from .analysis import (
    AnalysisError,
    ComplexityCalculationError,
    ParsingError,
    UnsupportedLanguageError,
)
from .base import ComplexityInsightError
from .config import ConfigurationError, ValidationError

__all__ = [
    "ComplexityInsightError",
    "AnalysisError",
    "ComplexityCalculationError",
    "ParsingError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "ValidationError",
]
