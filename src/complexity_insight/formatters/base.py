"""Base formatter interface for Complexity Insight output rendering."""

from abc import ABC, abstractmethod

from ..models import WARNING_THRESHOLD, ComplexityResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, threshold: int = WARNING_THRESHOLD):
        self.threshold = threshold

    def render(self, result: ComplexityResult) -> None:
        """Print the formatted result to stdout."""
        print(self.format(result))

    @abstractmethod
    def format(self, result: ComplexityResult) -> str:
        """Return formatted string representation of a result."""
