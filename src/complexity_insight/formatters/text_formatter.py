"""Plain-text formatter: the ranked summary report."""

from ..models import ComplexityResult
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Render the result's ranked summary."""

    def render(self, result: ComplexityResult) -> None:
        print(self.format(result), end="")

    def format(self, result: ComplexityResult) -> str:
        return result.summary(self.threshold)
