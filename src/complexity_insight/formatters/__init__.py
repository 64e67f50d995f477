"""Output formatters for Complexity Insight."""

from ..models import WARNING_THRESHOLD
from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter
from .text_formatter import TextFormatter


def get_formatter(name: str, threshold: int = WARNING_THRESHOLD) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json", "text"
        threshold: Complexity above which units are flagged

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
        "text": TextFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls(threshold=threshold)


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "RichFormatter",
    "TextFormatter",
    "get_formatter",
]
