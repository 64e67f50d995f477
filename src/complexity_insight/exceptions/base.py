"""Root of the Complexity Insight error taxonomy."""

from typing import Dict, Optional


class ComplexityInsightError(Exception):
    """Anything the library raises on purpose: unsupported languages,
    unparseable source, failed calculations, bad config or bad input.

    ``details`` holds the file, language or field involved; the CLI prints
    them after the message.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
