"""Analysis-related exceptions: language dispatch, parsing, calculation."""

from typing import List

from .base import ComplexityInsightError


class AnalysisError(ComplexityInsightError):
    """Base class for analysis-related errors."""
    pass


class UnsupportedLanguageError(AnalysisError):
    """Raised when no calculator is registered for a language or extension."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: '{language}'",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = list(supported_languages)


class ParsingError(AnalysisError):
    """Raised when source text cannot be turned into a syntax tree."""

    def __init__(self, language: str, file_name: str, reason: str):
        super().__init__(
            f"Failed to parse {language} code in '{file_name}'",
            details={"file": file_name, "language": language, "reason": reason},
        )
        self.language = language
        self.file_name = file_name
        self.reason = reason


class ComplexityCalculationError(AnalysisError):
    """Raised when analysis fails for any reason other than parsing."""

    def __init__(self, file_name: str, reason: str):
        super().__init__(
            f"Failed to calculate complexity for '{file_name}'",
            details={"file": file_name, "reason": reason},
        )
        self.file_name = file_name
        self.reason = reason
