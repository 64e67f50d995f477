"""Public API for Complexity Insight.

Example:
    >>> from complexity_insight import analyze_source
    >>> result = analyze_source("P PROC\\n  je done\\nP ENDP", language="asm")
    >>> result.unit_complexities["P"]
    2
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .calculators import CalculatorRegistry
from .config import DEFAULT_CONFIG, AnalysisConfig
from .logging_config import get_logger
from .models import ComplexityResult
from .security import read_source, validate_file_path, validate_source_code

logger = get_logger(__name__)

_DEFAULT_REGISTRY = CalculatorRegistry()


def analyze_source(
    source: str,
    language: Optional[str] = None,
    file_name: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
    registry: Optional[CalculatorRegistry] = None,
) -> ComplexityResult:
    """Compute per-unit cyclomatic complexity of inline source text.

    Args:
        source: Source text to analyze
        language: Language key ("java", "asm", "6502"); inferred from
            ``file_name`` when omitted
        file_name: Name used in the report (default from config)
        config: Analysis configuration (defaults apply when omitted)
        registry: Calculator registry (module default when omitted)

    Returns:
        ComplexityResult for the source

    Raises:
        ValidationError: If the source is empty or too long
        UnsupportedLanguageError: If no language can be determined
        ParsingError: If structured source cannot be parsed
        ComplexityCalculationError: If analysis fails otherwise
    """
    config = config or DEFAULT_CONFIG
    registry = registry or _DEFAULT_REGISTRY

    validate_source_code(source, max_length=config.max_source_length)
    name = file_name.strip() if file_name and file_name.strip() else None

    lang = registry.resolve_language(language, name)
    calculator = registry.get_calculator(lang)

    report_name = name or config.default_file_name
    logger.info(f"Analyzing {report_name} as {lang.display_name}")
    return calculator.calculate(source, report_name)


def analyze_file(
    path: Union[str, Path],
    language: Optional[str] = None,
    config: Optional[AnalysisConfig] = None,
    registry: Optional[CalculatorRegistry] = None,
) -> ComplexityResult:
    """Validate, read and analyze a source file.

    The language comes from ``language`` when given, otherwise from the
    file extension. Raises the same errors as ``analyze_source``.
    """
    config = config or DEFAULT_CONFIG
    registry = registry or _DEFAULT_REGISTRY

    file_path = validate_file_path(path, max_file_size=config.max_file_size_bytes)
    lang = registry.resolve_language(language, str(file_path))
    source = read_source(file_path)

    logger.info(f"Analyzing {file_path} as {lang.display_name}")
    return registry.get_calculator(lang).calculate(source, str(path))
