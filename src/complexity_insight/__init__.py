"""
Complexity Insight - McCabe cyclomatic complexity per function.

Scores every method of a Java source file and every procedure or
subroutine of x86 and MOS 6502 assembler source, using the simplified
formula M = decision points + 1.
"""

__version__ = "0.3.0"

from .api import analyze_file, analyze_source
from .calculators import CalculatorRegistry, create_calculator
from .languages import Language
from .models import WARNING_THRESHOLD, ComplexityResult

__all__ = [
    "analyze_source",  # Main entry points
    "analyze_file",
    "CalculatorRegistry",
    "create_calculator",
    "ComplexityResult",
    "Language",
    "WARNING_THRESHOLD",
]
