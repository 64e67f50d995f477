"""Complexity calculators, one per supported language."""

from .base import (
    GLOBAL_UNIT,
    AssemblerCalculator,
    Candidate,
    ComplexityCalculator,
    Idle,
    Open,
    Step,
    preprocess_line,
)
from .java import JavaCalculator
from .mos6502 import Mos6502Calculator
from .registry import CalculatorRegistry, create_calculator
from .x86 import X86Calculator

__all__ = [
    "GLOBAL_UNIT",
    "AssemblerCalculator",
    "Candidate",
    "ComplexityCalculator",
    "Idle",
    "Open",
    "Step",
    "preprocess_line",
    "JavaCalculator",
    "Mos6502Calculator",
    "X86Calculator",
    "CalculatorRegistry",
    "create_calculator",
]
