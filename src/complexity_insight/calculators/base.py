"""Calculator interface and the shared line-oriented assembler engine."""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Union

from ..exceptions import ComplexityCalculationError
from ..languages import Language
from ..models import ComplexityResult
from .rules import count_decision_points

logger = logging.getLogger(__name__)

GLOBAL_UNIT = "_global_"

COMMENT_MARKER = ";"


class ComplexityCalculator(ABC):
    """Computes per-unit cyclomatic complexity for one language.

    Implementations hold no per-call mutable state, so one instance can
    be reused and shared across threads.
    """

    language: Language

    @abstractmethod
    def calculate(self, source: str, file_name: str) -> ComplexityResult:
        """Analyze ``source`` and report it under ``file_name``."""


# ── Boundary state ─────────────────────────────────────────────────


@dataclass(frozen=True)
class Idle:
    """No unit is open and no label is pending."""


@dataclass(frozen=True)
class Candidate:
    """A bare label that may turn out to be a subroutine."""

    name: str
    score: int = 1


@dataclass(frozen=True)
class Open:
    """A confirmed unit accruing decision points."""

    name: str
    score: int = 1


UnitState = Union[Idle, Candidate, Open]

IDLE = Idle()


@dataclass(frozen=True)
class Step:
    """Outcome of feeding one line to a boundary state machine.

    ``closed`` is the unit finalized by that line, if any.
    """

    state: UnitState
    closed: Optional[Open] = None


def accrue(state: UnitState, points: int) -> UnitState:
    if points and isinstance(state, (Open, Candidate)):
        return replace(state, score=state.score + points)
    return state


def preprocess_line(line: str) -> Optional[str]:
    """Strip whitespace and ``;`` comments; ``None`` means skip the line."""
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(COMMENT_MARKER):
        return None
    comment_pos = trimmed.find(COMMENT_MARKER)
    if comment_pos >= 0:
        trimmed = trimmed[:comment_pos].strip()
    return trimmed


class AssemblerCalculator(ComplexityCalculator):
    """Line-oriented calculator driven by a boundary state machine.

    Subclasses provide the decision-point ``rules`` and a pure ``step``
    transition; this class streams the source, collects closed units and
    applies the whole-file fallback when no unit is found.
    """

    rules: Mapping[str, FrozenSet[str]]

    @abstractmethod
    def step(self, state: UnitState, line: str) -> Step:
        """Apply one preprocessed line to ``state``."""

    def count_decision_points(self, instruction: str) -> int:
        return count_decision_points(instruction, self.rules)

    def calculate(self, source: str, file_name: str) -> ComplexityResult:
        try:
            units = self.scan_units(source)
            if not units:
                units[GLOBAL_UNIT] = self.global_complexity(source)
                logger.debug(
                    f"No units in {file_name}; using whole-file score {units[GLOBAL_UNIT]}"
                )
        except (OSError, UnicodeError, ValueError) as e:
            raise ComplexityCalculationError(file_name, str(e)) from e

        return ComplexityResult(file_name, self.language.display_name, units)

    def scan_units(self, source: str) -> Dict[str, int]:
        """Run the state machine over ``source`` and return closed units."""
        units: Dict[str, int] = {}
        state: UnitState = IDLE
        for line in self._lines(source):
            result = self.step(state, line)
            if result.closed is not None:
                self._save(units, result.closed)
            state = result.state

        # Only a confirmed unit survives end of input
        if isinstance(state, Open):
            self._save(units, state)
        elif isinstance(state, Candidate):
            logger.debug(f"Discarding unterminated label '{state.name}' at end of input")
        return units

    def global_complexity(self, source: str) -> int:
        return 1 + sum(self.count_decision_points(line) for line in self._lines(source))

    @staticmethod
    def _save(units: Dict[str, int], unit: Open) -> None:
        if unit.name in units:
            logger.debug(f"Unit '{unit.name}' redefined; keeping the later score")
        units[unit.name] = unit.score

    @staticmethod
    def _lines(source: str) -> Iterator[str]:
        for raw in io.StringIO(source, newline=None):
            line = preprocess_line(raw)
            if line is not None:
                yield line
