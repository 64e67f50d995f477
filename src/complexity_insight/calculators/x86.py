"""Cyclomatic complexity for x86/x64 assembler (MASM/TASM style).

Units are ``name PROC`` ... ``name ENDP`` blocks, or bare labels seen
while no unit is open. Decision points:

- Conditional jumps (JE, JNE, JZ, JG, JL, JECXZ, ...)
- Loop instructions (LOOP, LOOPE, LOOPNE, ...)
- Conditional moves (CMOVE, CMOVNE, ...)
"""

from __future__ import annotations

import logging
import re

from ..languages import Language
from .base import IDLE, AssemblerCalculator, Open, Step, UnitState, accrue
from .rules import X86_RULES

logger = logging.getLogger(__name__)

PROC_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\s+PROC\b", re.IGNORECASE)
ENDP_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\s+ENDP\b", re.IGNORECASE)
LABEL_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*):")


class X86Calculator(AssemblerCalculator):
    """PROC/ENDP and label based boundary detection."""

    language = Language.X86
    rules = X86_RULES

    def step(self, state: UnitState, line: str) -> Step:
        open_unit = state if isinstance(state, Open) else None

        match = PROC_PATTERN.match(line)
        if match:
            # A new PROC implicitly closes whatever is open
            logger.debug(f"PROC {match.group(1)}")
            return Step(Open(match.group(1)), closed=open_unit)

        if ENDP_PATTERN.match(line):
            return Step(IDLE, closed=open_unit)

        if open_unit is None:
            match = LABEL_PATTERN.match(line)
            if match:
                logger.debug(f"Label {match.group(1)} opens a unit")
                return Step(Open(match.group(1)))
            return Step(state)

        return Step(accrue(open_unit, self.count_decision_points(line)))
