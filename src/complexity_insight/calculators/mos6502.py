"""Cyclomatic complexity for MOS 6502 / 65C02 assembler.

Recognizes the boundary conventions of several assemblers:

- ca65: ``.proc name`` ... ``.endproc`` blocks
- DASM: ``SUBROUTINE`` directive after a label
- Generic: ``label:`` ... ``RTS``

A bare label is only a *candidate* until an RTS (or SUBROUTINE) confirms
it; a candidate that never reaches one is treated as a data label and
dropped. Decision points are the conditional branches (BEQ, BNE, BCC,
BCS, BPL, BMI, BVC, BVS) and the 65C02 bit branches (BBR0-7, BBS0-7).
"""

from __future__ import annotations

import logging
import re

from ..languages import Language
from .base import IDLE, AssemblerCalculator, Candidate, Open, Step, UnitState, accrue
from .rules import MOS6502_RULES

logger = logging.getLogger(__name__)

PROC_PATTERN = re.compile(r"^\.proc\s+([a-zA-Z_][a-zA-Z0-9_]*)", re.IGNORECASE)
ENDPROC_PATTERN = re.compile(r"^\.endproc\b", re.IGNORECASE)
SUBROUTINE_PATTERN = re.compile(r"^SUBROUTINE(?:\s|$)", re.IGNORECASE)
RTS_PATTERN = re.compile(r"^RTS\b", re.IGNORECASE)
LABEL_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*):")


class Mos6502Calculator(AssemblerCalculator):
    """Directive, label-candidate and RTS based boundary detection."""

    language = Language.MOS6502
    rules = MOS6502_RULES

    def step(self, state: UnitState, line: str) -> Step:
        open_unit = state if isinstance(state, Open) else None

        match = PROC_PATTERN.match(line)
        if match:
            if isinstance(state, Candidate):
                logger.debug(f"Dropping label candidate '{state.name}' for .proc")
            return Step(Open(match.group(1)), closed=open_unit)

        if ENDPROC_PATTERN.match(line):
            if open_unit is None:
                # a pending label candidate survives a stray .endproc
                return Step(state)
            return Step(IDLE, closed=open_unit)

        if SUBROUTINE_PATTERN.match(line):
            if isinstance(state, Candidate):
                return Step(Open(state.name, state.score))
            return Step(state)

        if RTS_PATTERN.match(line):
            if isinstance(state, Candidate):
                return Step(IDLE, closed=Open(state.name, state.score))
            if open_unit is not None:
                return Step(IDLE, closed=open_unit)
            return Step(state)

        match = LABEL_PATTERN.match(line)
        if match and open_unit is None:
            if isinstance(state, Candidate):
                logger.debug(f"Label '{state.name}' never reached RTS; treating as data")
            return Step(Candidate(match.group(1)))

        # Local labels inside a unit fall through here and score nothing
        return Step(accrue(state, self.count_decision_points(line)))
