"""Decision-point rule tables.

Each table maps an instruction mnemonic category to the set of opcodes
that add one point of cyclomatic complexity. Categories within a dialect
are disjoint, so an opcode scores at most once.
"""

from __future__ import annotations

from typing import Mapping, FrozenSet

# ── x86 / x64 ──────────────────────────────────────────────────────

X86_CONDITIONAL_JUMPS: FrozenSet[str] = frozenset({
    "JE", "JZ", "JNE", "JNZ", "JG", "JNLE", "JGE", "JNL",
    "JL", "JNGE", "JLE", "JNG", "JA", "JNBE", "JAE", "JNB",
    "JB", "JNAE", "JBE", "JNA", "JP", "JPE", "JNP", "JPO",
    "JC", "JNC", "JO", "JNO", "JS", "JNS",
    # jump if CX/ECX/RCX is zero
    "JECXZ", "JCXZ", "JRCXZ",
})

X86_LOOPS: FrozenSet[str] = frozenset({
    "LOOP", "LOOPE", "LOOPZ", "LOOPNE", "LOOPNZ",
})

X86_CONDITIONAL_MOVES: FrozenSet[str] = frozenset({
    "CMOVE", "CMOVZ", "CMOVNE", "CMOVNZ", "CMOVG", "CMOVGE",
    "CMOVL", "CMOVLE", "CMOVA", "CMOVAE", "CMOVB", "CMOVBE",
    "CMOVP", "CMOVNP", "CMOVO", "CMOVNO", "CMOVS", "CMOVNS",
})

X86_RULES: Mapping[str, FrozenSet[str]] = {
    "conditional_jump": X86_CONDITIONAL_JUMPS,
    "loop": X86_LOOPS,
    "conditional_move": X86_CONDITIONAL_MOVES,
}

# ── MOS 6502 / 65C02 ───────────────────────────────────────────────

MOS6502_CONDITIONAL_BRANCHES: FrozenSet[str] = frozenset({
    "BEQ", "BNE",  # equal / not equal
    "BCC", "BCS",  # carry clear / set
    "BPL", "BMI",  # plus / minus
    "BVC", "BVS",  # overflow clear / set
})

# 65C02 bit-test branches
MOS6502_BIT_BRANCHES: FrozenSet[str] = frozenset(
    [f"BBR{bit}" for bit in range(8)] + [f"BBS{bit}" for bit in range(8)]
)

MOS6502_RULES: Mapping[str, FrozenSet[str]] = {
    "conditional_branch": MOS6502_CONDITIONAL_BRANCHES,
    "bit_branch": MOS6502_BIT_BRANCHES,
}

# ── Java syntax-tree node types ────────────────────────────────────

JAVA_DECISION_NODES: FrozenSet[str] = frozenset({
    "if_statement",
    "for_statement",
    "enhanced_for_statement",
    "while_statement",
    "do_statement",
    "switch_label",
    "catch_clause",
    "ternary_expression",
})

# binary_expression only counts for these operators
JAVA_LOGICAL_OPERATORS: FrozenSet[str] = frozenset({"&&", "||"})

JAVA_UNIT_NODES: FrozenSet[str] = frozenset({
    "method_declaration",
    "constructor_declaration",
    # record R(int a) { R { ... } } has no parameter list
    "compact_constructor_declaration",
})


def opcode_of(instruction: str) -> str:
    """First whitespace-separated token of a preprocessed line, upper-cased."""
    parts = instruction.split(None, 1)
    return parts[0].upper() if parts else ""


def count_decision_points(instruction: str, rules: Mapping[str, FrozenSet[str]]) -> int:
    opcode = opcode_of(instruction)
    if not opcode:
        return 0
    return sum(1 for opcodes in rules.values() if opcode in opcodes)
