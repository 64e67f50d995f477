"""Shared test fixtures for Complexity Insight."""

import os

import pytest

from complexity_insight.calculators import (
    CalculatorRegistry,
    Mos6502Calculator,
    X86Calculator,
)


@pytest.fixture
def x86():
    """Fresh x86 assembler calculator."""
    return X86Calculator()


@pytest.fixture
def mos6502():
    """Fresh 6502 assembler calculator."""
    return Mos6502Calculator()


@pytest.fixture
def registry():
    """Registry with an empty calculator cache."""
    return CalculatorRegistry()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep user/project config files and env vars out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("COMPLEXITY_INSIGHT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def x86_source():
    """Two procedures scoring 3 each (main first)."""
    return (
        "; sample\n"
        "main PROC\n"
        "    cmp eax, 0\n"
        "    je done        ; jump if zero\n"
        "    jg positive\n"
        "    ret\n"
        "main ENDP\n"
        "\n"
        "helper PROC\n"
        "    mov ecx, 10\n"
        "again:\n"
        "    loop again\n"
        "    cmovne eax, ebx\n"
        "    ret\n"
        "helper ENDP\n"
    )
