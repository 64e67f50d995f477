"""Supported languages: the single source of truth for keys and extensions.

Adding a language means adding a member here and a branch in
``calculators.registry.create_calculator``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple


class Language(Enum):
    """Languages with a registered complexity calculator.

    Each member carries ``(key, display_name, extensions)``. Declaration
    order matters: extension inference returns the first match.
    """

    JAVA = ("java", "Java", (".java",))
    X86 = ("asm", "Assembler", (".asm", ".s"))
    MOS6502 = ("6502", "6502 Assembler", (".a65", ".s65", ".asm65", ".a"))

    def __init__(self, key: str, display_name: str, extensions: Tuple[str, ...]):
        self.key = key
        self.display_name = display_name
        self.extensions = extensions

    def matches_path(self, path: str) -> bool:
        lower = str(path).lower()
        return any(lower.endswith(ext) for ext in self.extensions)

    @classmethod
    def from_key(cls, key: Optional[str]) -> Optional[Language]:
        """Look up a language by key, ignoring case and surrounding whitespace."""
        if key is None:
            return None
        wanted = key.strip().lower()
        for language in cls:
            if language.key == wanted:
                return language
        return None

    @classmethod
    def from_path(cls, path: str) -> Optional[Language]:
        """Infer the language from a file name or path."""
        for language in cls:
            if language.matches_path(path):
                return language
        return None

    @classmethod
    def all_keys(cls) -> list[str]:
        return [language.key for language in cls]

    def __str__(self) -> str:
        return self.display_name
