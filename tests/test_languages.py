"""Tests for the Language enum."""

import pytest

from complexity_insight.languages import Language


class TestLanguage:
    """Keys, display names and extension lookup."""

    def test_members(self):
        """Three languages, declared in a fixed order."""
        assert [lang.key for lang in Language] == ["java", "asm", "6502"]
        assert Language.all_keys() == ["java", "asm", "6502"]

    def test_display_names(self):
        """Display names appear in reports."""
        assert Language.JAVA.display_name == "Java"
        assert Language.X86.display_name == "Assembler"
        assert Language.MOS6502.display_name == "6502 Assembler"
        assert str(Language.MOS6502) == "6502 Assembler"

    @pytest.mark.parametrize("key", ["java", "Java", " JAVA "])
    def test_from_key(self, key):
        """Key lookup ignores case and whitespace."""
        assert Language.from_key(key) is Language.JAVA

    @pytest.mark.parametrize("key", [None, "", "python", "x86"])
    def test_from_key_unknown(self, key):
        """Unknown keys return None."""
        assert Language.from_key(key) is None

    def test_from_path(self):
        """Extensions are matched case-insensitively."""
        assert Language.from_path("A.JAVA") is Language.JAVA
        assert Language.from_path("/src/boot.S") is Language.X86
        assert Language.from_path("game.Asm65") is Language.MOS6502
        assert Language.from_path("notes.txt") is None

    def test_asm65_is_not_x86(self):
        """A longer 6502 suffix is not mistaken for .asm."""
        assert Language.from_path("main.asm65") is Language.MOS6502
        assert Language.from_path("main.s65") is Language.MOS6502

    def test_matches_path(self):
        """Each language knows its own extensions."""
        assert Language.X86.matches_path("x.asm")
        assert not Language.X86.matches_path("x.java")
