"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from complexity_insight import __version__
from complexity_insight.cli import app

runner = CliRunner()

X86_SOURCE = "main PROC\n    je a\n    jg b\nmain ENDP\nhelper PROC\n    ret\nhelper ENDP\n"


@pytest.fixture
def asm_file(tmp_path):
    path = tmp_path / "prog.asm"
    path.write_text(X86_SOURCE)
    return path


class TestAnalyzeCommand:
    """complexity-insight analyze"""

    def test_json_output(self, asm_file):
        """JSON output parses and carries unit scores."""
        result = runner.invoke(app, ["analyze", str(asm_file), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["units"] == {"main": 3, "helper": 1}
        assert data["most_complex_unit"] == "main"

    def test_text_output(self, asm_file):
        """Text output is the ranked summary."""
        result = runner.invoke(app, ["analyze", str(asm_file), "-f", "text"])
        assert result.exit_code == 0
        assert "Total Functions: 2" in result.stdout
        assert "  main: 3" in result.stdout

    def test_rich_output(self, asm_file):
        """The default renderer names every unit."""
        result = runner.invoke(app, ["analyze", str(asm_file)])
        assert result.exit_code == 0
        assert "main" in result.stdout
        assert "helper" in result.stdout

    def test_threshold_flag(self, asm_file):
        """--threshold controls which units are flagged."""
        result = runner.invoke(app, ["analyze", str(asm_file), "-f", "json", "-t", "2"])
        assert json.loads(result.stdout)["over_threshold"] == ["main"]

    def test_language_override(self, tmp_path):
        """--language overrides the file extension."""
        path = tmp_path / "game.asm"
        path.write_text("sub:\n    BEQ x\n    RTS\n")
        result = runner.invoke(app, ["analyze", str(path), "-l", "6502", "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["language"] == "6502 Assembler"

    def test_missing_file(self, tmp_path):
        """A missing file exits with code 1 and an error message."""
        result = runner.invoke(app, ["analyze", str(tmp_path / "none.asm")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_partial_failure(self, asm_file, tmp_path):
        """Good files are still reported when another fails."""
        bad = tmp_path / "notes.txt"
        bad.write_text("hello")
        result = runner.invoke(app, ["analyze", str(asm_file), str(bad), "-f", "text"])
        assert result.exit_code == 1
        assert "Total Functions: 2" in result.output
        assert "Unsupported language" in result.output

    def test_invalid_format(self, asm_file):
        """Unknown formats are configuration errors."""
        result = runner.invoke(app, ["analyze", str(asm_file), "-f", "xml"])
        assert result.exit_code == 1

    def test_config_file(self, asm_file, tmp_path):
        """Settings from --config apply."""
        config = tmp_path / "ci.toml"
        config.write_text('output_format = "json"\nwarning_threshold = 1\n')
        result = runner.invoke(app, ["analyze", str(asm_file), "-c", str(config)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["over_threshold"] == ["main"]


class TestCodeCommand:
    """complexity-insight code"""

    def test_stdin(self):
        """Source piped through stdin is analyzed."""
        result = runner.invoke(app, ["code", "-l", "asm", "-f", "json"], input=X86_SOURCE)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["file_name"] == "inline_code"
        assert data["total_complexity"] == 4

    def test_name_selects_language(self):
        """--name is reported and drives language inference."""
        result = runner.invoke(
            app, ["code", "--name", "sub.s65", "-f", "text"], input=".proc f\nBEQ x\n.endproc\n"
        )
        assert result.exit_code == 0
        assert "File: sub.s65 (6502 Assembler)" in result.stdout

    def test_empty_input(self):
        """Empty stdin is rejected."""
        result = runner.invoke(app, ["code", "-l", "asm"], input="")
        assert result.exit_code == 1
        assert "cannot be empty" in result.output

    def test_no_language(self):
        """Without a language or a name the command fails."""
        result = runner.invoke(app, ["code"], input=X86_SOURCE)
        assert result.exit_code == 1
        assert "Unsupported language" in result.output


class TestMiscCommands:
    """languages and --version"""

    def test_languages(self):
        """Every language key is listed."""
        result = runner.invoke(app, ["languages"])
        assert result.exit_code == 0
        for key in ("java", "asm", "6502"):
            assert key in result.stdout

    def test_version(self):
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout
