"""Tests for configuration loading."""

import pytest

from complexity_insight.config import DEFAULT_CONFIG, AnalysisConfig, load_config
from complexity_insight.exceptions import ConfigurationError


class TestAnalysisConfig:
    """Defaults and validation."""

    def test_defaults(self):
        """Defaults match the documented limits."""
        config = AnalysisConfig()
        assert config.warning_threshold == 10
        assert config.max_file_size_mb == 10.0
        assert config.max_file_size_bytes == 10 * 1024 * 1024
        assert config.max_source_length == 1024 * 1024
        assert config.default_file_name == "inline_code"
        assert config.verbosity == "normal"
        assert config.output_format == "rich"
        assert config == DEFAULT_CONFIG

    @pytest.mark.parametrize("kwargs", [
        {"warning_threshold": 0},
        {"max_file_size_mb": 0},
        {"max_source_length": 0},
        {"default_file_name": "  "},
        {"verbosity": "loud"},
        {"output_format": "xml"},
    ])
    def test_invalid_values(self, kwargs):
        """Out-of-range values are rejected."""
        with pytest.raises(ValueError):
            AnalysisConfig(**kwargs)


class TestLoadConfig:
    """Merging files, environment and overrides."""

    def test_no_sources(self):
        """With nothing configured, defaults apply."""
        assert load_config() == DEFAULT_CONFIG

    def test_overrides(self):
        """Keyword overrides win; None values are ignored."""
        config = load_config(warning_threshold=15, output_format=None)
        assert config.warning_threshold == 15
        assert config.output_format == "rich"

    def test_verbose_and_quiet_flags(self):
        """Boolean flags map to verbosity; quiet wins."""
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=True, quiet=True).verbosity == "quiet"

    def test_project_file(self, tmp_path):
        """A project config in the working directory is picked up."""
        (tmp_path / "complexity-insight.toml").write_text("warning_threshold = 20\n")
        assert load_config().warning_threshold == 20

    def test_global_file(self, tmp_path):
        """The user config in the home directory is picked up."""
        (tmp_path / "home" / ".complexity-insight.toml").write_text('output_format = "json"\n')
        assert load_config().output_format == "json"

    def test_project_overrides_global(self, tmp_path):
        """Project settings beat user settings."""
        (tmp_path / "home" / ".complexity-insight.toml").write_text("warning_threshold = 5\n")
        (tmp_path / "complexity-insight.toml").write_text("warning_threshold = 7\n")
        assert load_config().warning_threshold == 7

    def test_table_form(self, tmp_path):
        """Settings may live under a [complexity-insight] table."""
        path = tmp_path / "custom.toml"
        path.write_text('[complexity-insight]\ndefault_file_name = "snippet"\n')
        assert load_config(config_file=path).default_file_name == "snippet"

    def test_env_overrides_files(self, tmp_path, monkeypatch):
        """Environment variables beat config files."""
        (tmp_path / "complexity-insight.toml").write_text("warning_threshold = 7\n")
        monkeypatch.setenv("COMPLEXITY_INSIGHT_WARNING_THRESHOLD", "12")
        monkeypatch.setenv("COMPLEXITY_INSIGHT_MAX_FILE_SIZE_MB", "2.5")
        config = load_config()
        assert config.warning_threshold == 12
        assert config.max_file_size_mb == 2.5

    def test_overrides_beat_env(self, monkeypatch):
        """CLI overrides are applied last."""
        monkeypatch.setenv("COMPLEXITY_INSIGHT_OUTPUT_FORMAT", "json")
        assert load_config(output_format="text").output_format == "text"

    def test_missing_explicit_file(self, tmp_path):
        """An explicit config file must exist."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "missing.toml")

    def test_malformed_toml(self, tmp_path):
        """Unparseable TOML is a configuration error."""
        path = tmp_path / "bad.toml"
        path.write_text("warning_threshold = = 3\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_bad_env_value(self, monkeypatch):
        """Non-numeric values for numeric settings are rejected."""
        monkeypatch.setenv("COMPLEXITY_INSIGHT_WARNING_THRESHOLD", "lots")
        with pytest.raises(ConfigurationError, match="COMPLEXITY_INSIGHT_WARNING_THRESHOLD"):
            load_config()

    def test_unknown_key(self, tmp_path):
        """Unknown settings are rejected."""
        path = tmp_path / "extra.toml"
        path.write_text("colour = true\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_invalid_value(self):
        """Validation failures surface as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            load_config(warning_threshold=0)
