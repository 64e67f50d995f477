"""Configuration loading and management for Complexity Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.complexity-insight.toml)
    3. Project config (./complexity-insight.toml)
    4. Explicit config file
    5. Environment variables (COMPLEXITY_INSIGHT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, warning_threshold=15)
    >>> config.verbosity
    'verbose'
    >>> config.warning_threshold
    15
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError
from .models import WARNING_THRESHOLD

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["rich", "json", "text"]

ENV_PREFIX = "COMPLEXITY_INSIGHT_"
CONFIG_FILE_NAME = "complexity-insight.toml"

_VERBOSITIES = ("quiet", "normal", "verbose")
_OUTPUT_FORMATS = ("rich", "json", "text")


@dataclass(frozen=True)
class AnalysisConfig:
    """Limits, thresholds and output settings shared by the API and CLI.

    Attributes:
        warning_threshold: Units scoring above this are flagged in output
        max_file_size_mb: Largest file accepted for analysis (MB)
        max_source_length: Largest inline source accepted (characters)
        default_file_name: Report name for inline code without a name
        verbosity: Logging verbosity level
        output_format: Renderer used by the CLI
    """

    warning_threshold: int = WARNING_THRESHOLD
    max_file_size_mb: float = 10.0
    max_source_length: int = 1024 * 1024
    default_file_name: str = "inline_code"
    verbosity: Verbosity = "normal"
    output_format: OutputFormat = "rich"

    def __post_init__(self) -> None:
        if self.warning_threshold < 1:
            raise ValueError("warning_threshold must be at least 1")
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.max_source_length < 1:
            raise ValueError("max_source_length must be at least 1")
        if not self.default_file_name.strip():
            raise ValueError("default_file_name must not be empty")
        if self.verbosity not in _VERBOSITIES:
            raise ValueError(f"verbosity must be one of {', '.join(_VERBOSITIES)}")
        if self.output_format not in _OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(_OUTPUT_FORMATS)}")

    @property
    def max_file_size_bytes(self) -> int:
        return int(self.max_file_size_mb * 1024 * 1024)


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Build an AnalysisConfig from TOML files, environment and overrides.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file, environment variable or
            value is invalid
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # --verbose / --quiet arrive as booleans
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COMPLEXITY_INSIGHT_* environment variables.

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(AnalysisConfig)
    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}") from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    if type_hint is int:
        return int(value)
    if type_hint is float:
        return float(value)
    # str and Literal aliases
    return value.strip()


def _load_toml_file(path: Path) -> dict:
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e

    # Allow either top-level keys or a [complexity-insight] table
    return data.get("complexity-insight", data)
