"""
Input validation for Complexity Insight.

Checks file paths and inline source text before they reach a calculator,
and reads files into text.
"""

from pathlib import Path
from typing import Optional, Union

from .exceptions import ComplexityCalculationError, ValidationError

# Maximum file size in bytes (default 10MB)
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024

# Maximum inline source length in characters (default 1M)
DEFAULT_MAX_SOURCE_LENGTH = 1024 * 1024


def validate_file_path(
    file_path: Union[str, Path, None],
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    field_name: str = "file_path",
) -> Path:
    """
    Validate that a path names a readable, non-empty file within limits.

    Args:
        file_path: Path to validate
        max_file_size: Maximum file size in bytes
        field_name: Name reported in validation errors

    Returns:
        The path as a Path object

    Raises:
        ValidationError: If any check fails
    """
    if file_path is None or not str(file_path).strip():
        raise ValidationError(field_name, "file path cannot be empty")

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(field_name, f"file does not exist: {file_path}")
    if not path.is_file():
        raise ValidationError(field_name, f"path is not a regular file: {file_path}")

    try:
        size = path.stat().st_size
    except OSError as e:
        raise ValidationError(field_name, f"cannot stat file: {e}") from e

    if size > max_file_size:
        raise ValidationError(
            field_name,
            f"file size ({size} bytes) exceeds maximum allowed size ({max_file_size} bytes)",
        )
    if size == 0:
        raise ValidationError(field_name, f"file is empty: {file_path}")

    return path


def validate_source_code(
    source: Optional[str],
    max_length: int = DEFAULT_MAX_SOURCE_LENGTH,
    field_name: str = "source_code",
) -> str:
    """
    Validate inline source text.

    Raises:
        ValidationError: If source is missing, blank or too long
    """
    if source is None:
        raise ValidationError(field_name, "source code cannot be None")
    if not isinstance(source, str):
        raise ValidationError(field_name, f"expected text, got {type(source).__name__}")
    if not source.strip():
        raise ValidationError(field_name, "source code cannot be empty")
    if len(source) > max_length:
        raise ValidationError(
            field_name,
            f"source code length ({len(source)} characters) exceeds maximum allowed "
            f"({max_length} characters)",
        )
    return source


def read_source(path: Path) -> str:
    """Read a source file as UTF-8, replacing undecodable bytes."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ComplexityCalculationError(str(path), f"cannot read file: {e}") from e
