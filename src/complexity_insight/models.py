"""Result model: per-unit complexities plus file-level summary statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

# Units scoring strictly above this get a warning marker in summaries
WARNING_THRESHOLD = 10

WARNING_MARKER = " ⚠️"

NO_UNIT = "N/A"


@dataclass(frozen=True)
class ComplexityResult:
    """Cyclomatic complexity of every unit found in one source file.

    ``total_complexity``, ``max_complexity`` and ``most_complex_unit`` are
    computed once at construction. When several units share the maximum
    score, the first-inserted one wins.

    Attributes:
        file_name: Identifier used for reporting (path or display name)
        language: Display name of the analyzed language
        unit_complexities: Read-only mapping of unit name -> complexity
    """

    file_name: str
    language: str
    unit_complexities: Mapping[str, int]
    total_complexity: int = field(init=False)
    max_complexity: int = field(init=False)
    most_complex_unit: str = field(init=False)

    def __post_init__(self) -> None:
        units = MappingProxyType(dict(self.unit_complexities))
        object.__setattr__(self, "unit_complexities", units)
        object.__setattr__(self, "total_complexity", sum(units.values()))

        best_name, best_score = NO_UNIT, 0
        if units:
            # max() keeps the first of equal keys
            best_name, best_score = max(units.items(), key=lambda item: item[1])
        object.__setattr__(self, "max_complexity", best_score)
        object.__setattr__(self, "most_complex_unit", best_name)

    @property
    def unit_count(self) -> int:
        return len(self.unit_complexities)

    def ranked_units(self) -> List[Tuple[str, int]]:
        """Units sorted by complexity, highest first (ties keep insertion order)."""
        return sorted(self.unit_complexities.items(), key=lambda item: item[1], reverse=True)

    def units_over(self, threshold: int = WARNING_THRESHOLD) -> List[str]:
        return [name for name, score in self.ranked_units() if score > threshold]

    def summary(self, threshold: int = WARNING_THRESHOLD) -> str:
        """Human-readable ranked report of every unit."""
        lines = [
            f"File: {self.file_name} ({self.language})",
            f"Total Functions: {self.unit_count}",
            f"Total Complexity: {self.total_complexity}",
            f"Max Complexity: {self.max_complexity} in {self.most_complex_unit}",
            "",
            "Function Complexities:",
        ]
        for name, score in self.ranked_units():
            marker = WARNING_MARKER if score > threshold else ""
            lines.append(f"  {name}: {score}{marker}")
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "language": self.language,
            "unit_count": self.unit_count,
            "total_complexity": self.total_complexity,
            "max_complexity": self.max_complexity,
            "most_complex_unit": self.most_complex_unit,
            "units": dict(self.unit_complexities),
        }
