"""JSON formatter for Complexity Insight."""

import json

from ..models import ComplexityResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render a result as JSON."""

    def format(self, result: ComplexityResult) -> str:
        data = result.to_dict()
        data["over_threshold"] = result.units_over(self.threshold)
        return json.dumps(data, indent=2)
