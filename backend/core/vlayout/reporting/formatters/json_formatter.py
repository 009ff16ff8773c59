# reporting/formatters/json_formatter.py
"""
Formateador JSON para reportes.
"""

import json
from typing import Any

from .base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """Formatea reportes a JSON indentado, UTF-8 sin escapar acentos."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, report: Any) -> str:
        report_dict = report.to_dict() if hasattr(report, "to_dict") else report
        return json.dumps(report_dict, indent=self.indent, ensure_ascii=False)
