# reporting/formatters/base_formatter.py
"""
Formateador base para reportes.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseFormatter(ABC):

    @abstractmethod
    def format(self, report: Any) -> str:
        """Convierte un reporte (objeto con to_dict() o dict) en texto."""
