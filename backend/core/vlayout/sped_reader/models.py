# sped_reader/models.py
"""
Modelos de datos internos del sped_reader.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SpedRecord:
    """Una línea |REGISTRO|campo1|campo2|...| ya normalizada."""
    registro: str
    fields: Tuple[str, ...]
    line_number: int  # 1-based, contando todas las líneas del archivo
    raw_text: str     # línea sin espacios en los extremos

    @property
    def field_count(self) -> int:
        return len(self.fields)
