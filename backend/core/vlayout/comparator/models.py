# comparator/models.py
"""
Modelos de datos del comparator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

MAX_SAMPLE_TEXTS = 3
MAX_SAMPLE_LINE_NUMBERS = 5


@dataclass
class FieldCountDiscrepancy:
    """Registros de un bloque cuya cantidad de campos no coincide con el layout."""
    registro: str
    expected_fields: int
    occurrences: int = 0
    sample_line_numbers: List[int] = field(default_factory=list)
    sample_texts: List[str] = field(default_factory=list)

    def record(self, line_number: int, raw_text: str) -> None:
        self.occurrences += 1
        if len(self.sample_texts) < MAX_SAMPLE_TEXTS:
            self.sample_texts.append(raw_text)
        if len(self.sample_line_numbers) < MAX_SAMPLE_LINE_NUMBERS:
            self.sample_line_numbers.append(line_number)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "registro": self.registro,
            "expected_fields": self.expected_fields,
            "occurrences": self.occurrences,
            "sample_line_numbers": list(self.sample_line_numbers),
            "sample_texts": list(self.sample_texts)
        }


@dataclass
class FileValidationReport:
    """Reporte de validación de un archivo SPED."""
    block_occurrences: Dict[str, int] = field(default_factory=dict)
    missing_blocks: List[str] = field(default_factory=list)
    field_count_discrepancies: List[FieldCountDiscrepancy] = field(default_factory=list)
    error: Optional[Dict[str, Any]] = None  # error parcial (p. ej. decodificación)

    @property
    def total_unique_blocks(self) -> int:
        return len(self.block_occurrences)

    @property
    def has_missing_blocks(self) -> bool:
        return bool(self.missing_blocks)

    @property
    def has_discrepancies(self) -> bool:
        return bool(self.field_count_discrepancies)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para serialización."""
        result = {
            "total_unique_blocks": self.total_unique_blocks,
            "block_occurrences": dict(self.block_occurrences),
            "missing_blocks": list(self.missing_blocks),
            "field_count_discrepancies": [d.to_dict() for d in self.field_count_discrepancies]
        }
        if self.error:
            result["error"] = dict(self.error)
        return result
