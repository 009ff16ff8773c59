# reporting/models.py

"""
Modelos de datos para reporting.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Union

from ..comparator.models import FileValidationReport
from ..exceptions import PerFileValidationError

FileOutcome = Union[FileValidationReport, PerFileValidationError]


def outcome_to_dict(outcome: FileOutcome, error_key: str = "erro") -> Dict[str, Any]:
    """Serializa el resultado de un archivo: reporte o error aislado."""
    if isinstance(outcome, PerFileValidationError):
        return {error_key: outcome.message}
    return outcome.to_dict()


@dataclass
class AggregateReport:
    """Resumen de todos los archivos de un lote."""
    total_files: int = 0
    files_with_missing_blocks: int = 0
    files_with_discrepancies: int = 0
    files_with_errors: int = 0
    unique_missing_blocks: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_files": self.total_files,
            "files_with_missing_blocks": self.files_with_missing_blocks,
            "files_with_discrepancies": self.files_with_discrepancies,
            "files_with_errors": self.files_with_errors,
            "unique_missing_blocks": list(self.unique_missing_blocks)
        }


@dataclass
class BatchReport:
    """Reporte de un lote: agregado más el detalle por archivo."""
    aggregate: AggregateReport
    per_file: Dict[str, FileOutcome] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "aggregate": self.aggregate.to_dict(),
            "per_file": {
                name: outcome_to_dict(outcome)
                for name, outcome in self.per_file.items()
            }
        }


@dataclass
class BacklogReport:
    """Reporte del comando de línea de comandos sobre un directorio."""
    files: Dict[str, FileOutcome] = field(default_factory=dict)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat(),
            "files": {
                name: outcome_to_dict(outcome, error_key="error")
                for name, outcome in self.files.items()
            }
        }
