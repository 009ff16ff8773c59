# comparator/accumulator.py
"""
Acumulador de validación: compara registros contra el layout en una
sola pasada.
"""

import logging
from typing import Dict, Iterable, List

from ..layout.models import LayoutSchema
from ..sped_reader.models import SpedRecord
from .models import FieldCountDiscrepancy, FileValidationReport

logger = logging.getLogger(__name__)


class LayoutAccumulator:
    """
    Consume registros y mantiene las estadísticas del archivo.

    El espacio usado es proporcional a los registros distintos, no a
    las líneas: sólo se guardan contadores y muestras acotadas.
    """

    def __init__(self, schema: LayoutSchema):
        self.schema = schema
        self.block_occurrences: Dict[str, int] = {}
        self.missing_blocks: Dict[str, None] = {}  # set con orden de llegada
        self.discrepancies: Dict[str, FieldCountDiscrepancy] = {}
        self.records_seen = 0

    def consume(self, record: SpedRecord) -> None:
        registro = record.registro
        self.records_seen += 1
        self.block_occurrences[registro] = self.block_occurrences.get(registro, 0) + 1

        expected = self.schema.expected_field_count(registro)
        if expected is None:
            self.missing_blocks[registro] = None
            return

        if record.field_count != expected:
            discrepancy = self.discrepancies.get(registro)
            if discrepancy is None:
                discrepancy = FieldCountDiscrepancy(registro=registro, expected_fields=expected)
                self.discrepancies[registro] = discrepancy
            discrepancy.record(record.line_number, record.raw_text)

    def consume_all(self, records: Iterable[SpedRecord]) -> "LayoutAccumulator":
        for record in records:
            self.consume(record)
        return self

    def build_report(self) -> FileValidationReport:
        """Genera el reporte ordenado por el orden canónico del layout."""
        ordered_blocks: List[str] = self.schema.sort_registros(self.block_occurrences)
        ordered_discrepancies = self.schema.sort_registros(self.discrepancies)

        return FileValidationReport(
            block_occurrences={reg: self.block_occurrences[reg] for reg in ordered_blocks},
            missing_blocks=self.schema.sort_registros(self.missing_blocks),
            field_count_discrepancies=[self.discrepancies[reg] for reg in ordered_discrepancies]
        )


def validate_records(records: Iterable[SpedRecord], schema: LayoutSchema) -> FileValidationReport:
    """
    Valida una secuencia de registros contra el layout.

    Un error de decodificación a mitad del archivo no descarta lo ya
    acumulado: el reporte parcial se devuelve con el error adjunto.
    """
    accumulator = LayoutAccumulator(schema)
    try:
        accumulator.consume_all(records)
    except UnicodeDecodeError as e:
        logger.warning(f"Error de decodificación tras {accumulator.records_seen} registros: {e}")
        report = accumulator.build_report()
        report.error = {
            "code": "ENCODING_ERROR",
            "message": f"Error de decodificación: {e.reason}",
            "records_processed": accumulator.records_seen
        }
        return report

    return accumulator.build_report()
