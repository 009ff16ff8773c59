# reporting/aggregator.py

"""
Agregador de resultados por archivo.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from ..comparator.accumulator import validate_records
from ..exceptions import LayoutValidationError, PerFileValidationError, os_error_reason
from ..layout.models import LayoutSchema
from ..sped_reader.encoding import SOURCE_ENCODING
from ..sped_reader.reader import RecordReader
from .models import AggregateReport, BatchReport, FileOutcome

logger = logging.getLogger(__name__)


class BatchAggregator:
    """Valida varios archivos y agrega sus reportes."""

    def __init__(self, schema: LayoutSchema, max_workers: int = 1, encoding: str = SOURCE_ENCODING):
        self.schema = schema
        self.max_workers = max(1, max_workers)
        self.encoding = encoding

    def validate_path(self, file_path: Path, name: Optional[str] = None) -> FileOutcome:
        """
        Valida un archivo. Los errores quedan en el resultado de ese
        archivo y no interrumpen el lote.

        Args:
            file_path: Archivo a validar
            name: Nombre mostrado en el mensaje de error (clave del reporte)
        """
        name = name or Path(file_path).name
        try:
            return validate_records(RecordReader.read_file(file_path, encoding=self.encoding), self.schema)
        except OSError as e:
            logger.warning(f"Error validando {file_path}: {e}")
            return PerFileValidationError(f"{os_error_reason(e)}: {name}", path=name)
        except LayoutValidationError as e:
            logger.warning(f"Error validando {file_path}: {e}")
            return PerFileValidationError(str(e), path=name)

    def run(
        self,
        files: Iterable[Path],
        key_for: Callable[[Path], str]
    ) -> Dict[str, FileOutcome]:
        """Valida cada archivo y devuelve el mapa clave -> resultado en orden de entrada."""
        ordered: List[Path] = list(files)
        keys = [key_for(path) for path in ordered]

        if self.max_workers == 1 or len(ordered) <= 1:
            outcomes = [self.validate_path(path, key) for path, key in zip(ordered, keys)]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outcomes = list(executor.map(self.validate_path, ordered, keys))

        return dict(zip(keys, outcomes))

    def aggregate(
        self,
        files: Iterable[Path],
        root: Optional[Union[str, Path]] = None
    ) -> BatchReport:
        """
        Valida los archivos y construye el reporte agregado.

        Args:
            files: Archivos a validar
            root: Raíz de extracción; las claves del mapa son relativas a ella

        Returns:
            BatchReport con el agregado y el detalle por archivo
        """
        root_path = Path(root) if root is not None else None

        def key_for(path: Path) -> str:
            if root_path is None:
                return str(path)
            return Path(path).relative_to(root_path).as_posix()

        per_file = self.run(files, key_for)
        return BatchReport(aggregate=self.fold(per_file.values()), per_file=per_file)

    def fold(self, outcomes: Iterable[FileOutcome]) -> AggregateReport:
        """Combina los reportes por archivo. Sólo usa contadores y uniones."""
        aggregate = AggregateReport()
        unique_missing: Dict[str, None] = {}

        for outcome in outcomes:
            aggregate.total_files += 1
            if isinstance(outcome, PerFileValidationError):
                aggregate.files_with_errors += 1
                continue
            if outcome.has_missing_blocks:
                aggregate.files_with_missing_blocks += 1
                for registro in outcome.missing_blocks:
                    unique_missing[registro] = None
            if outcome.has_discrepancies:
                aggregate.files_with_discrepancies += 1

        aggregate.unique_missing_blocks = self.schema.sort_registros(unique_missing)
        return aggregate
