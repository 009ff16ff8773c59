# backend/core/vlayout/orchestrator.py
"""
Orquestador principal del validador de layout SPED.

Coordina lectura, comparación, extracción y agregación. El layout se
recibe ya cargado y se comparte, sólo lectura, entre todas las
validaciones.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Union

from .archive import DATA_FILE_SUFFIX, ArchiveExtractor, ExtractionLimits, collect_data_files
from .comparator import FileValidationReport, validate_records
from .exceptions import NoDataFilesFound
from .layout import LayoutSchema
from .reporting import BacklogReport, BatchAggregator, BatchReport
from .sped_reader import SOURCE_ENCODING, RecordReader

logger = logging.getLogger(__name__)


class LayoutValidationOrchestrator:
    """
    Orquestador que coordina todos los módulos del validador.
    """

    def __init__(
        self,
        schema: LayoutSchema,
        limits: Optional[ExtractionLimits] = None,
        max_workers: int = 1,
        data_suffix: str = DATA_FILE_SUFFIX,
        encoding: str = SOURCE_ENCODING
    ):
        """
        Args:
            schema: Layout cargado
            limits: Límites de extracción de archivos comprimidos
            max_workers: Archivos validados en paralelo dentro de un lote
            data_suffix: Extensión de los archivos SPED
            encoding: Codificación de los archivos SPED
        """
        self.schema = schema
        self.extractor = ArchiveExtractor(limits)
        self.aggregator = BatchAggregator(schema, max_workers=max_workers, encoding=encoding)
        self.data_suffix = data_suffix
        self.encoding = encoding

    def validate_file(self, file_path: Union[str, Path]) -> FileValidationReport:
        """Valida un único archivo SPED."""
        logger.info(f"Validando {file_path}")
        records = RecordReader.read_file(file_path, encoding=self.encoding)
        return validate_records(records, self.schema)

    def validate_stream(self, lines: Iterable[str]) -> FileValidationReport:
        """Valida líneas ya decodificadas (archivo abierto, StringIO, lista)."""
        return validate_records(RecordReader.iter_records(lines), self.schema)

    def validate_archive(
        self,
        archive_path: Union[str, Path],
        original_name: Optional[str] = None,
        work_dir: Optional[Union[str, Path]] = None
    ) -> BatchReport:
        """
        Extrae un .zip/.rar y valida cada archivo de datos encontrado.

        El directorio de extracción se crea vacío para esta llamada y se
        elimina siempre, termine bien o con error.

        Raises:
            UnsupportedArchiveFormat, ArchiveExtractionFailure, NoDataFilesFound
        """
        if work_dir is not None:
            Path(work_dir).mkdir(parents=True, exist_ok=True)
        extraction_dir = Path(tempfile.mkdtemp(prefix="extract_", dir=work_dir))

        try:
            self.extractor.extract(archive_path, extraction_dir, original_name=original_name)

            data_files = collect_data_files(extraction_dir, suffix=self.data_suffix, recursive=True)
            if not data_files:
                raise NoDataFilesFound(self.data_suffix)

            logger.info(f"Validando {len(data_files)} archivos extraídos de {original_name or archive_path}")
            report = self.aggregator.aggregate(data_files, root=extraction_dir)

            logger.info(
                f"Lote validado: {report.aggregate.total_files} archivos, "
                f"{report.aggregate.files_with_missing_blocks} con bloques faltantes, "
                f"{report.aggregate.files_with_discrepancies} con discrepancias"
            )
            return report
        finally:
            shutil.rmtree(extraction_dir, ignore_errors=True)

    def validate_directory(self, directory: Union[str, Path], recursive: bool = False) -> BacklogReport:
        """Valida todos los archivos de datos de un directorio (backlog)."""
        data_files = collect_data_files(directory, suffix=self.data_suffix, recursive=recursive)
        logger.info(f"Encontrados {len(data_files)} archivos {self.data_suffix} en {directory} (recursive={recursive})")

        files = self.aggregator.run(data_files, key_for=str)
        return BacklogReport(files=files)
