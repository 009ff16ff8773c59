# archive/extractor.py
"""
Extracción segura de archivos .zip y .rar.
"""

import logging
import re
import zipfile
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

import rarfile

from ..exceptions import (
    ArchiveExtractionFailure,
    ArchiveLimitExceeded,
    UnsupportedArchiveFormat,
    os_error_reason
)
from .models import ArchiveFormat, ExtractionLimits, ExtractionResult

logger = logging.getLogger(__name__)

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")


def safe_destination(root: Path, member_name: str) -> Optional[Path]:
    """
    Calcula el destino de una entrada dentro de root.

    Returns:
        Ruta absoluta resuelta, o None si la entrada escaparía de root
        (../, rutas absolutas, unidades de Windows, separadores mixtos)
    """
    name = member_name.replace("\\", "/")
    if not name or name.startswith("/") or _DRIVE_PREFIX.match(name):
        return None

    root_resolved = root.resolve()
    target = (root_resolved / name).resolve()
    if target == root_resolved or not target.is_relative_to(root_resolved):
        return None
    return target


class ArchiveExtractor:
    """Extrae un archivo comprimido en un directorio exclusivo."""

    CHUNK_SIZE = 64 * 1024

    def __init__(self, limits: Optional[ExtractionLimits] = None):
        self.limits = limits or ExtractionLimits()

    @staticmethod
    def detect_format(archive_path: Union[str, Path], original_name: Optional[str] = None) -> ArchiveFormat:
        """
        Determina el formato por el nombre original subido y, si no hay
        nombre, por el contenido.
        """
        if original_name:
            lower = original_name.lower()
            if lower.endswith(".zip"):
                return ArchiveFormat.ZIP
            if lower.endswith(".rar"):
                return ArchiveFormat.RAR
            raise UnsupportedArchiveFormat(original_name)

        if zipfile.is_zipfile(archive_path):
            return ArchiveFormat.ZIP
        if rarfile.is_rarfile(str(archive_path)):
            return ArchiveFormat.RAR
        raise UnsupportedArchiveFormat(Path(archive_path).name)

    def extract(
        self,
        archive_path: Union[str, Path],
        destination: Union[str, Path],
        original_name: Optional[str] = None
    ) -> ExtractionResult:
        """
        Extrae todas las entradas seguras del archivo en destination.

        Args:
            archive_path: Ruta al archivo subido
            destination: Directorio vacío y exclusivo de esta petición
            original_name: Nombre original del archivo (define el formato)

        Returns:
            ExtractionResult con las entradas extraídas y descartadas

        Raises:
            UnsupportedArchiveFormat, ArchiveLimitExceeded, ArchiveExtractionFailure
        """
        archive_format = self.detect_format(archive_path, original_name)
        destination = Path(destination)
        destination.mkdir(parents=True, exist_ok=True)
        result = ExtractionResult(archive_format=archive_format, destination=destination)

        logger.info(f"Extrayendo {archive_format.value} en {destination}")

        try:
            if archive_format is ArchiveFormat.ZIP:
                with zipfile.ZipFile(archive_path) as archive:
                    self._extract_members(archive, destination, result)
            else:
                with rarfile.RarFile(str(archive_path)) as archive:
                    self._extract_members(archive, destination, result)
        except ArchiveExtractionFailure:
            raise
        except (zipfile.BadZipFile, rarfile.Error) as e:
            raise ArchiveExtractionFailure(f"Archivo {archive_format.value} inválido: {e}")
        except OSError as e:
            raise ArchiveExtractionFailure(os_error_reason(e))
        except RuntimeError as e:
            # entradas cifradas en zipfile
            raise ArchiveExtractionFailure(str(e))

        logger.info(
            f"Extracción finalizada: {len(result.extracted)} entradas, "
            f"{len(result.skipped)} descartadas, {result.bytes_written} bytes"
        )
        return result

    def _extract_members(self, archive: Any, destination: Path, result: ExtractionResult) -> None:
        # zipfile.ZipFile y rarfile.RarFile exponen la misma interfaz
        members = archive.infolist()
        if len(members) > self.limits.max_members:
            raise ArchiveLimitExceeded(
                f"{len(members)} entradas, máximo {self.limits.max_members}"
            )

        declared_size = sum(member.file_size for member in members if not member.is_dir())
        if declared_size > self.limits.max_total_size:
            raise ArchiveLimitExceeded(
                f"{declared_size} bytes descomprimidos, máximo {self.limits.max_total_size}"
            )

        for member in members:
            target = safe_destination(destination, member.filename)
            if target is None:
                logger.warning(f"Entrada descartada por escapar del destino: {member.filename!r}")
                result.skipped.append(member.filename)
                continue

            if member.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue

            target.parent.mkdir(parents=True, exist_ok=True)
            with archive.open(member) as source, open(target, 'wb') as sink:
                result.bytes_written += self._copy_bounded(source, sink, result.bytes_written)
            result.extracted.append(member.filename)

    def _copy_bounded(self, source: BinaryIO, sink: BinaryIO, already_written: int) -> int:
        """Copia por bloques sin superar el total permitido (el tamaño declarado puede mentir)."""
        written = 0
        while True:
            chunk = source.read(self.CHUNK_SIZE)
            if not chunk:
                return written
            written += len(chunk)
            if already_written + written > self.limits.max_total_size:
                raise ArchiveLimitExceeded(
                    f"más de {self.limits.max_total_size} bytes descomprimidos"
                )
            sink.write(chunk)
