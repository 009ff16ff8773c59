# archive/models.py
"""
Modelos del extractor de archivos comprimidos.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class ArchiveFormat(Enum):
    ZIP = "zip"
    RAR = "rar"


@dataclass(frozen=True)
class ExtractionLimits:
    """Límites de extracción para evitar agotar disco o memoria."""
    max_members: int = 10000
    max_total_size: int = 2 * 1024 * 1024 * 1024  # 2GB descomprimidos


@dataclass
class ExtractionResult:
    """Resultado de una extracción."""
    archive_format: ArchiveFormat
    destination: Path
    extracted: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)  # entradas que escapaban del destino
    bytes_written: int = 0
