# archive/__init__.py
"""
Micromódulo para extracción segura de archivos comprimidos.
"""

from .discovery import DATA_FILE_SUFFIX, collect_data_files
from .extractor import ArchiveExtractor, safe_destination
from .models import ArchiveFormat, ExtractionLimits, ExtractionResult

__all__ = [
    'ArchiveExtractor',
    'ArchiveFormat',
    'ExtractionLimits',
    'ExtractionResult',
    'safe_destination',
    'collect_data_files',
    'DATA_FILE_SUFFIX'
]
