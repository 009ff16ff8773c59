# backend/core/vlayout/__init__.py
"""
Sistema de validación de layout para archivos SPED.
"""

from .orchestrator import LayoutValidationOrchestrator
from .layout import LayoutLoader, LayoutSchema
from .sped_reader import RecordReader
from .comparator import LayoutAccumulator, validate_records
from .archive import ArchiveExtractor, collect_data_files
from .reporting import BatchAggregator

__all__ = [
    'LayoutValidationOrchestrator',
    'LayoutLoader',
    'LayoutSchema',
    'RecordReader',
    'LayoutAccumulator',
    'validate_records',
    'ArchiveExtractor',
    'collect_data_files',
    'BatchAggregator'
]
