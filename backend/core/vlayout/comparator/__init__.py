# comparator/__init__.py
"""
Micromódulo para comparación de registros SPED contra el layout.
"""

from .accumulator import LayoutAccumulator, validate_records
from .models import (
    MAX_SAMPLE_LINE_NUMBERS,
    MAX_SAMPLE_TEXTS,
    FieldCountDiscrepancy,
    FileValidationReport
)

__all__ = [
    'LayoutAccumulator',
    'validate_records',
    'FieldCountDiscrepancy',
    'FileValidationReport',
    'MAX_SAMPLE_TEXTS',
    'MAX_SAMPLE_LINE_NUMBERS'
]
