# sped_reader/__init__.py
"""
Micromódulo para lectura en streaming de archivos SPED.
"""

from .encoding import SOURCE_ENCODING, open_sped_file
from .models import SpedRecord
from .reader import DELIMITER, RecordReader, parse_line

__all__ = [
    'RecordReader',
    'SpedRecord',
    'parse_line',
    'open_sped_file',
    'SOURCE_ENCODING',
    'DELIMITER'
]
