# sped_reader/encoding.py
"""
Codificación de archivos SPED y del layout.

Los archivos SPED se generan en latin-1. Leerlos como UTF-8 no lanza
error con el texto ASCII pero corrompe los acentos, por eso la
codificación es fija y no se detecta.
"""

from pathlib import Path
from typing import TextIO, Union

SOURCE_ENCODING = "latin-1"


def open_sped_file(file_path: Union[str, Path], encoding: str = SOURCE_ENCODING) -> TextIO:
    """Abre un archivo SPED en modo texto con la codificación del formato."""
    # newline=None: \r\n y \r se normalizan igual que en un editor
    return open(file_path, 'r', encoding=encoding, newline=None)
