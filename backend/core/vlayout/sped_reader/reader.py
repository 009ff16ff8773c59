# sped_reader/reader.py
"""
Lectura en streaming de registros SPED.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .encoding import SOURCE_ENCODING, open_sped_file
from .models import SpedRecord

DELIMITER = "|"


def parse_line(line: str, line_number: int) -> Optional[SpedRecord]:
    """
    Convierte una línea en SpedRecord.

    Returns:
        None si la línea no empieza con el delimitador tras el trim
    """
    text = line.strip()
    if not text.startswith(DELIMITER):
        return None

    body = text[1:]
    if body.endswith(DELIMITER):
        body = body[:-1]

    parts = body.split(DELIMITER)
    return SpedRecord(
        registro=parts[0],
        fields=tuple(parts[1:]),
        line_number=line_number,
        raw_text=text
    )


class RecordReader:
    """Genera registros SPED de forma perezosa."""

    @classmethod
    def iter_records(cls, lines: Iterable[str]) -> Iterator[SpedRecord]:
        """
        Recorre cualquier iterable de líneas (archivo, StringIO, lista).

        Las líneas en blanco y las que no son registro se saltan, pero
        cuentan para la numeración.
        """
        for line_number, line in enumerate(lines, start=1):
            record = parse_line(line, line_number)
            if record is not None:
                yield record

    @classmethod
    def read_file(cls, file_path: Union[str, Path], encoding: str = SOURCE_ENCODING) -> Iterator[SpedRecord]:
        """
        Lee un archivo SPED registro a registro.

        El archivo se abre al pedir el primer registro y se cierra al
        agotarse el generador (o al cerrarlo).
        """
        with open_sped_file(file_path, encoding=encoding) as f:
            yield from cls.iter_records(f)
