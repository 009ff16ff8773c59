# archive/discovery.py
"""
Búsqueda de archivos de datos en un directorio.
"""

import os
from pathlib import Path
from typing import List, Union

DATA_FILE_SUFFIX = ".txt"


def collect_data_files(
    root: Union[str, Path],
    suffix: str = DATA_FILE_SUFFIX,
    recursive: bool = True
) -> List[Path]:
    """
    Recorre root y devuelve los archivos que terminan en suffix.

    El recorrido es directorio por directorio, con las entradas de cada
    uno ordenadas por nombre, para que dos ejecuciones sobre el mismo
    árbol den el mismo orden. Los enlaces a directorios no se recorren;
    los enlaces a archivos sí se incluyen.
    """
    suffix = suffix.lower()
    found: List[Path] = []

    with os.scandir(root) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            if recursive:
                found.extend(collect_data_files(entry.path, suffix, recursive))
        elif entry.is_file() and entry.name.lower().endswith(suffix):
            found.append(Path(entry.path))

    return found
