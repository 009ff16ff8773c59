# layout/loader.py
"""
Carga del layout de bloques (layout_blocos.json).
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from ..exceptions import SchemaLoadError, os_error_reason
from ..sped_reader.encoding import SOURCE_ENCODING
from .models import LayoutSchema

logger = logging.getLogger(__name__)

LayoutSource = Union[str, Path, bytes, Mapping[str, Any]]


class LayoutLoader:
    """Carga y valida la definición declarativa de bloques."""

    @classmethod
    def load(cls, source: LayoutSource) -> LayoutSchema:
        """
        Carga un layout desde una ruta, bytes crudos o un mapeo ya parseado.

        Args:
            source: Ruta al JSON, contenido en bytes o dict registro -> campos

        Returns:
            LayoutSchema inmutable

        Raises:
            SchemaLoadError si el layout no existe, no se puede leer o
            no tiene la forma esperada
        """
        if isinstance(source, Mapping):
            return cls._build(source, None)

        if isinstance(source, bytes):
            return cls._build(cls._parse(source.decode(SOURCE_ENCODING), None), None)

        return cls.load_file(source)

    @classmethod
    def load_file(cls, file_path: Union[str, Path]) -> LayoutSchema:
        path = Path(file_path)
        if not path.exists():
            raise SchemaLoadError(
                "layout_blocos.json no encontrado",
                path=str(file_path),
                not_found=True
            )

        try:
            raw_text = path.read_text(encoding=SOURCE_ENCODING)
        except OSError as e:
            raise SchemaLoadError(
                "No se pudo leer el layout",
                path=str(file_path),
                detail=os_error_reason(e)
            )

        schema = cls._build(cls._parse(raw_text, str(file_path)), str(file_path))
        logger.info(f"Layout cargado desde {file_path}: {len(schema)} bloques")
        return schema

    @staticmethod
    def _parse(raw_text: str, path: Union[str, None]) -> Any:
        try:
            return json.loads(raw_text)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(
                "Fallo al parsear layout_blocos.json",
                path=path,
                detail=str(e)
            )

    @staticmethod
    def _build(raw: Any, path: Union[str, None]) -> LayoutSchema:
        if not isinstance(raw, Mapping):
            raise SchemaLoadError(
                "El layout debe ser un objeto JSON registro -> lista de campos",
                path=path,
                detail=f"tipo recibido: {type(raw).__name__}"
            )

        for registro, declared in raw.items():
            if (not isinstance(declared, list) or not declared
                    or not all(isinstance(name, str) for name in declared)):
                raise SchemaLoadError(
                    "Definición de bloque inválida",
                    path=path,
                    detail=f"registro '{registro}' debe ser una lista no vacía de strings"
                )

        return LayoutSchema.from_mapping(raw, source=path)
