# reporting/exporters/file_exporter.py
"""
Exportador de reportes a archivos.
"""

from pathlib import Path
from typing import Any, Optional, Union

from ..formatters.base_formatter import BaseFormatter
from ..formatters.json_formatter import JSONFormatter


class ReportExportError(Exception):
    """Fallo al escribir un reporte en disco."""

    def __init__(self, filepath: str, reason: str):
        self.filepath = filepath
        self.reason = reason
        super().__init__(f"Fallo al escribir archivo: {filepath} ({reason})")


class FileExporter:
    """Exporta reportes a archivos."""

    @staticmethod
    def export_to_file(
        report: Any,
        output_path: Union[str, Path],
        formatter: Optional[BaseFormatter] = None
    ) -> Path:
        """
        Formatea el reporte y lo escribe en output_path (UTF-8).

        Args:
            report: Reporte con to_dict()
            output_path: Ruta del archivo a crear
            formatter: Formateador (JSON por defecto)

        Returns:
            Ruta del archivo creado

        Raises:
            ReportExportError si falla la escritura
        """
        formatter = formatter or JSONFormatter()
        filepath = Path(output_path)

        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(filepath, 'w', encoding='utf-8') as f:
                f.write(formatter.format(report))
        except OSError as e:
            raise ReportExportError(str(filepath), str(e))

        return filepath
