#!/usr/bin/env python3
"""
Valida todos los archivos SPED .txt de un directorio y genera
backlog_report.json.

Uso: python -m backend.cli.validate_backlog <directorio> [--recursive]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from backend.app.core.config import get_settings
from backend.core.vlayout import LayoutLoader, LayoutValidationOrchestrator
from backend.core.vlayout.exceptions import PerFileValidationError, SchemaLoadError
from backend.core.vlayout.reporting import FileExporter, ReportExportError

logger = logging.getLogger("validate_backlog")

DEFAULT_REPORT_NAME = "backlog_report.json"


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Valida archivos SPED .txt contra layout_blocos.json"
    )
    parser.add_argument("directory", type=Path, help="Directorio con los archivos .txt")
    parser.add_argument("--recursive", action="store_true", help="Busca también en subdirectorios")
    parser.add_argument("--layout", type=Path, default=settings.LAYOUT_PATH, help="Ruta al layout de bloques")
    parser.add_argument("--output", type=Path, default=Path(DEFAULT_REPORT_NAME), help="Archivo JSON de salida")
    parser.add_argument("--workers", type=int, default=settings.VALIDATION_MAX_WORKERS,
                        help="Archivos validados en paralelo")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(levelname)s %(message)s"
    )

    try:
        schema = LayoutLoader.load_file(args.layout)
    except SchemaLoadError as e:
        logger.error(f"{e}")
        return 1

    directory: Path = args.directory
    if not directory.is_dir():
        logger.error(f"Directorio inválido: {directory}")
        return 1

    orchestrator = LayoutValidationOrchestrator(
        schema,
        max_workers=args.workers,
        data_suffix=settings.DATA_FILE_SUFFIX
    )
    report = orchestrator.validate_directory(directory, recursive=args.recursive)

    failed = sum(1 for outcome in report.files.values() if isinstance(outcome, PerFileValidationError))
    logger.info(f"Validados {len(report.files)} archivos, {failed} con error")

    try:
        output_path = FileExporter.export_to_file(report, args.output)
    except ReportExportError as e:
        logger.error(f"{e}")
        return 1

    logger.info(f"Reporte guardado en {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
