"""
Servicio que conecta la API con el validador de layout.
"""

import logging
from pathlib import Path
from typing import Optional

from ..core.config import Settings
from ...core.vlayout import LayoutLoader, LayoutSchema, LayoutValidationOrchestrator
from ...core.vlayout.archive import ExtractionLimits

logger = logging.getLogger(__name__)


class LayoutService:
    """Carga el layout y arma el orquestador para cada petición."""

    @staticmethod
    def resolve_layout_path(layout: Optional[str], settings: Settings) -> Path:
        """El campo 'layout' de la petición reemplaza al layout por defecto."""
        if layout:
            return Path(layout)
        return settings.LAYOUT_PATH

    @staticmethod
    def load_schema(layout: Optional[str], settings: Settings) -> LayoutSchema:
        """
        Carga el layout indicado en la petición o el configurado.

        Raises:
            SchemaLoadError
        """
        layout_path = LayoutService.resolve_layout_path(layout, settings)
        logger.info(f"Usando layout: {layout_path}")
        return LayoutLoader.load_file(layout_path)

    @staticmethod
    def build_orchestrator(schema: LayoutSchema, settings: Settings) -> LayoutValidationOrchestrator:
        return LayoutValidationOrchestrator(
            schema,
            limits=ExtractionLimits(
                max_members=settings.MAX_ARCHIVE_MEMBERS,
                max_total_size=settings.MAX_EXTRACTED_SIZE
            ),
            max_workers=settings.VALIDATION_MAX_WORKERS,
            data_suffix=settings.DATA_FILE_SUFFIX
        )
