# backend/app/api/v1/endpoints/layout.py
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from typing import Optional
import logging

from ....core.config import Settings, get_settings
from ....core.storage import StorageManager
from ....models.validation import ArchiveValidationResponse, FileReportModel
from ....services.layout_service import LayoutService
from .....core.vlayout.exceptions import LayoutValidationError, NoFileSupplied, os_error_reason

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/validate_layout",
    response_model=FileReportModel,
    response_model_exclude_none=True
)
async def validate_layout(
        sped: Optional[UploadFile] = File(None),
        layout: Optional[str] = Form(None),
        settings: Settings = Depends(get_settings)
):
    """
    Valida un archivo SPED .txt contra el layout de bloques.

    Args:
        sped: Archivo SPED (latin-1)
        layout: Ruta opcional a otro layout_blocos.json
    """
    schema = LayoutService.load_schema(layout, settings)

    if sped is None or not sped.filename:
        raise NoFileSupplied("sped")

    logger.info(f"Validando layout de {sped.filename}")

    try:
        with StorageManager.request_workspace(settings.UPLOAD_DIR, prefix="sped_") as workspace:
            file_path = await StorageManager.save_upload(sped, workspace, settings.MAX_UPLOAD_SIZE)
            orchestrator = LayoutService.build_orchestrator(schema, settings)
            report = await run_in_threadpool(orchestrator.validate_file, file_path)

        return report.to_dict()

    except LayoutValidationError:
        raise
    except OSError as e:
        logger.error(f"Error validando layout: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail={"erro": "falha validacao", "detalhes": os_error_reason(e)}
        )


@router.post(
    "/validate_layout_archive",
    response_model=ArchiveValidationResponse,
    response_model_exclude_none=True
)
async def validate_layout_archive(
        archive: Optional[UploadFile] = File(None),
        layout: Optional[str] = Form(None),
        settings: Settings = Depends(get_settings)
):
    """
    Valida todos los .txt de un archivo .zip o .rar.

    El archivo subido y el directorio de extracción se eliminan al
    terminar, con o sin error.
    """
    if archive is None or not archive.filename:
        raise NoFileSupplied("archive")

    schema = LayoutService.load_schema(layout, settings)

    logger.info(f"Validando archivo comprimido {archive.filename}")

    try:
        with StorageManager.request_workspace(settings.UPLOAD_DIR, prefix="archive_") as workspace:
            archive_path = await StorageManager.save_upload(archive, workspace, settings.MAX_UPLOAD_SIZE)
            orchestrator = LayoutService.build_orchestrator(schema, settings)
            report = await run_in_threadpool(
                orchestrator.validate_archive,
                archive_path,
                archive.filename,
                workspace
            )

        return report.to_dict()

    except LayoutValidationError:
        raise
    except OSError as e:
        logger.error(f"Error en validación de archivo comprimido: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail={"erro": "Falha ao processar archive", "detalhes": os_error_reason(e)}
        )
