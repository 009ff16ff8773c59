import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from .api.v1.endpoints import layout
from .api.v1.router import api_router
from .core.config import get_settings
from .core.storage import UploadTooLarge
from ..core.vlayout.exceptions import (
    ArchiveExtractionFailure,
    ArchiveLimitExceeded,
    LayoutValidationError,
    NoDataFilesFound,
    NoFileSupplied,
    SchemaLoadError,
    UnsupportedArchiveFormat
)

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Validación de layout de archivos SPED"
)

app.include_router(layout.router, tags=["layout"])
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "app": settings.PROJECT_NAME,
        "version": settings.VERSION
    }


def _status_for(exc: LayoutValidationError) -> int:
    if isinstance(exc, SchemaLoadError):
        return 400 if exc.not_found else 500
    if isinstance(exc, (NoFileSupplied, UnsupportedArchiveFormat)):
        return 400
    if isinstance(exc, NoDataFilesFound):
        return 404
    if isinstance(exc, ArchiveLimitExceeded):
        return 413
    if isinstance(exc, ArchiveExtractionFailure):
        return 500
    return 400


@app.exception_handler(LayoutValidationError)
async def layout_validation_exception_handler(request: Request, exc: LayoutValidationError):
    """Convierte los errores del validador en respuestas JSON estructuradas"""
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.code} en {request.url.path}: {exc}")
    else:
        logger.warning(f"{exc.code} en {request.url.path}: {exc}")

    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.exception_handler(UploadTooLarge)
async def upload_too_large_handler(request: Request, exc: UploadTooLarge):
    return JSONResponse(status_code=413, content={"erro": str(exc)})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Maneja todos los HTTPException de forma centralizada"""
    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content=exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


if __name__ == "__main__":
    import uvicorn

    logger.info(f"{settings.PROJECT_NAME} escuchando en http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
