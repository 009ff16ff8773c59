# backend/app/api/v1/endpoints/health.py
from fastapi import APIRouter, Depends
from ....core.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """Health check público"""
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "layout_available": settings.LAYOUT_PATH.exists()
    }
