from fastapi import APIRouter

from app.core.config import settings

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


@router.get("/health")
async def health_check():
    """Проверка работоспособности сервиса"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": VERSION
    }
