from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.http.health import router as health_router
from app.api.router import api_router
from app.core.config import settings
from app.core.db import init_models

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Запуск и остановка приложения"""
    logger.info(f"Starting {settings.service_name}")
    if settings.create_tables_on_startup:
        await init_models()
    yield
    logger.info(f"Stopping {settings.service_name}")


app = FastAPI(
    title="PDF Annotator",
    description="Веб-приложение для чтения PDF с выделениями и заметками",
    version="1.0.0",
    lifespan=lifespan
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "PDF Annotator API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
