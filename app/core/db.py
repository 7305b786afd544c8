from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db.base import Base


def _unicode_lower(value):
    return value.casefold() if isinstance(value, str) else value


def install_unicode_lower(engine: AsyncEngine) -> None:
    """lower() с поддержкой Unicode для SQLite; встроенная меняет регистр только у ASCII"""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _register_lower(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower)


# Асинхронный движок
engine = create_async_engine(settings.database_url, future=True, echo=settings.sql_echo)
install_unicode_lower(engine)

# Сессии
SessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def init_models() -> None:
    """Создание таблиц (режим разработки, в продакшене - alembic)"""
    # Импорт регистрирует модели в метаданных
    import app.db.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Функция для dependency injection в FastAPI
async def get_db():
    async with SessionLocal() as session:
        yield session
