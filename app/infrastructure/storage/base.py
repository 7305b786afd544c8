"""Абстракция внешнего хранилища файлов.

Хранилище выдает ключ и версию при записи; адрес для скачивания строится
из пары (ключ, версия), чтобы всегда отдавались одни и те же байты.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from app.core.exceptions import ValidationError

RAW_RESOURCE = "raw"


@dataclass(frozen=True)
class StoredBlob:
    key: str
    version: Optional[str] = None


class BlobStore(ABC):
    """Узкий интерфейс: запись, адрес, удаление, описание"""

    @abstractmethod
    async def put(self, content: bytes, content_type: str = "application/pdf") -> StoredBlob:
        """Запись файла, возвращает ключ и версию"""

    @abstractmethod
    async def get_url(self, key: str, version: Optional[str], resource_kind: str = RAW_RESOURCE) -> str:
        """Адрес для скачивания, закрепленный за версией"""

    @abstractmethod
    async def delete(self, key: str, version: Optional[str]) -> None:
        """Удаление файла; отсутствующий ключ - не ошибка"""

    @abstractmethod
    async def describe(self, key: str, version: Optional[str]) -> Dict[str, Any]:
        """Метаданные файла: size, content_type, last_modified, version"""

    @staticmethod
    def check_resource_kind(resource_kind: str) -> None:
        if resource_kind != RAW_RESOURCE:
            raise ValidationError(f"Unsupported resource kind: {resource_kind}")
