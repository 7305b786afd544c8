import logging
import uuid
from datetime import datetime
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

from app.core.exceptions import NotFoundError
from app.infrastructure.storage.base import BlobStore, StoredBlob, RAW_RESOURCE

logger = logging.getLogger(__name__)


class InMemoryBlobStore(BlobStore):
    """Хранилище в памяти процесса (разработка и тесты)"""

    def __init__(self, key_prefix: str = "pdf-annotator"):
        self.key_prefix = key_prefix
        # {(key, version): (content, content_type, created_at)}
        self._blobs: Dict[Tuple[str, str], Tuple[bytes, str, datetime]] = {}

    async def put(self, content: bytes, content_type: str = "application/pdf") -> StoredBlob:
        key = f"{self.key_prefix}/{uuid.uuid4().hex}.pdf"
        version = uuid.uuid4().hex
        self._blobs[(key, version)] = (content, content_type, datetime.utcnow())
        logger.info(f"Stored blob {key} ({len(content)} bytes) in memory")
        return StoredBlob(key=key, version=version)

    async def get_url(self, key: str, version: Optional[str], resource_kind: str = RAW_RESOURCE) -> str:
        self.check_resource_kind(resource_kind)
        url = f"memory://{resource_kind}/{quote(key, safe='')}"
        if version:
            url += f"?version={version}"
        return url

    async def delete(self, key: str, version: Optional[str]) -> None:
        for stored in [k for k in self._blobs if k[0] == key and (version is None or k[1] == version)]:
            del self._blobs[stored]
        logger.info(f"Deleted blob {key} from memory")

    async def describe(self, key: str, version: Optional[str]) -> Dict[str, Any]:
        for (stored_key, stored_version), (content, content_type, created_at) in self._blobs.items():
            if stored_key == key and (version is None or stored_version == version):
                return {
                    "size": len(content),
                    "content_type": content_type,
                    "last_modified": created_at,
                    "version": stored_version,
                }
        raise NotFoundError("Stored file not found")

    def read(self, key: str, version: Optional[str] = None) -> bytes:
        """Чтение содержимого (для проверок)"""
        for (stored_key, stored_version), (content, _, _) in self._blobs.items():
            if stored_key == key and (version is None or stored_version == version):
                return content
        raise NotFoundError("Stored file not found")

    def __contains__(self, key: str) -> bool:
        return any(stored_key == key for stored_key, _ in self._blobs)
