"""Выбор хранилища файлов по настройкам.

BLOB_STORE_BACKEND:
    s3      - S3BlobStore (S3_BUCKET обязателен)
    memory  - InMemoryBlobStore, содержимое теряется при перезапуске
"""

import logging
from functools import lru_cache

from app.core.config import settings
from app.infrastructure.storage.base import BlobStore
from app.infrastructure.storage.memory import InMemoryBlobStore
from app.infrastructure.storage.s3 import S3BlobStore

logger = logging.getLogger(__name__)


@lru_cache()
def get_blob_store() -> BlobStore:
    """Единственный экземпляр хранилища; используется как зависимость FastAPI"""
    backend = settings.blob_store_backend.lower()
    logger.info(f"Initializing blob store backend: {backend}")

    if backend == "memory":
        return InMemoryBlobStore(key_prefix=settings.s3_key_prefix)

    if backend == "s3":
        if not settings.s3_bucket:
            raise ValueError("S3_BUCKET is required when BLOB_STORE_BACKEND=s3")
        return S3BlobStore(
            bucket=settings.s3_bucket,
            region=settings.s3_region,
            key_prefix=settings.s3_key_prefix,
            endpoint_url=settings.s3_endpoint_url,
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
            url_expires_seconds=settings.presigned_url_expires_seconds,
            timeout_seconds=settings.blob_store_timeout_seconds
        )

    raise ValueError(f"Unknown blob store backend: {backend}")
