from app.infrastructure.storage.base import BlobStore, StoredBlob, RAW_RESOURCE
from app.infrastructure.storage.memory import InMemoryBlobStore
from app.infrastructure.storage.s3 import S3BlobStore
from app.infrastructure.storage.factory import get_blob_store

__all__ = [
    "BlobStore",
    "StoredBlob",
    "RAW_RESOURCE",
    "InMemoryBlobStore",
    "S3BlobStore",
    "get_blob_store"
]
