"""Общие зависимости роутеров."""

from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.exceptions import DomainError
from app.domains.documents.services import DocumentService
from app.domains.highlights.services import HighlightService
from app.infrastructure.storage.base import BlobStore
from app.infrastructure.storage.factory import get_blob_store


def get_document_service(
    db: AsyncSession = Depends(get_db),
    blob_store: BlobStore = Depends(get_blob_store)
) -> DocumentService:
    return DocumentService(db, blob_store)


def get_highlight_service(db: AsyncSession = Depends(get_db)) -> HighlightService:
    return HighlightService(db)


def to_http_error(error: DomainError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)
