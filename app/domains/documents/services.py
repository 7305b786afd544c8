import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from app.core.config import settings
from app.core.exceptions import ConflictError, DomainError, UpstreamFailure, ValidationError
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.highlight_repository import HighlightRepository
from app.domains.access import ensure_owned
from app.domains.documents.entities import Document, DEFAULT_DISPLAY_NAME, normalize_display_name
from app.infrastructure.storage.base import BlobStore, RAW_RESOURCE

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"


def check_upload_size(size: int) -> None:
    if size > settings.max_upload_bytes:
        raise ValidationError(f"File too large (max {settings.max_upload_bytes} bytes)")


class DocumentService:
    """Сервис реестра документов"""

    def __init__(self, session: AsyncSession, blob_store: BlobStore):
        self.session = session
        self.blob_store = blob_store
        self.document_repository = DocumentRepository(session)
        self.highlight_repository = HighlightRepository(session)

    async def register_document(
        self,
        owner_id: uuid.UUID,
        external_id: str,
        display_name: str,
        storage_version: Optional[str] = None
    ) -> Document:
        """Регистрация уже загруженного файла"""
        document = Document.register(
            owner_id=owner_id,
            external_id=external_id,
            display_name=display_name,
            storage_version=storage_version
        )

        if await self.document_repository.external_id_exists(external_id):
            raise ConflictError("Document with this external id already registered")

        return await self.document_repository.create(document)

    async def upload_document(
        self,
        owner_id: uuid.UUID,
        filename: Optional[str],
        content: bytes,
        content_type: str = "application/pdf"
    ) -> Document:
        """Загрузка файла в хранилище и регистрация документа"""
        if not content:
            raise ValidationError("No file uploaded.")
        check_upload_size(len(content))
        if not content.startswith(PDF_MAGIC):
            raise ValidationError("Invalid PDF file")

        display_name = normalize_display_name((filename or "").strip() or DEFAULT_DISPLAY_NAME)

        stored = await self.blob_store.put(content, content_type=content_type)

        try:
            document = await self.register_document(
                owner_id=owner_id,
                external_id=stored.key,
                display_name=display_name,
                storage_version=stored.version
            )
        except (DomainError, SQLAlchemyError):
            # Запись в реестр не удалась - файл в хранилище никому не нужен
            logger.warning(f"Registry insert failed, removing uploaded blob {stored.key}")
            try:
                await self.blob_store.delete(stored.key, stored.version)
            except DomainError as cleanup_error:
                logger.error(f"Could not remove orphaned blob {stored.key}: {cleanup_error.message}")
            raise

        logger.info(f"Uploaded document {document.external_id} for user {owner_id}")
        return document

    async def list_documents(
        self,
        owner_id: uuid.UUID,
        name_filter: Optional[str] = None
    ) -> List[Document]:
        """Документы пользователя; name_filter - подстрока без учета регистра"""
        return await self.document_repository.list_by_owner(owner_id, name_filter or None)

    async def get_document(self, owner_id: uuid.UUID, external_id: str) -> Document:
        """Получение документа владельца по внешнему ключу"""
        document = await self.document_repository.get_owned(owner_id, external_id)
        return ensure_owned(document, owner_id, "PDF")

    async def get_document_with_url(self, owner_id: uuid.UUID, external_id: str) -> Tuple[Document, str]:
        """Документ и закрепленный за версией адрес для скачивания"""
        document = await self.get_document(owner_id, external_id)
        url = await self.blob_store.get_url(
            document.external_id,
            document.storage_version,
            resource_kind=RAW_RESOURCE
        )
        return document, url

    async def rename_document(self, owner_id: uuid.UUID, external_id: str, new_name: str) -> Document:
        """Переименование документа"""
        document = await self.get_document(owner_id, external_id)
        document.rename(new_name)

        updated = await self.document_repository.update_name(document)
        updated = ensure_owned(updated, owner_id, "PDF")
        logger.info(f"Renamed document {external_id}")
        return updated

    async def delete_document(self, owner_id: uuid.UUID, external_id: str) -> int:
        """Удаление документа: файл, затем запись реестра и выделения.

        Сбой удаления файла прерывает операцию до изменения реестра.
        Запись реестра и каскад по выделениям выполняются в одной
        транзакции. Возвращает число удаленных выделений.
        """
        document = await self.get_document(owner_id, external_id)

        await self.blob_store.delete(document.external_id, document.storage_version)

        try:
            await self.document_repository.delete(document.uuid, owner_id, commit=False)
            removed = await self.highlight_repository.delete_by_document(document.uuid, commit=False)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Blob {external_id} deleted but registry delete failed: {e!r}")
            raise UpstreamFailure("Failed to delete document record") from e

        logger.info(f"Deleted document {external_id} and {removed} highlights")
        return removed

    async def describe_storage(self, owner_id: uuid.UUID, external_id: str) -> Dict[str, Any]:
        """Сведения о файле документа во внешнем хранилище"""
        document = await self.get_document(owner_id, external_id)
        details = await self.blob_store.describe(document.external_id, document.storage_version)

        return {
            "external_id": document.external_id,
            "storage_version": details.get("version") or document.storage_version,
            "size": details.get("size"),
            "content_type": details.get("content_type"),
            "last_modified": details.get("last_modified"),
        }
