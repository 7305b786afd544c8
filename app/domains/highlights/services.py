import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from app.core.exceptions import NotFoundError
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.highlight_repository import HighlightRepository
from app.domains.access import ensure_owned
from app.domains.highlights.entities import Highlight, Region

logger = logging.getLogger(__name__)


class HighlightService:
    """Сервис для работы с выделениями"""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)
        self.highlight_repository = HighlightRepository(session)
    
    async def _resolve_document(self, owner_id: uuid.UUID, document_external_id: str):
        # Ссылка на документ от клиента проверяется только через выборку по владельцу
        document = await self.document_repository.get_owned(owner_id, document_external_id)
        return ensure_owned(document, owner_id, "PDF")
    
    async def create_highlight(
        self,
        owner_id: uuid.UUID,
        document_external_id: str,
        text: str,
        page_number: int,
        region: Region
    ) -> Highlight:
        """Создание выделения в документе владельца"""
        document = await self._resolve_document(owner_id, document_external_id)
        
        highlight = Highlight.create_highlight(
            owner_id=owner_id,
            document_id=document.uuid,
            text=text,
            page_number=page_number,
            region=region
        )
        
        created = await self.highlight_repository.create(highlight)
        logger.info(f"Created highlight {created.uuid} on page {page_number} of {document_external_id}")
        return created
    
    async def list_highlights(
        self,
        owner_id: uuid.UUID,
        document_external_id: str,
        text_filter: Optional[str] = None
    ) -> List[Highlight]:
        """Выделения документа; text_filter - подстрока без учета регистра"""
        document = await self._resolve_document(owner_id, document_external_id)
        return await self.highlight_repository.list_by_document(
            owner_id,
            document.uuid,
            text_filter or None
        )
    
    async def get_highlight(self, owner_id: uuid.UUID, highlight_id: uuid.UUID) -> Highlight:
        """Получение выделения владельца"""
        highlight = await self.highlight_repository.get_owned(owner_id, highlight_id)
        return ensure_owned(highlight, owner_id, "Highlight")
    
    async def update_note(
        self,
        owner_id: uuid.UUID,
        highlight_id: uuid.UUID,
        note: Optional[str]
    ) -> Highlight:
        """Изменение заметки к выделению"""
        highlight = await self.get_highlight(owner_id, highlight_id)
        highlight.update_note(note)
        
        updated = await self.highlight_repository.update_note(highlight)
        logger.info(f"Updated note of highlight {highlight_id}")
        return ensure_owned(updated, owner_id, "Highlight")
    
    async def delete_highlight(self, owner_id: uuid.UUID, highlight_id: uuid.UUID) -> None:
        """Удаление выделения"""
        deleted = await self.highlight_repository.delete(highlight_id, owner_id)
        if not deleted:
            raise NotFoundError("Highlight not found")
        logger.info(f"Deleted highlight {highlight_id}")
