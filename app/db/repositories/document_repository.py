from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_
from sqlalchemy.exc import IntegrityError
import uuid

from app.core.exceptions import ConflictError
from app.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from app.domains.documents.entities import Document


class DocumentRepository:
    """Репозиторий реестра документов. Все выборки - в рамках владельца"""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def create(self, document: "Document") -> "Document":
        """Создание записи о документе"""
        db_document = DocumentModel(
            uuid=document.uuid,
            external_id=document.external_id,
            owner_id=document.owner_id,
            display_name=document.display_name,
            storage_version=document.storage_version,
            created_at=document.created_at,
            updated_at=document.updated_at
        )
        
        self.session.add(db_document)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("Document with this external id already registered")
        await self.session.refresh(db_document)
        return self._to_domain(db_document)
    
    async def external_id_exists(self, external_id: str) -> bool:
        """Проверка уникальности внешнего ключа (без учета владельца)"""
        result = await self.session.execute(
            select(DocumentModel.uuid).where(DocumentModel.external_id == external_id)
        )
        return result.scalar_one_or_none() is not None
    
    async def get_owned(self, owner_id: uuid.UUID, external_id: str) -> Optional["Document"]:
        """Получение документа по внешнему ключу и владельцу"""
        result = await self.session.execute(
            select(DocumentModel).where(
                and_(
                    DocumentModel.external_id == external_id,
                    DocumentModel.owner_id == owner_id
                )
            )
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None
    
    async def list_by_owner(
        self,
        owner_id: uuid.UUID,
        name_filter: Optional[str] = None
    ) -> List["Document"]:
        """Документы владельца, при необходимости с фильтром по имени"""
        query = select(DocumentModel).where(DocumentModel.owner_id == owner_id)
        
        if name_filter:
            query = query.where(DocumentModel.display_name.icontains(name_filter, autoescape=True))
        
        result = await self.session.execute(
            query.order_by(DocumentModel.created_at.asc())
        )
        return [self._to_domain(doc) for doc in result.scalars().all()]
    
    async def update_name(self, document: "Document") -> Optional["Document"]:
        """Сохранение нового имени документа"""
        stmt = (
            update(DocumentModel)
            .where(
                and_(
                    DocumentModel.uuid == document.uuid,
                    DocumentModel.owner_id == document.owner_id
                )
            )
            .values(
                display_name=document.display_name,
                updated_at=document.updated_at
            )
        )
        
        await self.session.execute(stmt)
        await self.session.commit()
        
        return await self.get_owned(document.owner_id, document.external_id)
    
    async def delete(self, document_uuid: uuid.UUID, owner_id: uuid.UUID, commit: bool = True) -> bool:
        """Удаление записи о документе"""
        stmt = delete(DocumentModel).where(
            and_(
                DocumentModel.uuid == document_uuid,
                DocumentModel.owner_id == owner_id
            )
        )
        result = await self.session.execute(stmt)
        if commit:
            await self.session.commit()
        return result.rowcount > 0
    
    def _to_domain(self, db_document: DocumentModel) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.documents.entities import Document
        
        return Document(
            uuid=db_document.uuid,
            external_id=db_document.external_id,
            owner_id=db_document.owner_id,
            display_name=db_document.display_name,
            storage_version=db_document.storage_version,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
