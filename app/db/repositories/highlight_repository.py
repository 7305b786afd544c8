from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, and_
import uuid

from app.db.models.highlight import Highlight as HighlightModel

if TYPE_CHECKING:
    from app.domains.highlights.entities import Highlight


class HighlightRepository:
    """Репозиторий для работы с выделениями"""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def create(self, highlight: "Highlight") -> "Highlight":
        """Создание нового выделения"""
        region = highlight.region
        db_highlight = HighlightModel(
            uuid=highlight.uuid,
            owner_id=highlight.owner_id,
            document_id=highlight.document_id,
            text=highlight.text,
            page_number=highlight.page_number,
            note=highlight.note,
            x1=region.x1,
            y1=region.y1,
            x2=region.x2,
            y2=region.y2,
            width=region.width,
            height=region.height,
            created_at=highlight.created_at,
            updated_at=highlight.updated_at
        )
        
        self.session.add(db_highlight)
        await self.session.commit()
        await self.session.refresh(db_highlight)
        return self._to_domain(db_highlight)
    
    async def get_owned(self, owner_id: uuid.UUID, highlight_uuid: uuid.UUID) -> Optional["Highlight"]:
        """Получение выделения по UUID и владельцу"""
        result = await self.session.execute(
            select(HighlightModel).where(
                and_(
                    HighlightModel.uuid == highlight_uuid,
                    HighlightModel.owner_id == owner_id
                )
            )
        )
        db_highlight = result.scalar_one_or_none()
        return self._to_domain(db_highlight) if db_highlight else None
    
    async def list_by_document(
        self,
        owner_id: uuid.UUID,
        document_id: uuid.UUID,
        text_filter: Optional[str] = None
    ) -> List["Highlight"]:
        """Выделения документа, при необходимости с фильтром по тексту"""
        query = select(HighlightModel).where(
            and_(
                HighlightModel.document_id == document_id,
                HighlightModel.owner_id == owner_id
            )
        )
        
        if text_filter:
            query = query.where(HighlightModel.text.icontains(text_filter, autoescape=True))
        
        result = await self.session.execute(
            query.order_by(HighlightModel.created_at.asc())
        )
        return [self._to_domain(h) for h in result.scalars().all()]
    
    async def update_note(self, highlight: "Highlight") -> Optional["Highlight"]:
        """Сохранение заметки"""
        stmt = (
            update(HighlightModel)
            .where(
                and_(
                    HighlightModel.uuid == highlight.uuid,
                    HighlightModel.owner_id == highlight.owner_id
                )
            )
            .values(
                note=highlight.note,
                updated_at=highlight.updated_at
            )
        )
        
        await self.session.execute(stmt)
        await self.session.commit()
        
        return await self.get_owned(highlight.owner_id, highlight.uuid)
    
    async def delete(self, highlight_uuid: uuid.UUID, owner_id: uuid.UUID) -> bool:
        """Удаление выделения"""
        stmt = delete(HighlightModel).where(
            and_(
                HighlightModel.uuid == highlight_uuid,
                HighlightModel.owner_id == owner_id
            )
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0
    
    async def delete_by_document(self, document_id: uuid.UUID, commit: bool = True) -> int:
        """Каскадное удаление всех выделений документа"""
        stmt = delete(HighlightModel).where(HighlightModel.document_id == document_id)
        result = await self.session.execute(stmt)
        if commit:
            await self.session.commit()
        return result.rowcount
    
    def _to_domain(self, db_highlight: HighlightModel) -> "Highlight":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.highlights.entities import Highlight, Region
        
        return Highlight(
            uuid=db_highlight.uuid,
            owner_id=db_highlight.owner_id,
            document_id=db_highlight.document_id,
            text=db_highlight.text,
            page_number=db_highlight.page_number,
            region=Region(
                x1=db_highlight.x1,
                y1=db_highlight.y1,
                x2=db_highlight.x2,
                y2=db_highlight.y2,
                width=db_highlight.width,
                height=db_highlight.height
            ),
            note=db_highlight.note,
            created_at=db_highlight.created_at,
            updated_at=db_highlight.updated_at
        )
