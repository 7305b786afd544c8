from sqlalchemy import Column, Text, Integer, Float, ForeignKey, UUID, CheckConstraint
from sqlalchemy.orm import relationship

from app.db.base import BaseModel


class Highlight(BaseModel):
    __tablename__ = "highlights"
    __table_args__ = (
        CheckConstraint("page_number >= 1", name="ck_highlights_page_number"),
        CheckConstraint("width >= 0 AND height >= 0", name="ck_highlights_region_size"),
    )
    
    owner_id = Column(UUID(as_uuid=True), ForeignKey("users.uuid"), index=True, nullable=False)
    document_id = Column(
        UUID(as_uuid=True),
        ForeignKey("documents.uuid", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    text = Column(Text, nullable=False)
    page_number = Column(Integer, nullable=False)
    note = Column(Text, nullable=False, default="")
    
    # Область выделения в пикселях отрисованной страницы
    x1 = Column(Float, nullable=False)
    y1 = Column(Float, nullable=False)
    x2 = Column(Float, nullable=False)
    y2 = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    
    # Relationships
    document = relationship("Document", back_populates="highlights")
    owner = relationship("User")
