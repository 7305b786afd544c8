from sqlalchemy import Column, String, ForeignKey, UUID
from sqlalchemy.orm import relationship

from app.db.base import BaseModel


class Document(BaseModel):
    __tablename__ = "documents"
    
    # Ключ файла во внешнем хранилище, единственный идентификатор для клиента
    external_id = Column(String(512), unique=True, index=True, nullable=False)
    owner_id = Column(UUID(as_uuid=True), ForeignKey("users.uuid"), index=True, nullable=False)
    display_name = Column(String(255), nullable=False)
    storage_version = Column(String(255), nullable=True)
    
    # Relationships
    owner = relationship("User", back_populates="owned_documents")
    highlights = relationship(
        "Highlight",
        back_populates="document",
        cascade="all, delete-orphan",
        passive_deletes=True
    )
