from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List
import uuid
from datetime import datetime


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: uuid.UUID
    external_id: str
    display_name: str
    storage_version: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class DocumentDetailResponse(BaseModel):
    """Документ вместе с адресом для скачивания"""
    id: uuid.UUID
    external_id: str
    display_name: str
    url: str


class DocumentUploadResponse(BaseModel):
    """Схема ответа на загрузку"""
    external_id: str


class DocumentRenameRequest(BaseModel):
    """Схема для переименования документа"""
    new_name: str = Field(..., max_length=255)
    
    @field_validator('new_name')
    @classmethod
    def validate_new_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class DocumentStorageResponse(BaseModel):
    """Сведения о файле во внешнем хранилище"""
    external_id: str
    storage_version: Optional[str] = None
    size: Optional[int] = None
    content_type: Optional[str] = None
    last_modified: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str


def to_response(document) -> DocumentResponse:
    return DocumentResponse(
        id=document.uuid,
        external_id=document.external_id,
        display_name=document.display_name,
        storage_version=document.storage_version,
        created_at=document.created_at,
        updated_at=document.updated_at
    )


def to_response_list(documents) -> List[DocumentResponse]:
    return [to_response(doc) for doc in documents]
