import uuid
from datetime import datetime
from typing import Optional

from app.core.exceptions import ValidationError

DISPLAY_NAME_MAX_LENGTH = 255
DEFAULT_DISPLAY_NAME = "document.pdf"


def normalize_display_name(name: Optional[str]) -> str:
    """Обрезка пробелов и проверка имени документа"""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name cannot be empty")
    if len(cleaned) > DISPLAY_NAME_MAX_LENGTH:
        raise ValidationError(f"Name cannot exceed {DISPLAY_NAME_MAX_LENGTH} characters")
    return cleaned


class Document:
    """Сущность документа домена Documents"""
    
    def __init__(
        self,
        uuid: uuid.UUID,
        external_id: str,
        owner_id: uuid.UUID,
        display_name: str,
        storage_version: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.external_id = external_id
        self.owner_id = owner_id
        self.display_name = display_name
        self.storage_version = storage_version
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()
    
    def rename(self, new_name: str) -> None:
        """Переименование документа"""
        self.display_name = normalize_display_name(new_name)
        self.updated_at = datetime.utcnow()
    
    @classmethod
    def register(
        cls,
        owner_id: uuid.UUID,
        external_id: str,
        display_name: str,
        storage_version: Optional[str] = None
    ) -> "Document":
        """Создание записи для уже загруженного файла"""
        if not external_id:
            raise ValidationError("External id is required")
        
        return cls(
            uuid=uuid.uuid4(),
            external_id=external_id,
            owner_id=owner_id,
            display_name=normalize_display_name(display_name),
            storage_version=storage_version
        )
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.uuid == other.uuid
    
    def __repr__(self) -> str:
        return f"Document(uuid={self.uuid}, external_id={self.external_id}, name={self.display_name})"
