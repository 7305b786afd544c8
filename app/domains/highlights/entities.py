import math
import uuid
from dataclasses import dataclass, asdict, replace
from datetime import datetime
from typing import Optional

from app.core.exceptions import ValidationError

# Допустимое расхождение width/height с разностью координат, px
REGION_TOLERANCE = 0.01


@dataclass(frozen=True)
class Region:
    """Прямоугольник выделения в пикселях отрисованной страницы.

    Координаты отсчитываются от левого верхнего угла страницы при том
    масштабе, который был активен в момент выделения.
    """
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    height: float

    def validate(self) -> "Region":
        values = asdict(self)
        for name, value in values.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"Region.{name} must be a number")
            if not math.isfinite(value):
                raise ValidationError(f"Region.{name} must be finite")

        if self.x2 < self.x1 or self.y2 < self.y1:
            raise ValidationError("Region corners are inverted")
        if self.width < 0 or self.height < 0:
            raise ValidationError("Region size cannot be negative")
        if not math.isclose(self.width, self.x2 - self.x1, abs_tol=REGION_TOLERANCE):
            raise ValidationError("Region width must equal x2 - x1")
        if not math.isclose(self.height, self.y2 - self.y1, abs_tol=REGION_TOLERANCE):
            raise ValidationError("Region height must equal y2 - y1")
        return self

    def normalized(self) -> "Region":
        """Проверенная область, width и height пересчитаны из углов"""
        self.validate()
        return replace(self, width=self.x2 - self.x1, height=self.y2 - self.y1)


class Highlight:
    """Сущность выделения текста на странице документа"""
    
    def __init__(
        self,
        uuid: uuid.UUID,
        owner_id: uuid.UUID,
        document_id: uuid.UUID,
        text: str,
        page_number: int,
        region: Region,
        note: str = "",
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.owner_id = owner_id
        self.document_id = document_id
        self.text = text
        self.page_number = page_number
        self.region = region
        self.note = note
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()
    
    def update_note(self, note: Optional[str]) -> None:
        """Изменение заметки; None сбрасывает заметку"""
        self.note = note or ""
        self.updated_at = datetime.utcnow()
    
    @classmethod
    def create_highlight(
        cls,
        owner_id: uuid.UUID,
        document_id: uuid.UUID,
        text: str,
        page_number: int,
        region: Region
    ) -> "Highlight":
        """Создание нового выделения с проверкой полей"""
        if not text or not text.strip():
            raise ValidationError("Highlight text cannot be empty")
        if isinstance(page_number, bool) or not isinstance(page_number, int) or page_number < 1:
            raise ValidationError("Page number must be a positive integer")
        
        return cls(
            uuid=uuid.uuid4(),
            owner_id=owner_id,
            document_id=document_id,
            text=text,
            page_number=page_number,
            region=region.normalized()
        )
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Highlight):
            return False
        return self.uuid == other.uuid
    
    def __repr__(self) -> str:
        return f"Highlight(uuid={self.uuid}, document_id={self.document_id}, page={self.page_number})"
