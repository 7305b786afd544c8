import math
import uuid
from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from app.domains.highlights.entities import Region, REGION_TOLERANCE


class RegionSchema(BaseModel):
    """Прямоугольник выделения {x1, y1, x2, y2, width, height}.

    width и height допускают расхождение с x2 - x1 и y2 - y1 до 0.01 px;
    при сохранении они пересчитываются из углов.
    """
    x1: float
    y1: float
    x2: float
    y2: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    
    model_config = ConfigDict(extra="forbid")
    
    @model_validator(mode="after")
    def validate_geometry(self):
        for name in ("x1", "y1", "x2", "y2", "width", "height"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if not math.isclose(self.width, self.x2 - self.x1, abs_tol=REGION_TOLERANCE):
            raise ValueError("width must equal x2 - x1")
        if not math.isclose(self.height, self.y2 - self.y1, abs_tol=REGION_TOLERANCE):
            raise ValueError("height must equal y2 - y1")
        return self
    
    def to_region(self) -> Region:
        return Region(
            x1=self.x1, y1=self.y1, x2=self.x2, y2=self.y2,
            width=self.width, height=self.height
        )


class HighlightCreate(BaseModel):
    """Схема для создания выделения"""
    document_external_id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    page_number: int = Field(..., ge=1)
    region: RegionSchema
    
    @field_validator('text')
    @classmethod
    def validate_text(cls, v):
        if not v.strip():
            raise ValueError('Highlight text cannot be empty')
        return v


class HighlightNoteUpdate(BaseModel):
    """Схема для изменения заметки"""
    note: Optional[str] = None


class HighlightResponse(BaseModel):
    """Схема для ответа с данными выделения"""
    id: uuid.UUID
    owner_id: uuid.UUID
    document_id: uuid.UUID
    text: str
    page_number: int
    region: RegionSchema
    note: str
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str


def to_response(highlight) -> HighlightResponse:
    region = highlight.region
    return HighlightResponse(
        id=highlight.uuid,
        owner_id=highlight.owner_id,
        document_id=highlight.document_id,
        text=highlight.text,
        page_number=highlight.page_number,
        region=RegionSchema(
            x1=region.x1, y1=region.y1, x2=region.x2, y2=region.y2,
            width=region.width, height=region.height
        ),
        note=highlight.note,
        created_at=highlight.created_at,
        updated_at=highlight.updated_at
    )


def to_response_list(highlights) -> List[HighlightResponse]:
    return [to_response(h) for h in highlights]
