from app.domains.highlights.entities import Highlight, Region, REGION_TOLERANCE
from app.domains.highlights.schemas import (
    RegionSchema, HighlightCreate, HighlightNoteUpdate, HighlightResponse
)

__all__ = [
    "Highlight", "Region", "REGION_TOLERANCE",
    "RegionSchema", "HighlightCreate", "HighlightNoteUpdate", "HighlightResponse"
]
