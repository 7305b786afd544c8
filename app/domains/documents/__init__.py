from app.domains.documents.entities import Document, normalize_display_name
from app.domains.documents.schemas import (
    DocumentResponse, DocumentDetailResponse, DocumentUploadResponse,
    DocumentRenameRequest, DocumentStorageResponse
)

__all__ = [
    "Document", "normalize_display_name",
    "DocumentResponse", "DocumentDetailResponse", "DocumentUploadResponse",
    "DocumentRenameRequest", "DocumentStorageResponse"
]
