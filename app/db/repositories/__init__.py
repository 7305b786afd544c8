from app.db.repositories.user_repository import UserRepository
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.highlight_repository import HighlightRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
    "HighlightRepository"
]
