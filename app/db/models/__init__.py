from app.db.models.user import User
from app.db.models.document import Document
from app.db.models.highlight import Highlight

__all__ = [
    "User",
    "Document",
    "Highlight"
]
