import uuid
from datetime import datetime
from typing import Optional

from app.core.security import get_password_hash, verify_password


def normalize_email(email: str) -> str:
    return email.strip().lower()


class User:
    """Владелец документов и выделений"""
    
    def __init__(
        self,
        uuid: uuid.UUID,
        name: str,
        email: str,
        password_hash: str,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.name = name
        self.email = email
        self.password_hash = password_hash
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()
    
    def authenticate(self, password: str) -> bool:
        return verify_password(password, self.password_hash)
    
    @classmethod
    def create_user(cls, name: str, email: str, password: str) -> "User":
        """Новая учетная запись; пароль сразу хешируется"""
        return cls(
            uuid=uuid.uuid4(),
            name=name.strip(),
            email=normalize_email(email),
            password_hash=get_password_hash(password)
        )
    
    def __eq__(self, other) -> bool:
        return isinstance(other, User) and self.uuid == other.uuid
    
    def __repr__(self) -> str:
        return f"User(uuid={self.uuid}, email={self.email})"
