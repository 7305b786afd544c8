from app.domains.identity.entities import User, normalize_email
from app.domains.identity.schemas import (
    UserBase, UserCreate, UserLogin, UserResponse, Token, AuthResponse
)

__all__ = [
    "User", "normalize_email",
    "UserBase", "UserCreate", "UserLogin", "UserResponse", "Token", "AuthResponse"
]
