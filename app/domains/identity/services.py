import logging
import uuid
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError
from app.core.security import create_access_token, verify_token
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import User
from app.domains.identity.schemas import UserCreate, UserLogin

logger = logging.getLogger(__name__)

Session = Tuple[str, User]


class IdentityService:
    """Регистрация, вход и разбор токена.

    Регистрация и вход возвращают пару (токен, пользователь): клиенту не
    нужен отдельный запрос за токеном после регистрации. Неизвестный email
    и неверный пароль при входе неразличимы.
    """
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)
    
    async def register_user(self, user_data: UserCreate) -> Session:
        if await self.user_repository.email_exists(user_data.email):
            raise ConflictError("Email already registered")
        
        user = await self.user_repository.create(
            User.create_user(
                name=user_data.name,
                email=user_data.email,
                password=user_data.password
            )
        )
        logger.info(f"Registered user {user.uuid}")
        return self._issue_token(user), user
    
    async def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        user = await self.user_repository.get_by_email(login_data.email)
        if user and user.authenticate(login_data.password):
            return user
        return None
    
    async def login_user(self, login_data: UserLogin) -> Optional[Session]:
        user = await self.authenticate_user(login_data)
        if user is None:
            logger.warning("Failed login attempt")
            return None
        return self._issue_token(user), user
    
    async def get_user_by_uuid(self, user_uuid: uuid.UUID) -> Optional[User]:
        return await self.user_repository.get_by_uuid(user_uuid)
    
    async def get_current_user_from_token(self, token: str) -> Optional[User]:
        """Пользователь из поля sub; None для неверного или просроченного токена"""
        subject = (verify_token(token) or {}).get("sub")
        if not subject:
            return None
        
        try:
            user_uuid = uuid.UUID(subject)
        except (TypeError, ValueError):
            return None
        
        return await self.get_user_by_uuid(user_uuid)
    
    def _issue_token(self, user: User) -> str:
        return create_access_token(data={"sub": str(user.uuid)})
