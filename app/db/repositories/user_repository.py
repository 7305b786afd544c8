from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, exists
from sqlalchemy.exc import IntegrityError
import uuid

from app.core.exceptions import ConflictError
from app.db.models.user import User as UserModel
from app.domains.identity.entities import User, normalize_email


class UserRepository:
    """Учетные записи. Email хранится в нижнем регистре"""
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def create(self, user: User) -> User:
        row = UserModel(
            uuid=user.uuid,
            name=user.name,
            email=normalize_email(user.email),
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at
        )
        
        self.session.add(row)
        try:
            await self.session.commit()
        except IntegrityError:
            # Гонка двух регистраций с одним email
            await self.session.rollback()
            raise ConflictError("Email already registered")
        await self.session.refresh(row)
        return self._to_domain(row)
    
    async def _first(self, *criteria) -> Optional[User]:
        result = await self.session.execute(select(UserModel).where(*criteria))
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row else None
    
    async def get_by_uuid(self, user_uuid: uuid.UUID) -> Optional[User]:
        return await self._first(UserModel.uuid == user_uuid)
    
    async def get_by_email(self, email: str) -> Optional[User]:
        """Поиск по email без учета регистра"""
        return await self._first(UserModel.email == normalize_email(email))
    
    async def email_exists(self, email: str) -> bool:
        result = await self.session.execute(
            select(exists().where(UserModel.email == normalize_email(email)))
        )
        return bool(result.scalar())
    
    def _to_domain(self, row: UserModel) -> User:
        return User(
            uuid=row.uuid,
            name=row.name,
            email=row.email,
            password_hash=row.password_hash,
            created_at=row.created_at,
            updated_at=row.updated_at
        )
