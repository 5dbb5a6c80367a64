"""
Realty API - User Repositories
"""
from typing import List, Optional

from sqlalchemy import select

from realty_api.models import User, UserType
from .base import BaseRepository


class UserTypeRepository(BaseRepository):
    model = UserType

    async def list(self) -> List[UserType]:
        result = await self.session.execute(select(UserType).order_by(UserType.id))
        return list(result.scalars().all())


class UserRepository(BaseRepository):
    model = User

    async def get(self, user_id: str, include_deleted: bool = False) -> Optional[User]:
        query = select(User).where(User.id == user_id)
        if not include_deleted:
            query = query.where(User.deleted == False)  # noqa: E712
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Busca por email incluindo usuários removidos"""
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def list(
        self,
        user_id: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        name: Optional[str] = None,
        user_type_id: Optional[int] = None,
        include_deleted: bool = False
    ) -> List[User]:
        query = select(User)

        if user_id:
            query = query.where(User.id == user_id)
        if email:
            query = query.where(User.email == email)
        if phone:
            query = query.where(User.phone == phone)
        if name:
            query = query.where(User.name.ilike(f"%{name}%"))
        if user_type_id is not None:
            query = query.where(User.user_type_id == user_type_id)
        if not include_deleted:
            query = query.where(User.deleted == False)  # noqa: E712

        result = await self.session.execute(query.order_by(User.name))
        return list(result.scalars().all())
