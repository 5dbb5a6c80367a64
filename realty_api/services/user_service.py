"""
Realty API - User Service
Cadastro de usuários, troca de senha e remoção lógica
"""
import logging
from datetime import datetime
from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.core.errors import BadRequestError, ConflictError, NotFoundError, ValidationError
from realty_api.core.security import get_password_hash, verify_password
from realty_api.database import get_db
from realty_api.models import User, UserType
from realty_api.repositories import UserRepository, UserTypeRepository
from realty_api.schemas import UserChangePassword, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserTypeService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_types = UserTypeRepository(session)

    async def list_user_types(self) -> List[UserType]:
        return await self.user_types.list()

    async def get_user_type(self, user_type_id: int) -> UserType:
        user_type = await self.user_types.get_by_id(user_type_id)
        if not user_type:
            raise NotFoundError(f"User type with ID {user_type_id} not found")
        return user_type


class UserService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)
        self.user_types = UserTypeRepository(session)

    async def _ensure_user_type(self, user_type_id: int):
        if not await self.user_types.get_by_id(user_type_id):
            raise NotFoundError("User type not found")

    async def _ensure_email_available(self, email: str):
        # Emails de usuários removidos continuam reservados
        if await self.users.get_by_email(email):
            raise ConflictError("Email already in use")

    async def create_user(self, data: UserCreate) -> User:
        await self._ensure_email_available(data.email)
        await self._ensure_user_type(data.user_type_id)

        user = User(
            name=data.name,
            email=data.email,
            password_hash=get_password_hash(data.password),
            phone=data.phone,
            user_type_id=data.user_type_id
        )
        user = await self.users.add(user)
        await self.session.commit()

        logger.info(f"User created: {user.email} ({user.id})")
        return user

    async def get_user(self, user_id: str, include_deleted: bool = False) -> User:
        user = await self.users.get(user_id, include_deleted=include_deleted)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def list_users(self, **filters) -> List[User]:
        return await self.users.list(**filters)

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        user = await self.get_user(user_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in update_data and update_data["email"] != user.email:
            await self._ensure_email_available(update_data["email"])
        if "user_type_id" in update_data:
            await self._ensure_user_type(update_data["user_type_id"])

        user = await self.users.update(user, update_data)
        await self.session.commit()

        logger.info(f"User updated: {user.id}")
        return user

    async def change_password(self, user_id: str, data: UserChangePassword) -> None:
        user = await self.get_user(user_id)

        if data.new_password != data.confirm_password:
            raise ValidationError("New password and confirmation do not match")

        if not verify_password(data.current_password, user.password_hash):
            logger.warning(f"Wrong current password for user {user_id}")
            raise BadRequestError("Current password is incorrect")

        await self.users.update(user, {"password_hash": get_password_hash(data.new_password)})
        await self.session.commit()

        logger.info(f"Password changed for user {user_id}")

    async def delete_user(self, user_id: str) -> None:
        user = await self.get_user(user_id)

        await self.users.update(user, {"deleted": True, "deleted_at": datetime.utcnow()})
        await self.session.commit()

        logger.info(f"User soft-deleted: {user_id}")


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_user_type_service(db: AsyncSession = Depends(get_db)) -> UserTypeService:
    return UserTypeService(db)
