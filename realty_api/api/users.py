"""
Realty API - Users API
Usuários e tipos de usuário
"""
from typing import Optional
from fastapi import APIRouter, Depends, status, Query

from realty_api.core.responses import success_response
from realty_api.schemas import UserCreate, UserUpdate, UserChangePassword
from realty_api.services import UserService, UserTypeService, get_user_service, get_user_type_service

router = APIRouter(prefix="/users", tags=["Users"])
user_types_router = APIRouter(prefix="/user-types", tags=["User Types"])


@user_types_router.get("")
async def list_user_types(service: UserTypeService = Depends(get_user_type_service)):
    """Lista os tipos de usuário"""
    user_types = await service.list_user_types()
    return success_response("User types retrieved successfully", [t.to_dict() for t in user_types])


@user_types_router.get("/{user_type_id}")
async def get_user_type(
    user_type_id: int,
    service: UserTypeService = Depends(get_user_type_service)
):
    """Retorna um tipo de usuário"""
    user_type = await service.get_user_type(user_type_id)
    return success_response("User type retrieved successfully", user_type.to_dict())


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreate,
    service: UserService = Depends(get_user_service)
):
    """Cria novo usuário"""
    user = await service.create_user(request)
    return success_response("User created successfully", user.to_dict(), status.HTTP_201_CREATED)


@router.get("")
async def list_users(
    id: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    phone: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    user_type_id: Optional[int] = Query(None),
    include_deleted: bool = Query(False),
    service: UserService = Depends(get_user_service)
):
    """Lista usuários com filtros"""
    users = await service.list_users(
        user_id=id,
        email=email,
        phone=phone,
        name=name,
        user_type_id=user_type_id,
        include_deleted=include_deleted
    )
    return success_response("Users retrieved successfully", [u.to_dict() for u in users])


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    include_deleted: bool = Query(False),
    service: UserService = Depends(get_user_service)
):
    """Retorna um usuário"""
    user = await service.get_user(user_id, include_deleted=include_deleted)
    return success_response("User retrieved successfully", user.to_dict())


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    """Atualiza usuário"""
    user = await service.update_user(user_id, request)
    return success_response("User updated successfully", user.to_dict())


@router.put("/{user_id}/password")
async def change_password(
    user_id: str,
    request: UserChangePassword,
    service: UserService = Depends(get_user_service)
):
    """Troca a senha do usuário"""
    await service.change_password(user_id, request)
    return success_response("Password changed successfully")


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service)
):
    """Remove usuário (soft delete)"""
    await service.delete_user(user_id)
    return success_response("User deleted successfully")
