"""
Realty API - Members API
"""
from typing import Optional
from fastapi import APIRouter, Depends, status, Query

from realty_api.core.responses import success_response
from realty_api.schemas import MemberCreate, MemberUpdate, MemberStatusUpdate
from realty_api.services import MemberService, get_member_service

router = APIRouter(prefix="/members", tags=["Members"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_member(
    request: MemberCreate,
    service: MemberService = Depends(get_member_service)
):
    """Cria membro"""
    member = await service.create_member(request)
    return success_response("Member created successfully", member.to_dict(), status.HTTP_201_CREATED)


@router.get("")
async def list_members(
    name: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    is_leader: Optional[bool] = Query(None),
    team_id: Optional[str] = Query(None),
    active: Optional[bool] = Query(None),
    service: MemberService = Depends(get_member_service)
):
    """Lista membros com filtros"""
    members = await service.list_members(
        name=name,
        email=email,
        is_leader=is_leader,
        team_id=team_id,
        active=active
    )
    return success_response("Members retrieved successfully", [m.to_dict() for m in members])


@router.get("/{member_id}")
async def get_member(
    member_id: str,
    include_team: bool = Query(False),
    service: MemberService = Depends(get_member_service)
):
    """Retorna um membro"""
    member, team = await service.get_member_detail(member_id, include_team)
    return success_response("Member retrieved successfully", member.to_dict(team))


@router.put("/{member_id}")
async def update_member(
    member_id: str,
    request: MemberUpdate,
    service: MemberService = Depends(get_member_service)
):
    """Atualiza membro"""
    member = await service.update_member(member_id, request)
    return success_response("Member updated successfully", member.to_dict())


@router.patch("/{member_id}/status")
async def update_member_status(
    member_id: str,
    request: MemberStatusUpdate,
    service: MemberService = Depends(get_member_service)
):
    """Ativa ou desativa membro"""
    member = await service.update_status(member_id, request.active)
    return success_response("Member status updated successfully", member.to_dict())


@router.delete("/{member_id}")
async def delete_member(
    member_id: str,
    service: MemberService = Depends(get_member_service)
):
    """Remove membro"""
    await service.delete_member(member_id)
    return success_response("Member deleted successfully")
