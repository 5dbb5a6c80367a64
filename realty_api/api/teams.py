"""
Realty API - Teams API
Equipes, seus membros e definição de líder
"""
from typing import Optional
from fastapi import APIRouter, Depends, status, Query

from realty_api.core.responses import success_response
from realty_api.models import TeamType
from realty_api.schemas import TeamCreate, TeamUpdate, SetLeaderRequest
from realty_api.services import TeamService, get_team_service

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_team(
    request: TeamCreate,
    service: TeamService = Depends(get_team_service)
):
    """Cria equipe"""
    team = await service.create_team(request)
    return success_response("Team created successfully", team.to_dict(), status.HTTP_201_CREATED)


@router.get("")
async def list_teams(
    name: Optional[str] = Query(None),
    team_type: Optional[TeamType] = Query(None),
    include_members: bool = Query(False),
    service: TeamService = Depends(get_team_service)
):
    """Lista equipes"""
    items = await service.list_teams(
        name=name,
        team_type=team_type.value if team_type else None,
        include_members=include_members
    )
    return success_response(
        "Teams retrieved successfully",
        [team.to_dict(members) for team, members in items]
    )


@router.get("/{team_id}")
async def get_team(
    team_id: str,
    include_members: bool = Query(False),
    service: TeamService = Depends(get_team_service)
):
    """Retorna uma equipe"""
    team, members = await service.get_team_detail(team_id, include_members)
    return success_response("Team retrieved successfully", team.to_dict(members))


@router.put("/{team_id}")
async def update_team(
    team_id: str,
    request: TeamUpdate,
    service: TeamService = Depends(get_team_service)
):
    """Atualiza equipe"""
    team = await service.update_team(team_id, request)
    return success_response("Team updated successfully", team.to_dict())


@router.delete("/{team_id}")
async def delete_team(
    team_id: str,
    service: TeamService = Depends(get_team_service)
):
    """Remove equipe e seus membros"""
    await service.delete_team(team_id)
    return success_response("Team deleted successfully")


@router.get("/{team_id}/members")
async def list_team_members(
    team_id: str,
    active: Optional[bool] = Query(None),
    service: TeamService = Depends(get_team_service)
):
    """Lista membros da equipe"""
    members = await service.list_team_members(team_id, active=active)
    return success_response("Team members retrieved successfully", [m.to_dict() for m in members])


@router.post("/{team_id}/leader")
async def set_team_leader(
    team_id: str,
    request: SetLeaderRequest,
    service: TeamService = Depends(get_team_service)
):
    """Define o líder da equipe"""
    member = await service.set_leader(team_id, request.member_id)
    return success_response("Team leader set successfully", member.to_dict())
