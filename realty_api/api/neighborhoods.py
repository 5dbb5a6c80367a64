"""
Realty API - Neighborhoods API
"""
from typing import Optional
from fastapi import APIRouter, Depends, status, Query

from realty_api.core.responses import success_response
from realty_api.schemas import NeighborhoodCreate, NeighborhoodBatchCreate, NeighborhoodUpdate
from realty_api.services import NeighborhoodService, get_neighborhood_service

router = APIRouter(prefix="/neighborhoods", tags=["Neighborhoods"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_neighborhood(
    request: NeighborhoodCreate,
    service: NeighborhoodService = Depends(get_neighborhood_service)
):
    """Cria bairro"""
    neighborhood = await service.create_neighborhood(request)
    return success_response(
        "Neighborhood created successfully", neighborhood.to_dict(), status.HTTP_201_CREATED
    )


@router.post("/batch", status_code=status.HTTP_201_CREATED)
async def create_neighborhoods(
    request: NeighborhoodBatchCreate,
    service: NeighborhoodService = Depends(get_neighborhood_service)
):
    """Cria vários bairros de uma cidade"""
    neighborhoods = await service.create_many(request)
    return success_response(
        f"{len(neighborhoods)} neighborhoods created successfully",
        [n.to_dict() for n in neighborhoods],
        status.HTTP_201_CREATED
    )


@router.get("")
async def list_neighborhoods(
    name: Optional[str] = Query(None),
    city: Optional[str] = Query(None),
    service: NeighborhoodService = Depends(get_neighborhood_service)
):
    """Lista bairros"""
    neighborhoods = await service.list_neighborhoods(name=name, city=city)
    return success_response("Neighborhoods retrieved successfully", [n.to_dict() for n in neighborhoods])


@router.get("/{neighborhood_id}")
async def get_neighborhood(
    neighborhood_id: str,
    service: NeighborhoodService = Depends(get_neighborhood_service)
):
    """Retorna um bairro"""
    neighborhood = await service.get_neighborhood(neighborhood_id)
    return success_response("Neighborhood retrieved successfully", neighborhood.to_dict())


@router.put("/{neighborhood_id}")
async def update_neighborhood(
    neighborhood_id: str,
    request: NeighborhoodUpdate,
    service: NeighborhoodService = Depends(get_neighborhood_service)
):
    """Atualiza bairro"""
    neighborhood = await service.update_neighborhood(neighborhood_id, request)
    return success_response("Neighborhood updated successfully", neighborhood.to_dict())


@router.get("/{neighborhood_id}/usage")
async def get_neighborhood_usage(
    neighborhood_id: str,
    service: NeighborhoodService = Depends(get_neighborhood_service)
):
    """Indica onde o bairro está sendo usado"""
    usage = await service.get_usage(neighborhood_id)
    return success_response("Neighborhood usage retrieved successfully", usage)


@router.delete("/{neighborhood_id}")
async def delete_neighborhood(
    neighborhood_id: str,
    service: NeighborhoodService = Depends(get_neighborhood_service)
):
    """Remove bairro (bloqueado enquanto estiver em uso)"""
    await service.delete_neighborhood(neighborhood_id)
    return success_response("Neighborhood deleted successfully")
