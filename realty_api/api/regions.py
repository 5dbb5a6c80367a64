"""
Realty API - Regions API
Regiões e seus bairros
"""
from typing import Optional
from fastapi import APIRouter, Depends, status, Query

from realty_api.core.responses import success_response
from realty_api.schemas import RegionCreate, RegionUpdate, NeighborhoodIds
from realty_api.services import RegionService, get_region_service

router = APIRouter(prefix="/regions", tags=["Regions"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_region(
    request: RegionCreate,
    service: RegionService = Depends(get_region_service)
):
    """Cria região, opcionalmente já com bairros"""
    region = await service.create_region(request)
    region, neighborhoods = await service.get_region_detail(region.id, include_neighborhoods=True)
    return success_response(
        "Region created successfully", region.to_dict(neighborhoods), status.HTTP_201_CREATED
    )


@router.get("")
async def list_regions(
    name: Optional[str] = Query(None),
    include_neighborhoods: bool = Query(False),
    service: RegionService = Depends(get_region_service)
):
    """Lista regiões"""
    items = await service.list_regions(name=name, include_neighborhoods=include_neighborhoods)
    return success_response(
        "Regions retrieved successfully",
        [region.to_dict(neighborhoods) for region, neighborhoods in items]
    )


@router.get("/{region_id}")
async def get_region(
    region_id: str,
    include_neighborhoods: bool = Query(False),
    service: RegionService = Depends(get_region_service)
):
    """Retorna uma região"""
    region, neighborhoods = await service.get_region_detail(region_id, include_neighborhoods)
    return success_response("Region retrieved successfully", region.to_dict(neighborhoods))


@router.put("/{region_id}")
async def update_region(
    region_id: str,
    request: RegionUpdate,
    service: RegionService = Depends(get_region_service)
):
    """Atualiza região"""
    region = await service.update_region(region_id, request)
    return success_response("Region updated successfully", region.to_dict())


@router.put("/{region_id}/neighborhoods")
async def replace_region_neighborhoods(
    region_id: str,
    request: NeighborhoodIds,
    service: RegionService = Depends(get_region_service)
):
    """Substitui todos os bairros da região"""
    neighborhoods = await service.replace_neighborhoods(region_id, request.neighborhood_ids)
    return success_response(
        "Region neighborhoods updated successfully", [n.to_dict() for n in neighborhoods]
    )


@router.post("/{region_id}/neighborhoods")
async def add_region_neighborhoods(
    region_id: str,
    request: NeighborhoodIds,
    service: RegionService = Depends(get_region_service)
):
    """Adiciona bairros à região (os já vinculados são ignorados)"""
    neighborhoods = await service.add_neighborhoods(region_id, request.neighborhood_ids)
    return success_response(
        "Neighborhoods added to region successfully", [n.to_dict() for n in neighborhoods]
    )


@router.delete("/{region_id}/neighborhoods/{neighborhood_id}")
async def remove_region_neighborhood(
    region_id: str,
    neighborhood_id: str,
    service: RegionService = Depends(get_region_service)
):
    """Remove um bairro da região"""
    await service.remove_neighborhood(region_id, neighborhood_id)
    return success_response("Neighborhood removed from region successfully")


@router.get("/{region_id}/usage")
async def get_region_usage(
    region_id: str,
    service: RegionService = Depends(get_region_service)
):
    """Indica onde a região está sendo usada"""
    usage = await service.get_usage(region_id)
    return success_response("Region usage retrieved successfully", usage)


@router.delete("/{region_id}")
async def delete_region(
    region_id: str,
    service: RegionService = Depends(get_region_service)
):
    """Remove região (bloqueado enquanto estiver em uso)"""
    await service.delete_region(region_id)
    return success_response("Region deleted successfully")
