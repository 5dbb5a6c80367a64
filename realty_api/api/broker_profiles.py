"""
Realty API - Broker Profiles API
Perfis de corretor e suas regiões/bairros de atuação
"""
from typing import Optional
from fastapi import APIRouter, Depends, status, Query

from realty_api.core.responses import success_response
from realty_api.models import BrokerType, CreciType
from realty_api.schemas import BrokerProfileCreate, BrokerProfileUpdate, RegionIds, NeighborhoodIds
from realty_api.services import BrokerProfileService, get_broker_profile_service

router = APIRouter(prefix="/broker-profiles", tags=["Broker Profiles"])

MAX_PAGE_SIZE = 100


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_broker_profile(
    request: BrokerProfileCreate,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Cria perfil de corretor"""
    profile = await service.create_profile(request)
    data = await service.to_dict(profile, include_regions=True, include_neighborhoods=True)
    return success_response("Broker profile created successfully", data, status.HTTP_201_CREATED)


@router.get("")
async def list_broker_profiles(
    type: Optional[BrokerType] = Query(None),
    creci_type: Optional[CreciType] = Query(None),
    classification: Optional[int] = Query(None),
    region_id: Optional[str] = Query(None),
    neighborhood_id: Optional[str] = Query(None),
    include_regions: bool = Query(False),
    include_neighborhoods: bool = Query(False),
    include_deleted: bool = Query(False),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Lista perfis de corretor (paginado)"""
    profiles = await service.list_profiles(
        type=type.value if type else None,
        creci_type=creci_type.value if creci_type else None,
        classification=classification,
        region_id=region_id,
        neighborhood_id=neighborhood_id,
        include_deleted=include_deleted,
        page=page,
        limit=min(limit, MAX_PAGE_SIZE)
    )
    data = [
        await service.to_dict(p, include_regions, include_neighborhoods)
        for p in profiles
    ]
    return success_response("Broker profiles retrieved successfully", data)


@router.get("/{profile_id}")
async def get_broker_profile(
    profile_id: str,
    include_regions: bool = Query(False),
    include_neighborhoods: bool = Query(False),
    include_deleted: bool = Query(False),
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Retorna um perfil de corretor"""
    profile = await service.get_profile(profile_id, include_deleted=include_deleted)
    data = await service.to_dict(profile, include_regions, include_neighborhoods)
    return success_response("Broker profile retrieved successfully", data)


@router.put("/{profile_id}")
async def update_broker_profile(
    profile_id: str,
    request: BrokerProfileUpdate,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Atualiza perfil de corretor"""
    profile = await service.update_profile(profile_id, request)
    return success_response("Broker profile updated successfully", profile.to_dict())


@router.delete("/{profile_id}")
async def delete_broker_profile(
    profile_id: str,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Remove perfil (soft delete)"""
    await service.delete_profile(profile_id)
    return success_response("Broker profile deleted successfully")


@router.post("/{profile_id}/restore")
async def restore_broker_profile(
    profile_id: str,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Restaura perfil removido"""
    profile = await service.restore_profile(profile_id)
    return success_response("Broker profile restored successfully", profile.to_dict())


# =====================================================
# REGIÕES
# =====================================================

@router.get("/{profile_id}/regions")
async def list_broker_regions(
    profile_id: str,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Lista regiões do perfil"""
    regions = await service.list_regions(profile_id)
    return success_response("Broker regions retrieved successfully", [r.to_dict() for r in regions])


@router.put("/{profile_id}/regions")
async def replace_broker_regions(
    profile_id: str,
    request: RegionIds,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Substitui as regiões do perfil"""
    regions = await service.replace_regions(profile_id, request.region_ids)
    return success_response("Broker regions updated successfully", [r.to_dict() for r in regions])


@router.post("/{profile_id}/regions")
async def add_broker_regions(
    profile_id: str,
    request: RegionIds,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Adiciona regiões ao perfil"""
    regions = await service.add_regions(profile_id, request.region_ids)
    return success_response("Regions added to broker profile successfully", [r.to_dict() for r in regions])


@router.delete("/{profile_id}/regions/{region_id}")
async def remove_broker_region(
    profile_id: str,
    region_id: str,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Remove uma região do perfil"""
    await service.remove_region(profile_id, region_id)
    return success_response("Region removed from broker profile successfully")


# =====================================================
# BAIRROS
# =====================================================

@router.get("/{profile_id}/neighborhoods")
async def list_broker_neighborhoods(
    profile_id: str,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Lista bairros do perfil"""
    neighborhoods = await service.list_neighborhoods(profile_id)
    return success_response(
        "Broker neighborhoods retrieved successfully", [n.to_dict() for n in neighborhoods]
    )


@router.put("/{profile_id}/neighborhoods")
async def replace_broker_neighborhoods(
    profile_id: str,
    request: NeighborhoodIds,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Substitui os bairros do perfil"""
    neighborhoods = await service.replace_neighborhoods(profile_id, request.neighborhood_ids)
    return success_response(
        "Broker neighborhoods updated successfully", [n.to_dict() for n in neighborhoods]
    )


@router.post("/{profile_id}/neighborhoods")
async def add_broker_neighborhoods(
    profile_id: str,
    request: NeighborhoodIds,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Adiciona bairros ao perfil"""
    neighborhoods = await service.add_neighborhoods(profile_id, request.neighborhood_ids)
    return success_response(
        "Neighborhoods added to broker profile successfully", [n.to_dict() for n in neighborhoods]
    )


@router.delete("/{profile_id}/neighborhoods/{neighborhood_id}")
async def remove_broker_neighborhood(
    profile_id: str,
    neighborhood_id: str,
    service: BrokerProfileService = Depends(get_broker_profile_service)
):
    """Remove um bairro do perfil"""
    await service.remove_neighborhood(profile_id, neighborhood_id)
    return success_response("Neighborhood removed from broker profile successfully")
