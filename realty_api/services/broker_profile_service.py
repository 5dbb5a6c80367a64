"""
Realty API - Broker Profile Service
Perfis de corretor, regiões/bairros de atuação e ciclo de remoção lógica
"""
import logging
from datetime import datetime
from typing import List

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.core.errors import BadRequestError, NotFoundError
from realty_api.database import get_db
from realty_api.models import BrokerProfile, Neighborhood, Region
from realty_api.repositories import BrokerProfileRepository, NeighborhoodRepository, RegionRepository
from realty_api.schemas import BrokerProfileCreate, BrokerProfileUpdate

logger = logging.getLogger(__name__)


class BrokerProfileService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.profiles = BrokerProfileRepository(session)
        self.regions = RegionRepository(session)
        self.neighborhoods = NeighborhoodRepository(session)

    async def get_profile(self, profile_id: str, include_deleted: bool = False) -> BrokerProfile:
        profile = await self.profiles.get(profile_id, include_deleted=include_deleted)
        if not profile:
            raise NotFoundError(f"Broker profile with ID {profile_id} not found")
        return profile

    async def _get_mutable_profile(self, profile_id: str) -> BrokerProfile:
        profile = await self.get_profile(profile_id, include_deleted=True)
        if profile.deleted:
            raise BadRequestError("Cannot update a deleted profile")
        return profile

    async def _ensure_regions_exist(self, region_ids: List[str]):
        missing = await self.regions.first_missing_id(region_ids)
        if missing:
            raise NotFoundError(f"Region with ID {missing} not found")

    async def _ensure_neighborhoods_exist(self, neighborhood_ids: List[str]):
        missing = await self.neighborhoods.first_missing_id(neighborhood_ids)
        if missing:
            raise NotFoundError(f"Neighborhood with ID {missing} not found")

    async def to_dict(self, profile: BrokerProfile, include_regions: bool = False, include_neighborhoods: bool = False) -> dict:
        regions = await self.profiles.list_regions(profile.id) if include_regions else None
        neighborhoods = await self.profiles.list_neighborhoods(profile.id) if include_neighborhoods else None
        return profile.to_dict(regions=regions, neighborhoods=neighborhoods)

    async def list_profiles(self, **filters) -> List[BrokerProfile]:
        return await self.profiles.list(**filters)

    async def create_profile(self, data: BrokerProfileCreate) -> BrokerProfile:
        region_ids = data.region_ids or []
        neighborhood_ids = data.neighborhood_ids or []
        await self._ensure_regions_exist(region_ids)
        await self._ensure_neighborhoods_exist(neighborhood_ids)

        profile = BrokerProfile(**data.model_dump(exclude={"region_ids", "neighborhood_ids"}, mode="json"))
        profile = await self.profiles.add(profile)

        if region_ids:
            await self.profiles.regions.add(profile.id, region_ids)
        if neighborhood_ids:
            await self.profiles.neighborhoods.add(profile.id, neighborhood_ids)
        await self.session.commit()

        logger.info(f"Broker profile created: {profile.id} (CRECI {profile.creci_number})")
        return profile

    async def update_profile(self, profile_id: str, data: BrokerProfileUpdate) -> BrokerProfile:
        profile = await self._get_mutable_profile(profile_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True, mode="json")

        profile = await self.profiles.update(profile, update_data)
        await self.session.commit()

        logger.info(f"Broker profile updated: {profile_id}")
        return profile

    async def delete_profile(self, profile_id: str) -> None:
        profile = await self.get_profile(profile_id, include_deleted=True)
        if profile.deleted:
            raise BadRequestError("Broker profile is already deleted")

        await self.profiles.update(profile, {"deleted": True, "deleted_at": datetime.utcnow()})
        await self.session.commit()

        logger.info(f"Broker profile soft-deleted: {profile_id}")

    async def restore_profile(self, profile_id: str) -> BrokerProfile:
        profile = await self.get_profile(profile_id, include_deleted=True)
        if not profile.deleted:
            raise BadRequestError("Broker profile is not deleted")

        profile = await self.profiles.update(profile, {"deleted": False, "deleted_at": None})
        await self.session.commit()

        logger.info(f"Broker profile restored: {profile_id}")
        return profile

    # Regiões

    async def list_regions(self, profile_id: str) -> List[Region]:
        await self.get_profile(profile_id)
        return await self.profiles.list_regions(profile_id)

    async def replace_regions(self, profile_id: str, region_ids: List[str]) -> List[Region]:
        await self._get_mutable_profile(profile_id)
        await self._ensure_regions_exist(region_ids)

        await self.profiles.regions.replace(profile_id, region_ids)
        await self.session.commit()

        logger.info(f"Broker profile {profile_id} regions replaced ({len(region_ids)})")
        return await self.profiles.list_regions(profile_id)

    async def add_regions(self, profile_id: str, region_ids: List[str]) -> List[Region]:
        await self._get_mutable_profile(profile_id)
        await self._ensure_regions_exist(region_ids)

        added = await self.profiles.regions.add(profile_id, region_ids)
        await self.session.commit()

        logger.info(f"Broker profile {profile_id}: {added} regions added")
        return await self.profiles.list_regions(profile_id)

    async def remove_region(self, profile_id: str, region_id: str) -> None:
        await self._get_mutable_profile(profile_id)

        if not await self.profiles.regions.remove(profile_id, region_id):
            raise NotFoundError(f"Region {region_id} is not associated with broker profile {profile_id}")
        await self.session.commit()

        logger.info(f"Region {region_id} removed from broker profile {profile_id}")

    # Bairros

    async def list_neighborhoods(self, profile_id: str) -> List[Neighborhood]:
        await self.get_profile(profile_id)
        return await self.profiles.list_neighborhoods(profile_id)

    async def replace_neighborhoods(self, profile_id: str, neighborhood_ids: List[str]) -> List[Neighborhood]:
        await self._get_mutable_profile(profile_id)
        await self._ensure_neighborhoods_exist(neighborhood_ids)

        await self.profiles.neighborhoods.replace(profile_id, neighborhood_ids)
        await self.session.commit()

        logger.info(f"Broker profile {profile_id} neighborhoods replaced ({len(neighborhood_ids)})")
        return await self.profiles.list_neighborhoods(profile_id)

    async def add_neighborhoods(self, profile_id: str, neighborhood_ids: List[str]) -> List[Neighborhood]:
        await self._get_mutable_profile(profile_id)
        await self._ensure_neighborhoods_exist(neighborhood_ids)

        added = await self.profiles.neighborhoods.add(profile_id, neighborhood_ids)
        await self.session.commit()

        logger.info(f"Broker profile {profile_id}: {added} neighborhoods added")
        return await self.profiles.list_neighborhoods(profile_id)

    async def remove_neighborhood(self, profile_id: str, neighborhood_id: str) -> None:
        await self._get_mutable_profile(profile_id)

        if not await self.profiles.neighborhoods.remove(profile_id, neighborhood_id):
            raise NotFoundError(
                f"Neighborhood {neighborhood_id} is not associated with broker profile {profile_id}"
            )
        await self.session.commit()

        logger.info(f"Neighborhood {neighborhood_id} removed from broker profile {profile_id}")


def get_broker_profile_service(db: AsyncSession = Depends(get_db)) -> BrokerProfileService:
    return BrokerProfileService(db)
