"""
Realty API - Neighborhood / Region Services
Cadastro de bairros e regiões, vínculos entre eles e verificação de uso
"""
import logging
from typing import List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.core.errors import ConflictError, ForbiddenError, NotFoundError
from realty_api.database import get_db
from realty_api.models import Neighborhood, Region
from realty_api.repositories import NeighborhoodRepository, RegionRepository
from realty_api.schemas import (
    NeighborhoodBatchCreate,
    NeighborhoodCreate,
    NeighborhoodUpdate,
    RegionCreate,
    RegionUpdate,
    UsageResponse
)

logger = logging.getLogger(__name__)


class NeighborhoodService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.neighborhoods = NeighborhoodRepository(session)

    async def get_neighborhood(self, neighborhood_id: str) -> Neighborhood:
        neighborhood = await self.neighborhoods.get_by_id(neighborhood_id)
        if not neighborhood:
            raise NotFoundError(f"Neighborhood with ID {neighborhood_id} not found")
        return neighborhood

    async def list_neighborhoods(self, name: Optional[str] = None, city: Optional[str] = None) -> List[Neighborhood]:
        return await self.neighborhoods.list(name=name, city=city)

    async def create_neighborhood(self, data: NeighborhoodCreate) -> Neighborhood:
        if await self.neighborhoods.get_by_name_and_city(data.name, data.city):
            raise ConflictError(f"Neighborhood {data.name} already exists in {data.city}")

        neighborhood = await self.neighborhoods.add(Neighborhood(name=data.name, city=data.city))
        await self.session.commit()

        logger.info(f"Neighborhood created: {neighborhood.name}/{neighborhood.city}")
        return neighborhood

    async def create_many(self, data: NeighborhoodBatchCreate) -> List[Neighborhood]:
        """Tudo ou nada: qualquer nome repetido aborta o lote inteiro"""
        names = data.neighborhoods

        duplicated = sorted({name for name in names if names.count(name) > 1})
        existing = await self.neighborhoods.existing_names(data.city, names)
        conflicts = sorted(set(duplicated) | set(existing))

        if conflicts:
            logger.warning(f"Batch create rejected for {data.city}: {conflicts}")
            raise ConflictError(
                f"The following neighborhoods already exist in {data.city}: {', '.join(conflicts)}",
                details=conflicts
            )

        created = await self.neighborhoods.add_many(
            [Neighborhood(name=name, city=data.city) for name in names]
        )
        await self.session.commit()

        logger.info(f"{len(created)} neighborhoods created in {data.city}")
        return created

    async def update_neighborhood(self, neighborhood_id: str, data: NeighborhoodUpdate) -> Neighborhood:
        neighborhood = await self.get_neighborhood(neighborhood_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        name = update_data.get("name", neighborhood.name)
        city = update_data.get("city", neighborhood.city)
        if (name, city) != (neighborhood.name, neighborhood.city):
            other = await self.neighborhoods.get_by_name_and_city(name, city)
            if other and other.id != neighborhood.id:
                raise ConflictError(f"Neighborhood {name} already exists in {city}")

        neighborhood = await self.neighborhoods.update(neighborhood, update_data)
        await self.session.commit()

        logger.info(f"Neighborhood updated: {neighborhood.id}")
        return neighborhood

    async def get_usage(self, neighborhood_id: str) -> UsageResponse:
        await self.get_neighborhood(neighborhood_id)

        used_in = []
        if await self.neighborhoods.regions.count_for_owner(neighborhood_id):
            used_in.append("regions")
        if await self.neighborhoods.brokers.count_for_owner(neighborhood_id):
            used_in.append("broker_profiles")

        return UsageResponse(is_used=bool(used_in), used_in=used_in)

    async def delete_neighborhood(self, neighborhood_id: str) -> None:
        neighborhood = await self.get_neighborhood(neighborhood_id)

        usage = await self.get_usage(neighborhood_id)
        if usage.is_used:
            logger.warning(f"Neighborhood {neighborhood_id} in use: {usage.used_in}")
            raise ForbiddenError(
                f"Cannot delete neighborhood because it is being used in: {', '.join(usage.used_in)}"
            )

        await self.neighborhoods.delete(neighborhood)
        await self.session.commit()

        logger.info(f"Neighborhood deleted: {neighborhood_id}")


class RegionService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.regions = RegionRepository(session)
        self.neighborhoods = NeighborhoodRepository(session)

    async def get_region(self, region_id: str) -> Region:
        region = await self.regions.get_by_id(region_id)
        if not region:
            raise NotFoundError(f"Region with ID {region_id} not found")
        return region

    async def get_region_detail(self, region_id: str, include_neighborhoods: bool = False) -> Tuple[Region, Optional[List[Neighborhood]]]:
        region = await self.get_region(region_id)
        neighborhoods = None
        if include_neighborhoods:
            neighborhoods = await self.regions.list_neighborhoods(region_id)
        return region, neighborhoods

    async def list_regions(
        self,
        name: Optional[str] = None,
        include_neighborhoods: bool = False
    ) -> List[Tuple[Region, Optional[List[Neighborhood]]]]:
        regions = await self.regions.list(name=name)
        items = []
        for region in regions:
            neighborhoods = None
            if include_neighborhoods:
                neighborhoods = await self.regions.list_neighborhoods(region.id)
            items.append((region, neighborhoods))
        return items

    async def _ensure_neighborhoods_exist(self, neighborhood_ids: List[str]):
        missing = await self.neighborhoods.first_missing_id(neighborhood_ids)
        if missing:
            raise NotFoundError(f"Neighborhood with ID {missing} not found")

    async def create_region(self, data: RegionCreate) -> Region:
        if await self.regions.get_by_name(data.name):
            raise ConflictError(f"Region {data.name} already exists")

        neighborhood_ids = data.neighborhood_ids or []
        await self._ensure_neighborhoods_exist(neighborhood_ids)

        region = await self.regions.add(Region(name=data.name))
        if neighborhood_ids:
            await self.regions.neighborhoods.add(region.id, neighborhood_ids)
        await self.session.commit()

        logger.info(f"Region created: {region.name} ({len(neighborhood_ids)} neighborhoods)")
        return region

    async def update_region(self, region_id: str, data: RegionUpdate) -> Region:
        region = await self.get_region(region_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        if "name" in update_data and update_data["name"] != region.name:
            if await self.regions.get_by_name(update_data["name"]):
                raise ConflictError(f"Region {update_data['name']} already exists")

        region = await self.regions.update(region, update_data)
        await self.session.commit()

        logger.info(f"Region updated: {region.id}")
        return region

    async def replace_neighborhoods(self, region_id: str, neighborhood_ids: List[str]) -> List[Neighborhood]:
        await self.get_region(region_id)
        await self._ensure_neighborhoods_exist(neighborhood_ids)

        await self.regions.neighborhoods.replace(region_id, neighborhood_ids)
        await self.session.commit()

        logger.info(f"Region {region_id} neighborhoods replaced ({len(neighborhood_ids)})")
        return await self.regions.list_neighborhoods(region_id)

    async def add_neighborhoods(self, region_id: str, neighborhood_ids: List[str]) -> List[Neighborhood]:
        await self.get_region(region_id)
        await self._ensure_neighborhoods_exist(neighborhood_ids)

        added = await self.regions.neighborhoods.add(region_id, neighborhood_ids)
        await self.session.commit()

        logger.info(f"Region {region_id}: {added} neighborhoods added")
        return await self.regions.list_neighborhoods(region_id)

    async def remove_neighborhood(self, region_id: str, neighborhood_id: str) -> None:
        await self.get_region(region_id)

        if not await self.regions.neighborhoods.remove(region_id, neighborhood_id):
            raise NotFoundError(f"Neighborhood {neighborhood_id} is not associated with region {region_id}")
        await self.session.commit()

        logger.info(f"Neighborhood {neighborhood_id} removed from region {region_id}")

    async def get_usage(self, region_id: str) -> UsageResponse:
        await self.get_region(region_id)

        used_in = []
        if await self.regions.neighborhoods.count_for_owner(region_id):
            used_in.append("neighborhoods")
        if await self.regions.brokers.count_for_owner(region_id):
            used_in.append("broker_profiles")

        return UsageResponse(is_used=bool(used_in), used_in=used_in)

    async def delete_region(self, region_id: str) -> None:
        region = await self.get_region(region_id)

        usage = await self.get_usage(region_id)
        if usage.is_used:
            logger.warning(f"Region {region_id} in use: {usage.used_in}")
            raise ForbiddenError(
                f"Cannot delete region because it is being used in: {', '.join(usage.used_in)}"
            )

        await self.regions.delete(region)
        await self.session.commit()

        logger.info(f"Region deleted: {region_id}")


def get_neighborhood_service(db: AsyncSession = Depends(get_db)) -> NeighborhoodService:
    return NeighborhoodService(db)


def get_region_service(db: AsyncSession = Depends(get_db)) -> RegionService:
    return RegionService(db)
