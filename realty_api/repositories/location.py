"""
Realty API - Neighborhood / Region Repositories
"""
from typing import Iterable, List, Optional

from sqlalchemy import func, select

from realty_api.models import (
    Neighborhood,
    Region,
    region_neighborhoods,
    broker_regions,
    broker_neighborhoods
)
from .base import AssociationRepository, BaseRepository


class NeighborhoodRepository(BaseRepository):
    model = Neighborhood

    def __init__(self, session):
        super().__init__(session)
        self.regions = AssociationRepository(
            session, region_neighborhoods, "neighborhood_id", "region_id"
        )
        self.brokers = AssociationRepository(
            session, broker_neighborhoods, "neighborhood_id", "broker_id"
        )

    async def get_by_name_and_city(self, name: str, city: str) -> Optional[Neighborhood]:
        result = await self.session.execute(
            select(Neighborhood).where(
                Neighborhood.name == name,
                Neighborhood.city == city
            )
        )
        return result.scalar_one_or_none()

    async def existing_names(self, city: str, names: Iterable[str]) -> List[str]:
        """Nomes que já existem na cidade"""
        names = list(names)
        if not names:
            return []
        result = await self.session.execute(
            select(Neighborhood.name).where(
                Neighborhood.city == city,
                Neighborhood.name.in_(names)
            )
        )
        return list(result.scalars().all())

    async def add_many(self, neighborhoods: List[Neighborhood]) -> List[Neighborhood]:
        self.session.add_all(neighborhoods)
        await self.session.flush()
        return neighborhoods

    async def list(self, name: Optional[str] = None, city: Optional[str] = None) -> List[Neighborhood]:
        query = select(Neighborhood)

        if name:
            query = query.where(func.lower(Neighborhood.name).contains(name.lower()))
        if city:
            query = query.where(Neighborhood.city == city)

        result = await self.session.execute(query.order_by(Neighborhood.city, Neighborhood.name))
        return list(result.scalars().all())


class RegionRepository(BaseRepository):
    model = Region

    def __init__(self, session):
        super().__init__(session)
        self.neighborhoods = AssociationRepository(
            session, region_neighborhoods, "region_id", "neighborhood_id"
        )
        self.brokers = AssociationRepository(
            session, broker_regions, "region_id", "broker_id"
        )

    async def get_by_name(self, name: str) -> Optional[Region]:
        result = await self.session.execute(
            select(Region).where(Region.name == name)
        )
        return result.scalar_one_or_none()

    async def list(self, name: Optional[str] = None) -> List[Region]:
        query = select(Region)
        if name:
            query = query.where(func.lower(Region.name).contains(name.lower()))

        result = await self.session.execute(query.order_by(Region.name))
        return list(result.scalars().all())

    async def list_neighborhoods(self, region_id: str) -> List[Neighborhood]:
        result = await self.session.execute(
            select(Neighborhood)
            .join(region_neighborhoods, region_neighborhoods.c.neighborhood_id == Neighborhood.id)
            .where(region_neighborhoods.c.region_id == region_id)
            .order_by(Neighborhood.name)
        )
        return list(result.scalars().all())
