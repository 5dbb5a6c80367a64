"""
Realty API - Broker Profile Repository
"""
from typing import List, Optional

from sqlalchemy import select

from realty_api.models import (
    BrokerProfile,
    Neighborhood,
    Region,
    broker_regions,
    broker_neighborhoods
)
from .base import AssociationRepository, BaseRepository


class BrokerProfileRepository(BaseRepository):
    model = BrokerProfile

    def __init__(self, session):
        super().__init__(session)
        self.regions = AssociationRepository(
            session, broker_regions, "broker_id", "region_id"
        )
        self.neighborhoods = AssociationRepository(
            session, broker_neighborhoods, "broker_id", "neighborhood_id"
        )

    async def get(self, profile_id: str, include_deleted: bool = False) -> Optional[BrokerProfile]:
        query = select(BrokerProfile).where(BrokerProfile.id == profile_id)
        if not include_deleted:
            query = query.where(BrokerProfile.deleted == False)  # noqa: E712
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list(
        self,
        type: Optional[str] = None,
        creci_type: Optional[str] = None,
        classification: Optional[int] = None,
        region_id: Optional[str] = None,
        neighborhood_id: Optional[str] = None,
        include_deleted: bool = False,
        page: int = 1,
        limit: int = 10
    ) -> List[BrokerProfile]:
        query = select(BrokerProfile)

        if type:
            query = query.where(BrokerProfile.type == type)
        if creci_type:
            query = query.where(BrokerProfile.creci_type == creci_type)
        if classification is not None:
            query = query.where(BrokerProfile.classification == classification)
        if region_id:
            query = query.where(
                BrokerProfile.id.in_(
                    select(broker_regions.c.broker_id).where(broker_regions.c.region_id == region_id)
                )
            )
        if neighborhood_id:
            query = query.where(
                BrokerProfile.id.in_(
                    select(broker_neighborhoods.c.broker_id).where(
                        broker_neighborhoods.c.neighborhood_id == neighborhood_id
                    )
                )
            )
        if not include_deleted:
            query = query.where(BrokerProfile.deleted == False)  # noqa: E712

        query = query.order_by(BrokerProfile.created_at, BrokerProfile.id)
        query = query.offset((page - 1) * limit).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_regions(self, profile_id: str) -> List[Region]:
        result = await self.session.execute(
            select(Region)
            .join(broker_regions, broker_regions.c.region_id == Region.id)
            .where(broker_regions.c.broker_id == profile_id)
            .order_by(Region.name)
        )
        return list(result.scalars().all())

    async def list_neighborhoods(self, profile_id: str) -> List[Neighborhood]:
        result = await self.session.execute(
            select(Neighborhood)
            .join(broker_neighborhoods, broker_neighborhoods.c.neighborhood_id == Neighborhood.id)
            .where(broker_neighborhoods.c.broker_id == profile_id)
            .order_by(Neighborhood.name)
        )
        return list(result.scalars().all())
