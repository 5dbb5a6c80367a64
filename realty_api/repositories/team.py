"""
Realty API - Team / Member Repositories
"""
from typing import List, Optional

from sqlalchemy import func, select

from realty_api.models import Team, Member
from .base import BaseRepository


class TeamRepository(BaseRepository):
    model = Team

    async def get_for_update(self, team_id: str) -> Optional[Team]:
        """SELECT ... FOR UPDATE na equipe (ignorado pelo SQLite)"""
        result = await self.session.execute(
            select(Team).where(Team.id == team_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Team]:
        result = await self.session.execute(
            select(Team).where(Team.name == name)
        )
        return result.scalar_one_or_none()

    async def list(self, name: Optional[str] = None, team_type: Optional[str] = None) -> List[Team]:
        query = select(Team)

        if name:
            query = query.where(func.lower(Team.name).contains(name.lower()))
        if team_type:
            query = query.where(Team.team_type == team_type)

        result = await self.session.execute(query.order_by(Team.name))
        return list(result.scalars().all())


class MemberRepository(BaseRepository):
    model = Member

    async def get_by_email(self, email: str) -> Optional[Member]:
        result = await self.session.execute(
            select(Member).where(Member.email == email)
        )
        return result.scalar_one_or_none()

    async def list(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        is_leader: Optional[bool] = None,
        team_id: Optional[str] = None,
        active: Optional[bool] = None
    ) -> List[Member]:
        query = select(Member)

        if name:
            query = query.where(func.lower(Member.name).contains(name.lower()))
        if email:
            query = query.where(Member.email == email)
        if is_leader is not None:
            query = query.where(Member.is_leader == is_leader)
        if team_id:
            query = query.where(Member.team_id == team_id)
        if active is not None:
            query = query.where(Member.active == active)

        result = await self.session.execute(query.order_by(Member.name))
        return list(result.scalars().all())

    async def count_active_leaders(self, team_id: str, exclude_id: Optional[str] = None) -> int:
        """Líderes ativos da equipe, opcionalmente ignorando um membro"""
        query = select(func.count()).select_from(Member).where(
            Member.team_id == team_id,
            Member.is_leader == True,  # noqa: E712
            Member.active == True  # noqa: E712
        )
        if exclude_id:
            query = query.where(Member.id != exclude_id)

        result = await self.session.execute(query)
        return result.scalar_one()
