"""
Realty API - Team / Member Services

Regras de liderança: uma equipe tem no máximo um líder ativo
(is_leader e active) e o último líder ativo não pode ser rebaixado,
desativado ou removido. Toda verificação trava a linha da equipe
antes de contar os líderes; o índice único parcial em members
rejeita o que escapar disso sob concorrência.
"""
import logging
from typing import List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.core.errors import (
    BadRequestError,
    ConflictError,
    LeaderConflictError,
    LeaderRequiredError,
    NotFoundError
)
from realty_api.database import get_db
from realty_api.models import Member, Team
from realty_api.repositories import MemberRepository, TeamRepository
from realty_api.schemas import MemberCreate, MemberUpdate, TeamCreate, TeamUpdate

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.teams = TeamRepository(session)
        self.members = MemberRepository(session)

    async def get_team(self, team_id: str) -> Team:
        team = await self.teams.get_by_id(team_id)
        if not team:
            raise NotFoundError("Team not found")
        return team

    async def get_team_detail(self, team_id: str, include_members: bool = False) -> Tuple[Team, Optional[List[Member]]]:
        team = await self.get_team(team_id)
        members = None
        if include_members:
            members = await self.members.list(team_id=team_id)
        return team, members

    async def list_teams(
        self,
        name: Optional[str] = None,
        team_type: Optional[str] = None,
        include_members: bool = False
    ) -> List[Tuple[Team, Optional[List[Member]]]]:
        teams = await self.teams.list(name=name, team_type=team_type)
        items = []
        for team in teams:
            members = None
            if include_members:
                members = await self.members.list(team_id=team.id)
            items.append((team, members))
        return items

    async def list_team_members(self, team_id: str, active: Optional[bool] = None) -> List[Member]:
        await self.get_team(team_id)
        return await self.members.list(team_id=team_id, active=active)

    async def create_team(self, data: TeamCreate) -> Team:
        if await self.teams.get_by_name(data.name):
            raise ConflictError(f"Team {data.name} already exists")

        team = await self.teams.add(Team(name=data.name, team_type=data.team_type.value))
        await self.session.commit()

        logger.info(f"Team created: {team.name} ({team.team_type})")
        return team

    async def update_team(self, team_id: str, data: TeamUpdate) -> Team:
        team = await self.get_team(team_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True, mode="json")

        if "name" in update_data and update_data["name"] != team.name:
            if await self.teams.get_by_name(update_data["name"]):
                raise ConflictError(f"Team {update_data['name']} already exists")

        team = await self.teams.update(team, update_data)
        await self.session.commit()

        logger.info(f"Team updated: {team.id}")
        return team

    async def delete_team(self, team_id: str) -> None:
        team = await self.get_team(team_id)

        # Membros saem junto (ON DELETE CASCADE)
        await self.teams.delete(team)
        await self.session.commit()

        logger.info(f"Team deleted: {team_id}")

    async def set_leader(self, team_id: str, member_id: str) -> Member:
        team = await self.teams.get_for_update(team_id)
        if not team:
            raise NotFoundError("Team not found")

        member = await self.members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Member not found")

        if member.team_id != team_id:
            raise BadRequestError("Member does not belong to this team")

        if member.is_leader:
            return member

        if await self.members.count_active_leaders(team_id, exclude_id=member_id):
            logger.warning(f"Set leader rejected: team {team_id} already has a leader")
            raise LeaderConflictError()

        member = await _flush_member(self.members.update(member, {"is_leader": True}), self.session)
        await self.session.commit()

        logger.info(f"Member {member_id} is now leader of team {team_id}")
        return member


class MemberService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.teams = TeamRepository(session)
        self.members = MemberRepository(session)

    async def _lock_team(self, team_id: str) -> Team:
        team = await self.teams.get_for_update(team_id)
        if not team:
            raise NotFoundError("Team not found")
        return team

    async def get_member(self, member_id: str) -> Member:
        member = await self.members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Member not found")
        return member

    async def get_member_detail(self, member_id: str, include_team: bool = False) -> Tuple[Member, Optional[Team]]:
        member = await self.get_member(member_id)
        team = None
        if include_team:
            team = await self.teams.get_by_id(member.team_id)
        return member, team

    async def list_members(self, **filters) -> List[Member]:
        return await self.members.list(**filters)

    async def create_member(self, data: MemberCreate) -> Member:
        if await self.members.get_by_email(data.email):
            raise ConflictError("Email already in use")

        await self._lock_team(data.team_id)

        if data.is_leader and await self.members.count_active_leaders(data.team_id):
            logger.warning(f"Create member rejected: team {data.team_id} already has a leader")
            raise LeaderConflictError()

        member = Member(**data.model_dump())
        member = await _flush_member(self.members.add(member), self.session)
        await self.session.commit()

        logger.info(f"Member created: {member.email} (team {member.team_id}, leader={member.is_leader})")
        return member

    async def update_member(self, member_id: str, data: MemberUpdate) -> Member:
        member = await self.get_member(member_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in update_data and update_data["email"] != member.email:
            if await self.members.get_by_email(update_data["email"]):
                raise ConflictError("Email already in use")

        target_team_id = update_data.get("team_id", member.team_id)
        team_changed = target_team_id != member.team_id
        will_lead = update_data.get("is_leader", member.is_leader)

        await self._lock_team(target_team_id)

        if member.is_active_leader and not will_lead and not team_changed:
            if not await self.members.count_active_leaders(member.team_id, exclude_id=member.id):
                logger.warning(f"Update rejected: member {member_id} is the only leader of team {member.team_id}")
                raise LeaderRequiredError()

        if will_lead and member.active and (not member.is_leader or team_changed):
            if await self.members.count_active_leaders(target_team_id, exclude_id=member.id):
                logger.warning(f"Update rejected: team {target_team_id} already has a leader")
                raise LeaderConflictError()

        member = await _flush_member(self.members.update(member, update_data), self.session)
        await self.session.commit()

        logger.info(f"Member updated: {member.id}")
        return member

    async def update_status(self, member_id: str, active: bool) -> Member:
        member = await self.get_member(member_id)
        await self._lock_team(member.team_id)

        if member.is_leader and member.active and not active:
            if not await self.members.count_active_leaders(member.team_id, exclude_id=member.id):
                logger.warning(f"Deactivation rejected: member {member_id} is the last active leader")
                raise LeaderRequiredError("Team must have at least one active leader")

        if member.is_leader and not member.active and active:
            if await self.members.count_active_leaders(member.team_id, exclude_id=member.id):
                logger.warning(f"Activation rejected: team {member.team_id} already has a leader")
                raise LeaderConflictError()

        member = await _flush_member(self.members.update(member, {"active": active}), self.session)
        await self.session.commit()

        logger.info(f"Member {member_id} active={active}")
        return member

    async def delete_member(self, member_id: str) -> None:
        member = await self.get_member(member_id)
        await self._lock_team(member.team_id)

        if member.is_active_leader:
            if not await self.members.count_active_leaders(member.team_id, exclude_id=member.id):
                logger.warning(f"Delete rejected: member {member_id} is the only leader")
                raise LeaderRequiredError()

        await self.members.delete(member)
        await self.session.commit()

        logger.info(f"Member deleted: {member_id}")


async def _flush_member(operation, session: AsyncSession) -> Member:
    """Executa a escrita traduzindo violações de unicidade em erros de domínio"""
    try:
        return await operation
    except IntegrityError as e:
        await session.rollback()
        message = str(e.orig).lower()
        if "email" in message:
            raise ConflictError("Email already in use") from e
        if "team_id" in message or "leader" in message:
            raise LeaderConflictError() from e
        raise


def get_team_service(db: AsyncSession = Depends(get_db)) -> TeamService:
    return TeamService(db)


def get_member_service(db: AsyncSession = Depends(get_db)) -> MemberService:
    return MemberService(db)
