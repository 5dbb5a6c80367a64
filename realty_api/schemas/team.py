"""
Realty API - Team / Member Schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from realty_api.models.team import TeamType


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    team_type: TeamType


class TeamUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    team_type: Optional[TeamType] = None


class SetLeaderRequest(BaseModel):
    member_id: str = Field(..., min_length=1)


class MemberCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=8, max_length=20)
    is_leader: bool = False
    team_id: str = Field(..., min_length=1)


class MemberUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=8, max_length=20)
    is_leader: Optional[bool] = None
    team_id: Optional[str] = Field(None, min_length=1)


class MemberStatusUpdate(BaseModel):
    active: bool
