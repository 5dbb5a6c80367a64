from .base import BaseRepository, AssociationRepository
from .user import UserRepository, UserTypeRepository
from .location import NeighborhoodRepository, RegionRepository
from .team import TeamRepository, MemberRepository
from .broker_profile import BrokerProfileRepository

__all__ = [
    "BaseRepository",
    "AssociationRepository",
    "UserRepository",
    "UserTypeRepository",
    "NeighborhoodRepository",
    "RegionRepository",
    "TeamRepository",
    "MemberRepository",
    "BrokerProfileRepository"
]
