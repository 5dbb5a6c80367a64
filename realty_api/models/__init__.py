from .user import User, UserType, DEFAULT_USER_TYPES
from .location import Neighborhood, Region, region_neighborhoods
from .team import Team, TeamType, Member
from .broker_profile import (
    BrokerProfile,
    BrokerType,
    CreciType,
    broker_regions,
    broker_neighborhoods
)

__all__ = [
    "User",
    "UserType",
    "DEFAULT_USER_TYPES",
    "Neighborhood",
    "Region",
    "region_neighborhoods",
    "Team",
    "TeamType",
    "Member",
    "BrokerProfile",
    "BrokerType",
    "CreciType",
    "broker_regions",
    "broker_neighborhoods"
]
