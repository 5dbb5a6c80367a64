from .user import (
    UserCreate,
    UserUpdate,
    UserChangePassword
)
from .location import (
    NeighborhoodCreate,
    NeighborhoodBatchCreate,
    NeighborhoodUpdate,
    RegionCreate,
    RegionUpdate,
    NeighborhoodIds,
    RegionIds,
    UsageResponse
)
from .team import (
    TeamCreate,
    TeamUpdate,
    SetLeaderRequest,
    MemberCreate,
    MemberUpdate,
    MemberStatusUpdate
)
from .broker_profile import BrokerProfileCreate, BrokerProfileUpdate

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserChangePassword",
    "NeighborhoodCreate",
    "NeighborhoodBatchCreate",
    "NeighborhoodUpdate",
    "RegionCreate",
    "RegionUpdate",
    "NeighborhoodIds",
    "RegionIds",
    "UsageResponse",
    "TeamCreate",
    "TeamUpdate",
    "SetLeaderRequest",
    "MemberCreate",
    "MemberUpdate",
    "MemberStatusUpdate",
    "BrokerProfileCreate",
    "BrokerProfileUpdate"
]
