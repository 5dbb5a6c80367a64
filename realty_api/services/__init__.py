from .user_service import UserService, UserTypeService, get_user_service, get_user_type_service
from .location_service import (
    NeighborhoodService,
    RegionService,
    get_neighborhood_service,
    get_region_service
)
from .team_service import TeamService, MemberService, get_team_service, get_member_service
from .broker_profile_service import BrokerProfileService, get_broker_profile_service

__all__ = [
    "UserService",
    "UserTypeService",
    "get_user_service",
    "get_user_type_service",
    "NeighborhoodService",
    "RegionService",
    "get_neighborhood_service",
    "get_region_service",
    "TeamService",
    "MemberService",
    "get_team_service",
    "get_member_service",
    "BrokerProfileService",
    "get_broker_profile_service"
]
