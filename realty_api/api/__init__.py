from .health import router as health_router
from .users import router as users_router, user_types_router
from .neighborhoods import router as neighborhoods_router
from .regions import router as regions_router
from .teams import router as teams_router
from .members import router as members_router
from .broker_profiles import router as broker_profiles_router

__all__ = [
    "health_router",
    "users_router",
    "user_types_router",
    "neighborhoods_router",
    "regions_router",
    "teams_router",
    "members_router",
    "broker_profiles_router"
]
