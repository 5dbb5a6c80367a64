from .config import settings, get_settings
from .errors import (
    ErrorCode,
    AppError,
    ValidationError,
    NotFoundError,
    ConflictError,
    BadRequestError,
    ForbiddenError,
    UnauthorizedError,
    InternalServerError,
    LeaderConflictError,
    LeaderRequiredError
)
from .security import verify_password, get_password_hash, require_api_key

__all__ = [
    "settings",
    "get_settings",
    "ErrorCode",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "BadRequestError",
    "ForbiddenError",
    "UnauthorizedError",
    "InternalServerError",
    "LeaderConflictError",
    "LeaderRequiredError",
    "verify_password",
    "get_password_hash",
    "require_api_key"
]
