"""
Realty API - Security
Hash de senhas e autenticação por API key
"""
import logging
import secrets
from typing import Optional

import bcrypt
from fastapi import Security
from fastapi.security import APIKeyHeader

from .config import settings
from .errors import UnauthorizedError

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-KEY", auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica password usando bcrypt"""
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )


def get_password_hash(password: str) -> str:
    """Gera hash bcrypt do password"""
    return bcrypt.hashpw(
        password.encode('utf-8'),
        bcrypt.gensalt()
    ).decode('utf-8')


async def require_api_key(api_key: Optional[str] = Security(api_key_header)) -> str:
    """Dependency que valida o header X-API-KEY"""
    if not api_key:
        logger.warning("API key missing")
        raise UnauthorizedError("API key is required")

    if not secrets.compare_digest(api_key, settings.API_KEY):
        logger.warning("Invalid API key")
        raise UnauthorizedError("Invalid API key")

    return api_key
