"""
Realty API - Health API
"""
from datetime import datetime

from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health():
    """Health check (sem API key)"""
    return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}
