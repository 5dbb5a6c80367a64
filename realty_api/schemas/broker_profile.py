"""
Realty API - Broker Profile Schemas
"""
from pydantic import BaseModel, Field
from typing import List, Optional

from realty_api.models.broker_profile import BrokerType, CreciType


class BrokerProfileCreate(BaseModel):
    type: BrokerType
    creci_number: str = Field(..., min_length=1, max_length=50)
    creci_type: CreciType
    classification: int = Field(0, ge=0)
    region_ids: Optional[List[str]] = None
    neighborhood_ids: Optional[List[str]] = None


class BrokerProfileUpdate(BaseModel):
    type: Optional[BrokerType] = None
    creci_number: Optional[str] = Field(None, min_length=1, max_length=50)
    creci_type: Optional[CreciType] = None
    classification: Optional[int] = Field(None, ge=0)
