"""
Realty API - Neighborhood / Region Schemas
"""
from pydantic import BaseModel, Field, StringConstraints
from typing import Annotated, List, Optional

# Nomes chegam sem espaços nas pontas, nos cadastros individuais e em lote
LocationName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class NeighborhoodCreate(BaseModel):
    name: LocationName
    city: LocationName


class NeighborhoodBatchCreate(BaseModel):
    """Cria vários bairros de uma mesma cidade"""
    city: LocationName
    neighborhoods: List[LocationName] = Field(..., min_length=1)


class NeighborhoodUpdate(BaseModel):
    name: Optional[LocationName] = None
    city: Optional[LocationName] = None


class RegionCreate(BaseModel):
    name: LocationName
    neighborhood_ids: Optional[List[str]] = None


class RegionUpdate(BaseModel):
    name: Optional[LocationName] = None


class NeighborhoodIds(BaseModel):
    neighborhood_ids: List[str]


class RegionIds(BaseModel):
    region_ids: List[str]


class UsageResponse(BaseModel):
    """Serializado como {isUsed, usedIn}"""
    is_used: bool = Field(serialization_alias="isUsed")
    used_in: List[str] = Field(default_factory=list, serialization_alias="usedIn")
