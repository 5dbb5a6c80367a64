"""
Realty API - Broker Profile Model
Perfil de corretor com regiões e bairros de atuação
"""
import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, Boolean, DateTime, Integer, ForeignKey, Table

from realty_api.database import Base


class BrokerType(str, Enum):
    """Tipo de atuação do corretor"""
    RENTAL = "Rental"
    SALE = "Sale"
    HYBRID = "Hybrid"


class CreciType(str, Enum):
    """Tipo de inscrição no CRECI"""
    PERMANENT = "Permanent"
    INTERN = "Intern"
    REGISTRATION = "Registration"


broker_regions = Table(
    "broker_regions",
    Base.metadata,
    Column("broker_id", String(36), ForeignKey("broker_profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("region_id", String(36), ForeignKey("regions.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime, default=datetime.utcnow, nullable=False),
)

broker_neighborhoods = Table(
    "broker_neighborhoods",
    Base.metadata,
    Column("broker_id", String(36), ForeignKey("broker_profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("neighborhood_id", String(36), ForeignKey("neighborhoods.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime, default=datetime.utcnow, nullable=False),
)


class BrokerProfile(Base):
    """Modelo de Perfil de Corretor (soft delete reversível)"""
    __tablename__ = "broker_profiles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    type = Column(String(20), nullable=False, index=True)
    creci_number = Column(String(50), nullable=False)
    creci_type = Column(String(20), nullable=False, index=True)
    classification = Column(Integer, default=0, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Soft delete
    deleted = Column(Boolean, default=False, nullable=False, index=True)
    deleted_at = Column(DateTime)

    def to_dict(self, regions=None, neighborhoods=None):
        data = {
            "id": self.id,
            "type": self.type,
            "creci_number": self.creci_number,
            "creci_type": self.creci_type,
            "classification": self.classification,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "deleted": self.deleted,
            "deleted_at": self.deleted_at.isoformat() if self.deleted_at else None,
        }
        if regions is not None:
            data["regions"] = [r.to_dict() for r in regions]
        if neighborhoods is not None:
            data["neighborhoods"] = [n.to_dict() for n in neighborhoods]
        return data
