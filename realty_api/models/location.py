"""
Realty API - Location Models
Bairros, regiões e a tabela de junção entre eles
"""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, Table, UniqueConstraint

from realty_api.database import Base


region_neighborhoods = Table(
    "region_neighborhoods",
    Base.metadata,
    Column("region_id", String(36), ForeignKey("regions.id", ondelete="CASCADE"), primary_key=True),
    Column("neighborhood_id", String(36), ForeignKey("neighborhoods.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime, default=datetime.utcnow, nullable=False),
)


class Neighborhood(Base):
    """Bairro; o par (nome, cidade) é único"""
    __tablename__ = "neighborhoods"
    __table_args__ = (
        UniqueConstraint("name", "city", name="uq_neighborhoods_name_city"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, index=True)
    city = Column(String(255), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "city": self.city,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class Region(Base):
    """Região (agrupamento de bairros)"""
    __tablename__ = "regions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, unique=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self, neighborhoods=None):
        data = {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if neighborhoods is not None:
            data["neighborhoods"] = [n.to_dict() for n in neighborhoods]
        return data
