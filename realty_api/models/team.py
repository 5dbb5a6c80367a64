"""
Realty API - Team Models
Equipes e seus membros
"""
import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Index, text

from realty_api.database import Base


class TeamType(str, Enum):
    """Tipos de equipe"""
    BROKERS = "Brokers"
    REGISTRATION = "Registration"
    LEGAL = "Legal"
    SUPPORT = "Support"
    ADMINISTRATIVE = "Administrative"


class Team(Base):
    """Modelo de Equipe"""
    __tablename__ = "teams"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(100), nullable=False, unique=True, index=True)
    team_type = Column(String(20), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self, members=None):
        data = {
            "id": self.id,
            "name": self.name,
            "team_type": self.team_type,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if members is not None:
            data["members"] = [m.to_dict() for m in members]
        return data


class Member(Base):
    """
    Membro de uma equipe.

    No máximo um membro ativo e líder por equipe: garantido pelo
    índice único parcial abaixo, além das validações do serviço.
    """
    __tablename__ = "members"
    __table_args__ = (
        Index(
            "uq_members_team_active_leader",
            "team_id",
            unique=True,
            sqlite_where=text("is_leader = 1 AND active = 1"),
            postgresql_where=text("is_leader AND active"),
        ),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True, index=True)
    phone = Column(String(20), nullable=False)
    is_leader = Column(Boolean, default=False, nullable=False)
    team_id = Column(String(36), ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True)
    active = Column(Boolean, default=True, nullable=False)

    joined_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def is_active_leader(self) -> bool:
        return bool(self.is_leader and self.active)

    def to_dict(self, team=None):
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "is_leader": self.is_leader,
            "team_id": self.team_id,
            "active": self.active,
            "joined_at": self.joined_at.isoformat() if self.joined_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if team is not None:
            data["team"] = team.to_dict()
        return data
