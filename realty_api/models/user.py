"""
Realty API - User Models
Usuários do sistema e seus tipos (enumeração fixa)
"""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, SmallInteger, ForeignKey

from realty_api.database import Base


# Tipos fixos, populados uma única vez na inicialização
DEFAULT_USER_TYPES = (
    (1, "Admin"),
    (2, "Manager"),
    (3, "Broker"),
    (4, "User"),
)


class UserType(Base):
    """Tipo de usuário (Admin, Manager, Broker, User)"""
    __tablename__ = "user_types"

    id = Column(SmallInteger, primary_key=True, autoincrement=False)
    name = Column(String(50), nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name}


class User(Base):
    """Modelo de Usuário (soft delete, nunca removido fisicamente)"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(20), index=True)
    user_type_id = Column(SmallInteger, ForeignKey("user_types.id"), nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Soft delete
    deleted = Column(Boolean, default=False, nullable=False, index=True)
    deleted_at = Column(DateTime)

    def to_dict(self):
        # password_hash nunca sai da API
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "user_type_id": self.user_type_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "deleted": self.deleted,
            "deleted_at": self.deleted_at.isoformat() if self.deleted_at else None,
        }
