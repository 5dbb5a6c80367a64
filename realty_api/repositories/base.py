"""
Realty API - Base Repositories
Acesso genérico por ID e gerenciamento de tabelas de junção
"""
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import Table, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """Operações comuns a todas as entidades com chave `id`"""

    model = None

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, entity_id: str):
        result = await self.session.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def first_missing_id(self, ids: Iterable[str]) -> Optional[str]:
        """Retorna o primeiro ID (na ordem recebida) que não existe"""
        ids = list(dict.fromkeys(ids))
        if not ids:
            return None

        result = await self.session.execute(
            select(self.model.id).where(self.model.id.in_(ids))
        )
        found = set(result.scalars().all())

        for entity_id in ids:
            if entity_id not in found:
                return entity_id
        return None

    async def add(self, entity):
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity, data: dict):
        for field, value in data.items():
            setattr(entity, field, value)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity):
        await self.session.delete(entity)
        await self.session.flush()


class AssociationRepository:
    """
    Tabela de junção (owner_id, related_id).

    Não valida existência dos IDs: isso fica a cargo do serviço,
    antes de qualquer escrita.
    """

    def __init__(self, session: AsyncSession, table: Table, owner_column: str, related_column: str):
        self.session = session
        self.table = table
        self.owner = table.c[owner_column]
        self.related = table.c[related_column]

    async def list_ids(self, owner_id: str) -> List[str]:
        result = await self.session.execute(
            select(self.related).where(self.owner == owner_id)
        )
        return list(result.scalars().all())

    async def replace(self, owner_id: str, related_ids: Iterable[str]) -> int:
        """Remove todos os vínculos do dono e insere o novo conjunto"""
        await self.session.execute(
            delete(self.table).where(self.owner == owner_id)
        )
        return await self._insert(owner_id, dict.fromkeys(related_ids))

    async def add(self, owner_id: str, related_ids: Iterable[str]) -> int:
        """Insere apenas os vínculos que ainda não existem"""
        existing = set(await self.list_ids(owner_id))
        missing = [r for r in dict.fromkeys(related_ids) if r not in existing]
        return await self._insert(owner_id, missing)

    async def remove(self, owner_id: str, related_id: str) -> bool:
        result = await self.session.execute(
            delete(self.table).where(
                self.owner == owner_id,
                self.related == related_id
            )
        )
        return result.rowcount > 0

    async def count_for_owner(self, owner_id: str) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(self.table).where(self.owner == owner_id)
        )
        return result.scalar_one()

    async def _insert(self, owner_id: str, related_ids: Iterable[str]) -> int:
        rows = [
            {self.owner.key: owner_id, self.related.key: related_id, "created_at": datetime.utcnow()}
            for related_id in related_ids
        ]
        if rows:
            await self.session.execute(insert(self.table), rows)
        return len(rows)
