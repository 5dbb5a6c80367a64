"""
Realty API - Database Session
"""
import logging
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

from realty_api.core.config import settings

logger = logging.getLogger(__name__)

# Engine assíncrono (pool compartilhado entre requisições)
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

if engine.dialect.name == "sqlite":
    # SQLite só respeita ON DELETE CASCADE com foreign_keys ligado
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# Session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)

# Base para models
Base = declarative_base()


async def get_db() -> AsyncSession:
    """Dependency para injetar sessão do banco (uma transação por requisição)"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def seed_user_types(session: AsyncSession) -> int:
    """Insere os tipos de usuário fixos que ainda não existem"""
    from realty_api.models import UserType, DEFAULT_USER_TYPES

    result = await session.execute(select(UserType.id))
    existing = set(result.scalars().all())

    created = 0
    for type_id, name in DEFAULT_USER_TYPES:
        if type_id not in existing:
            session.add(UserType(id=type_id, name=name))
            created += 1

    if created:
        await session.commit()
        logger.info(f"Seeded {created} user types")
    return created


async def init_db(seed: bool = True):
    """Inicializa banco de dados (cria tabelas) e popula tipos de usuário"""
    # Registra os models no metadata
    import realty_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if seed:
        async with AsyncSessionLocal() as session:
            await seed_user_types(session)
