# ruff: noqa: E402
import os
import tempfile
from pathlib import Path

# Configuração precisa existir antes de importar a aplicação
TEST_DB = Path(tempfile.gettempdir()) / "realty_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB}"
os.environ["API_KEY"] = "test-api-key"
os.environ["ENVIRONMENT"] = "test"

import pytest
from httpx import ASGITransport, AsyncClient

import realty_api.models  # noqa: F401
from realty_api.database import AsyncSessionLocal, Base, engine, seed_user_types
from realty_api.main import app

API_KEY = "test-api-key"


@pytest.fixture(autouse=True)
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await seed_user_types(session)

    yield

    await engine.dispose()


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-API-KEY": API_KEY}
    ) as client:
        yield client


@pytest.fixture
async def anonymous_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def session():
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def team(client):
    response = await client.post("/api/teams", json={"name": "Equipe de Vendas", "team_type": "Brokers"})
    assert response.status_code == 201
    return response.json()["data"]


def member_payload(team_id: str, name: str = "Ricardo Oliveira", is_leader: bool = False, **extra) -> dict:
    slug = name.lower().replace(" ", ".")
    payload = {
        "name": name,
        "email": f"{slug}@exemplo.com",
        "phone": "+5511987654321",
        "is_leader": is_leader,
        "team_id": team_id,
    }
    payload.update(extra)
    return payload
