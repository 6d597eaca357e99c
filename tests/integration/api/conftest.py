"""Pytest fixtures for API integration tests."""

from dataclasses import dataclass
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hrm.presentation.api.app import API_V1_PREFIX, create_app
from hrm_config.settings import Settings
from hrm_identity.domain.role_entities import Admin, Employee
from hrm_identity.infrastructure.persistence.sqlalchemy import (
    AdminRepositorySQLAlchemy,
    EmployeeRepositorySQLAlchemy,
)
from tests.shared.fixtures.database import async_engine

__all__ = ["async_engine"]

TEST_PASSWORD = "Secret1!"


@dataclass(frozen=True)
class SeededTenant:
    company_id: UUID
    employee: Employee
    admin: Admin


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and cheap bcrypt."""
    return Settings(
        _env_file=None,
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        database_url_override="sqlite+aiosqlite:///:memory:",
        api_host="127.0.0.1",
        api_port=8000,
        debug=True,
        api_cors_origins="http://localhost:3000",
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(api_settings, async_engine):
    """Application wired to the in-memory test engine."""
    return create_app(settings=api_settings, engine=async_engine)


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client talking to the ASGI app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def tenant(client, api_v1_prefix, session_maker) -> SeededTenant:
    """A registered company with one employee and one admin record."""
    response = await client.post(
        f"{api_v1_prefix}/companies",
        json={
            "email": "hr@acme.example",
            "company_name": "Acme Corp",
            "password": TEST_PASSWORD,
        },
    )
    assert response.status_code == 201
    company_id = UUID(response.json()["id"])

    employee = Employee(
        company_id=company_id,
        first_name="Jane",
        last_name="Doe",
        email="a@x.com",
        emp_code="E-001",
        department="Engineering",
    )
    admin = Admin(
        company_id=company_id,
        first_name="Sam",
        last_name="Admin",
        email="admin@x.com",
        user_name="sadmin",
    )

    async with session_maker() as session:
        await EmployeeRepositorySQLAlchemy(session).save(employee)
        await AdminRepositorySQLAlchemy(session).save(admin)
        await session.commit()

    return SeededTenant(company_id=company_id, employee=employee, admin=admin)


@pytest.fixture
def register_payload(tenant):
    """Registration body for the seeded employee, stored as A@X.com."""
    return {
        "email": "A@X.com",
        "user_name": "jdoe",
        "password": TEST_PASSWORD,
        "role": "employee",
        "role_entity_id": str(tenant.employee.id),
        "company_id": str(tenant.company_id),
        "first_name": "Jane",
        "last_name": "Doe",
    }


@pytest_asyncio.fixture
async def registered_user(client, api_v1_prefix, register_payload) -> dict:
    response = await client.post(
        f"{api_v1_prefix}/auth/register",
        json=register_payload,
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def auth_headers(client, api_v1_prefix, registered_user) -> dict[str, str]:
    response = await client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": "a@x.com", "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
