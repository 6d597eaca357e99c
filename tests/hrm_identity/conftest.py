"""
Pytest configuration for hrm_identity tests.

This conftest provides fixtures specific to the identity domain
(users, companies, role entities).
"""

from uuid import uuid4

import pytest

from hrm_auth import PasswordHashingService
from hrm_identity.domain.company import Company
from hrm_identity.domain.role_entities import Admin, Employee, SuperAdmin
from hrm_identity.domain.user import User, UserRole

TEST_PASSWORD = "Secret1!"


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Real bcrypt hasher with low rounds for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def company() -> Company:
    return Company.create(email="hr@acme.example", company_name="Acme Corp")


@pytest.fixture
def employee(company) -> Employee:
    return Employee(
        company_id=company.id,
        first_name="Jane",
        last_name="Doe",
        email="a@x.com",
        emp_code="E-001",
        department="Engineering",
    )


@pytest.fixture
def admin(company) -> Admin:
    return Admin(
        company_id=company.id,
        first_name="Sam",
        last_name="Admin",
        email="admin@x.com",
        user_name="sadmin",
    )


@pytest.fixture
def super_admin() -> SuperAdmin:
    return SuperAdmin(first_name="Root", last_name="User", email="root@x.com")


@pytest.fixture
def employee_user(employee, company) -> User:
    """A user pointing at the employee fixture."""
    return User.create(
        email="A@X.com",
        user_name="jdoe",
        role=UserRole.EMPLOYEE,
        role_entity_id=employee.id,
        company_id=company.id,
        first_name="Jane",
        last_name="Doe",
    )


@pytest.fixture
def ghost_user(company) -> User:
    """A stored user whose role tag is outside the known set."""
    return User.reconstitute(
        id=uuid4(),
        email="ghost@x.com",
        user_name="ghost",
        role="ghost",
        role_entity_id=uuid4(),
        company_id=company.id,
        first_name=None,
        last_name=None,
        mobile=None,
        is_active=True,
        last_login_at=None,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )
