"""Integration tests for the role entity repositories."""

from uuid import uuid4

import pytest

from hrm_identity.infrastructure.persistence.sqlalchemy import (
    AdminRepositorySQLAlchemy,
    EmployeeRepositorySQLAlchemy,
    SuperAdminRepositorySQLAlchemy,
)


@pytest.mark.integration
class TestRoleEntityRepositories:
    @pytest.mark.asyncio
    async def test_employee_round_trip(self, db_session, employee):
        repo = EmployeeRepositorySQLAlchemy(db_session)

        await repo.save(employee)
        db_session.expunge_all()

        assert await repo.find_by_id(employee.id) == employee

    @pytest.mark.asyncio
    async def test_admin_round_trip_keeps_permissions(self, db_session, admin):
        repo = AdminRepositorySQLAlchemy(db_session)

        await repo.save(admin)
        db_session.expunge_all()

        found = await repo.find_by_id(admin.id)
        assert found == admin
        assert found.has_permission("delete")

    @pytest.mark.asyncio
    async def test_super_admin_round_trip(self, db_session, super_admin):
        repo = SuperAdminRepositorySQLAlchemy(db_session)

        await repo.save(super_admin)
        db_session.expunge_all()

        found = await repo.find_by_id(super_admin.id)
        assert found == super_admin
        assert found.has_permission("manage_admins")

    @pytest.mark.asyncio
    async def test_collections_are_separate(self, db_session, employee):
        await EmployeeRepositorySQLAlchemy(db_session).save(employee)

        assert await AdminRepositorySQLAlchemy(db_session).find_by_id(employee.id) is None

    @pytest.mark.asyncio
    async def test_delete(self, db_session, employee):
        repo = EmployeeRepositorySQLAlchemy(db_session)
        await repo.save(employee)

        await repo.delete(employee.id)

        assert await repo.find_by_id(employee.id) is None

    @pytest.mark.asyncio
    async def test_missing(self, db_session):
        assert await EmployeeRepositorySQLAlchemy(db_session).find_by_id(uuid4()) is None
