"""Integration tests for UserRepositorySQLAlchemy with in-memory SQLite."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest
from sqlalchemy import inspect, select

from hrm_identity.domain.shared import EmailAlreadyExistsError
from hrm_identity.domain.user import User, UserNameTakenError, UserRole
from hrm_identity.infrastructure.persistence.sqlalchemy import (
    UserModel,
    UserRepositorySQLAlchemy,
)

TEST_PASSWORD = "Secret1!"


@pytest.fixture
def user_repo(db_session):
    """Create UserRepository instance with the test session."""
    return UserRepositorySQLAlchemy(db_session)


def _new_user(email="A@X.com", user_name="jdoe", role=UserRole.EMPLOYEE) -> User:
    return User.create(
        email=email,
        user_name=user_name,
        role=role,
        role_entity_id=uuid4(),
        company_id=uuid4(),
    )


async def _saved_user(user_repo, password_service, **kwargs) -> User:
    user = _new_user(**kwargs)
    user.set_password(TEST_PASSWORD, password_service)
    await user_repo.save(user)
    return user


@pytest.mark.integration
class TestUserRepositorySQLAlchemy:
    """Integration tests for UserRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, user_repo, password_service):
        """Can save and retrieve a user by ID."""
        user = await _saved_user(user_repo, password_service)

        found = await user_repo.find_by_id(user.id)

        assert found is not None
        assert found.id == user.id
        assert isinstance(found.id, UUID)
        assert found.email == "a@x.com"
        assert found.role == UserRole.EMPLOYEE
        assert found.role_entity_id == user.role_entity_id

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, user_repo):
        """Returns None for non-existent user."""
        assert await user_repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_find_by_email_case_insensitive(self, user_repo, password_service):
        """A user stored as A@X.com is found as a@x.com and A@X.COM."""
        user = await _saved_user(user_repo, password_service)

        assert (await user_repo.find_by_email("a@x.com")).id == user.id
        assert (await user_repo.find_by_email(" A@X.COM ")).id == user.id

    @pytest.mark.asyncio
    async def test_find_by_email_not_found(self, user_repo):
        assert await user_repo.find_by_email("nonexistent@example.com") is None

    @pytest.mark.asyncio
    async def test_save_without_password_fails_for_new_user(self, user_repo):
        with pytest.raises(ValueError, match="without a password"):
            await user_repo.save(_new_user())

    @pytest.mark.asyncio
    async def test_save_clears_password_dirty_flag(self, user_repo, password_service):
        user = await _saved_user(user_repo, password_service)

        assert user.password_changed is False

    @pytest.mark.asyncio
    async def test_fetch_password_hash(self, user_repo, password_service):
        user = await _saved_user(user_repo, password_service)

        stored = await user_repo.fetch_password_hash(user.id)

        assert stored is not None
        assert stored != TEST_PASSWORD
        assert password_service.verify(TEST_PASSWORD, stored)

    @pytest.mark.asyncio
    async def test_fetch_password_hash_unknown_user(self, user_repo):
        assert await user_repo.fetch_password_hash(uuid4()) is None

    @pytest.mark.asyncio
    async def test_default_load_leaves_password_column_unloaded(
        self,
        user_repo,
        password_service,
        db_session,
    ):
        user = await _saved_user(user_repo, password_service)
        db_session.expunge_all()

        result = await db_session.execute(
            select(UserModel).where(UserModel.id == user.id),
        )
        model = result.scalar_one()

        assert "password_hash" in inspect(model).unloaded

    @pytest.mark.asyncio
    async def test_resave_keeps_stored_hash_byte_identical(
        self,
        user_repo,
        password_service,
        db_session,
    ):
        user = await _saved_user(user_repo, password_service)
        original = await user_repo.fetch_password_hash(user.id)
        db_session.expunge_all()

        loaded = await user_repo.find_by_id(user.id)
        loaded.update_profile(first_name="Janet")
        await user_repo.save(loaded)
        db_session.expunge_all()

        assert await user_repo.fetch_password_hash(user.id) == original
        assert (await user_repo.find_by_id(user.id)).first_name == "Janet"

    @pytest.mark.asyncio
    async def test_changed_password_is_written(self, user_repo, password_service):
        user = await _saved_user(user_repo, password_service)
        original = await user_repo.fetch_password_hash(user.id)

        user.set_password("Newer2@pw", password_service)
        await user_repo.save(user)

        stored = await user_repo.fetch_password_hash(user.id)
        assert stored != original
        assert password_service.verify("Newer2@pw", stored)

    @pytest.mark.asyncio
    async def test_duplicate_email_raises(self, user_repo, password_service):
        await _saved_user(user_repo, password_service)

        with pytest.raises(EmailAlreadyExistsError):
            await _saved_user(
                user_repo,
                password_service,
                email="a@x.com",
                user_name="other",
            )

    @pytest.mark.asyncio
    async def test_duplicate_user_name_raises(self, user_repo, password_service):
        await _saved_user(user_repo, password_service)

        with pytest.raises(UserNameTakenError):
            await _saved_user(
                user_repo,
                password_service,
                email="other@x.com",
                user_name="jdoe",
            )

    @pytest.mark.asyncio
    async def test_exists_checks(self, user_repo, password_service):
        user = await _saved_user(user_repo, password_service)

        assert await user_repo.exists_by_email("A@X.COM") is True
        assert await user_repo.exists_by_email("b@x.com") is False
        assert await user_repo.exists_by_user_name("jdoe") is True
        assert (
            await user_repo.exists_by_user_name("jdoe", exclude_user_id=user.id)
            is False
        )

    @pytest.mark.asyncio
    async def test_update_last_login(self, user_repo, password_service, db_session):
        user = await _saved_user(user_repo, password_service)
        at = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

        await user_repo.update_last_login(user.id, at)
        db_session.expunge_all()

        found = await user_repo.find_by_id(user.id)
        assert found.last_login_at == at

    @pytest.mark.asyncio
    async def test_unknown_role_survives_round_trip(
        self,
        user_repo,
        password_service,
        db_session,
    ):
        """Corrupted role tags load; they only fail when resolved."""
        user = await _saved_user(user_repo, password_service)
        model = await db_session.get(UserModel, user.id)
        model.role = "ghost"
        await db_session.flush()
        db_session.expunge_all()

        found = await user_repo.find_by_id(user.id)

        assert found is not None
        assert found.role_tag == "ghost"

    @pytest.mark.asyncio
    async def test_delete_and_count(self, user_repo, password_service):
        user = await _saved_user(user_repo, password_service)
        await _saved_user(
            user_repo,
            password_service,
            email="b@x.com",
            user_name="bdoe",
        )
        assert await user_repo.count() == 2

        await user_repo.delete(user.id)

        assert await user_repo.count() == 1
        assert await user_repo.find_by_id(user.id) is None
