"""Authentication service for registration and login of HRM principals."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from hrm_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
)
from hrm_identity.application.dtos import (
    AuthenticationResult,
    CompanyLoginResult,
    LoginResult,
)
from hrm_identity.domain.company import (
    Company,
    CompanyNotFoundError,
    ModulePermissions,
)
from hrm_identity.domain.shared import Email, EmailAlreadyExistsError, InvalidEmailError
from hrm_identity.domain.user import (
    RoleEntityNotFoundError,
    User,
    UserNameTakenError,
    UserNotFoundError,
    UserRole,
)

if TYPE_CHECKING:
    from hrm_identity.application.services.entity_resolver import EntityResolver
    from hrm_identity.domain.company import CompanyRepository
    from hrm_identity.domain.role_entities import RoleEntity
    from hrm_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)

USER_PRINCIPAL = "user"
COMPANY_PRINCIPAL = "company"


class AuthenticationService:
    """
    Application service for principal authentication.

    Orchestrates hrm_auth infrastructure (password hashing, JWT tokens)
    with the identity domain to provide:
    - User login, with best-effort role entity enrichment
    - Company login (a separate principal with its own entry point)
    - Registration of users and companies
    - Password change, profile lookup and profile edits

    Every collaborator is passed in explicitly; the service holds no
    state between calls.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        company_repository: CompanyRepository,
        entity_resolver: EntityResolver,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._company_repo = company_repository
        self._entity_resolver = entity_resolver
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def authenticate(self, email: str, password: str) -> AuthenticationResult:
        """Verify a user's credentials.

        Raises InvalidCredentialsError for an unknown email and for a wrong
        password alike. A dangling role reference yields
        ``role_entity=None``; an unknown role tag raises UnknownRoleError.
        """
        normalized = _parse_email(email)
        user = await self._user_repo.find_by_email(normalized) if normalized else None
        if user is None:
            self._password_service.verify_against_dummy(password)
            raise InvalidCredentialsError

        password_hash = await self._user_repo.fetch_password_hash(user.id)
        self._check_password(password, password_hash)

        role_entity = await self._resolve_role_entity(user)

        login_at = user.record_login()
        try:
            await self._user_repo.update_last_login(user.id, login_at)
        except Exception as e:
            logger.warning("Could not record last login for user %s: %s", user.id, e)

        return AuthenticationResult(principal=user, role_entity=role_entity)

    async def login(self, email: str, password: str) -> LoginResult:
        result = await self.authenticate(email, password)
        user = result.principal

        access_token = self._jwt_service.issue(
            principal_id=user.id,
            role=user.role.value,
            extra_claims={
                "email": user.email,
                "kind": USER_PRINCIPAL,
                "company_id": str(user.company_id),
            },
        )

        logger.info("User logged in: %s", user.email)
        return LoginResult(
            principal=user,
            role_entity=result.role_entity,
            access_token=access_token,
        )

    async def authenticate_company(self, email: str, password: str) -> Company:
        normalized = _parse_email(email)
        company = (
            await self._company_repo.find_by_email(normalized) if normalized else None
        )
        if company is None:
            self._password_service.verify_against_dummy(password)
            raise InvalidCredentialsError

        password_hash = await self._company_repo.fetch_password_hash(company.id)
        self._check_password(password, password_hash)

        login_at = company.record_login()
        try:
            await self._company_repo.update_last_login(company.id, login_at)
        except Exception as e:
            logger.warning(
                "Could not record last login for company %s: %s",
                company.id,
                e,
            )

        return company

    async def login_company(self, email: str, password: str) -> CompanyLoginResult:
        company = await self.authenticate_company(email, password)

        access_token = self._jwt_service.issue(
            principal_id=company.id,
            role=Company.ROLE,
            extra_claims={"email": company.email, "kind": COMPANY_PRINCIPAL},
        )

        logger.info("Company logged in: %s", company.email)
        return CompanyLoginResult(company=company, access_token=access_token)

    async def register_user(  # noqa: PLR0913
        self,
        email: str,
        user_name: str,
        password: str,
        role: Union[str, UserRole],
        role_entity_id: UUID,
        company_id: UUID,
        first_name: str | None = None,
        last_name: str | None = None,
        mobile: str | None = None,
    ) -> User:
        """Create the login identity for an existing role entity."""
        user = User.create(
            email=email,
            user_name=user_name,
            role=role,
            role_entity_id=role_entity_id,
            company_id=company_id,
            first_name=first_name,
            last_name=last_name,
            mobile=mobile,
        )

        if await self._user_repo.exists_by_email(user.email):
            raise EmailAlreadyExistsError(user.email)
        if await self._user_repo.exists_by_user_name(user.user_name):
            raise UserNameTakenError(user.user_name)
        if await self._company_repo.find_by_id(company_id) is None:
            raise CompanyNotFoundError(str(company_id))

        # Refuse to create a user that points at nothing
        await self._entity_resolver.resolve(user)

        user.set_password(password, self._password_service)
        await self._user_repo.save(user)

        logger.info("User registered: %s (role: %s)", user.email, user.role_tag)
        return user

    async def register_company(
        self,
        email: str,
        company_name: str,
        password: str,
        module_permissions: ModulePermissions | None = None,
    ) -> Company:
        company = Company.create(
            email=email,
            company_name=company_name,
            module_permissions=module_permissions,
        )

        if await self._company_repo.exists_by_email(company.email):
            raise EmailAlreadyExistsError(company.email)

        company.set_password(password, self._password_service)
        await self._company_repo.save(company)

        logger.info("Company registered: %s", company.email)
        return company

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        password_hash = await self._user_repo.fetch_password_hash(user_id)
        if password_hash is None or not self._password_service.verify(
            current_password,
            password_hash,
        ):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        user.set_password(new_password, self._password_service)
        await self._user_repo.save(user)

        logger.info("Password changed for user: %s", user_id)

    async def update_profile(  # noqa: PLR0913
        self,
        user_id: UUID,
        user_name: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        mobile: str | None = None,
    ) -> AuthenticationResult:
        """Edit the descriptive fields of a user.

        Fields left as None keep their value. The password digest and
        ``last_login_at`` are never written here.

        Raises
        ------
        UserNotFoundError
            If the user does not exist
        UserNameTakenError
            If another user already has the requested user name
        """
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        if user_name is not None and await self._user_repo.exists_by_user_name(
            user_name,
            exclude_user_id=user_id,
        ):
            raise UserNameTakenError(user_name.strip())

        user.update_profile(
            user_name=user_name,
            first_name=first_name,
            last_name=last_name,
            mobile=mobile,
        )
        await self._user_repo.save(user)

        logger.info("Profile updated for user: %s", user_id)
        role_entity = await self._resolve_role_entity(user)
        return AuthenticationResult(principal=user, role_entity=role_entity)

    async def get_profile(self, user_id: UUID) -> AuthenticationResult:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        role_entity = await self._resolve_role_entity(user)
        return AuthenticationResult(principal=user, role_entity=role_entity)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify(token)

    def _check_password(self, password: str, password_hash: str | None) -> None:
        if password_hash is None:
            self._password_service.verify_against_dummy(password)
            raise InvalidCredentialsError
        if not self._password_service.verify(password, password_hash):
            raise InvalidCredentialsError

    async def _resolve_role_entity(self, user: User) -> RoleEntity | None:
        try:
            return await self._entity_resolver.resolve(user)
        except RoleEntityNotFoundError as e:
            logger.info("Continuing without role entity for user %s: %s", user.id, e)
            return None


def _parse_email(email: str) -> Email | None:
    try:
        return Email(email)
    except InvalidEmailError:
        return None
