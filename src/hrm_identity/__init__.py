"""HRM Identity - Principals, credentials and role resolution.

This package handles all identity-related concerns of the HR system:
- Users (the login identity of employees, admins and super admins)
- Companies (tenants, which also log in through their own entry point)
- Resolution of a user's role reference to its profile record
- Authentication (login, registration, password change)

The HR modules only ever reference principal ids, keeping credential
handling in one place.
"""

from hrm_identity.application import (
    AuthenticationResult,
    AuthenticationService,
    CompanyLoginResult,
    EntityResolver,
    LoginResult,
    PrincipalContext,
)
from hrm_identity.domain.company import (
    Company,
    CompanyNotFoundError,
    CompanyRepository,
    ModulePermissions,
)
from hrm_identity.domain.role_entities import (
    Admin,
    AdminRepository,
    Employee,
    EmployeeRepository,
    RoleEntity,
    SuperAdmin,
    SuperAdminRepository,
)
from hrm_identity.domain.shared import (
    DuplicateKeyError,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from hrm_identity.domain.user import (
    AdminRef,
    EmployeeRef,
    RoleEntityNotFoundError,
    RoleEntityRef,
    SuperAdminRef,
    UnknownRoleError,
    User,
    UserNameTakenError,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from hrm_identity.exceptions import StoreUnavailableError

__all__ = [
    # Domain - User
    "AdminRef",
    "EmployeeRef",
    "RoleEntityNotFoundError",
    "RoleEntityRef",
    "SuperAdminRef",
    "UnknownRoleError",
    "User",
    "UserNameTakenError",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    # Domain - Company
    "Company",
    "CompanyNotFoundError",
    "CompanyRepository",
    "ModulePermissions",
    # Domain - Role entities
    "Admin",
    "AdminRepository",
    "Employee",
    "EmployeeRepository",
    "RoleEntity",
    "SuperAdmin",
    "SuperAdminRepository",
    # Domain - Shared
    "DuplicateKeyError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    # Exceptions
    "StoreUnavailableError",
    # Application
    "AuthenticationResult",
    "AuthenticationService",
    "CompanyLoginResult",
    "EntityResolver",
    "LoginResult",
    "PrincipalContext",
]
