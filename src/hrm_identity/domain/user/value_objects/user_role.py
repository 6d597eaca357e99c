from enum import Enum


class UserRole(str, Enum):
    """Closed set of roles a user's role entity can have."""

    EMPLOYEE = "employee"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"
