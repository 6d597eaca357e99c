from hrm_identity.domain.company.value_objects.module_permissions import (
    ModulePermissions,
)

__all__ = ["ModulePermissions"]
