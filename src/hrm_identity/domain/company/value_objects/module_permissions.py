from dataclasses import dataclass


@dataclass(frozen=True)
class ModulePermissions:
    """Product modules a company has licensed."""

    hrm: bool = True
    crm: bool = False
    recruitment: bool = False

    def as_dict(self) -> dict[str, bool]:
        return {"HRM": self.hrm, "CRM": self.crm, "RECRUITMENT": self.recruitment}
