"""Company schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hrm_identity import Company, ModulePermissions


class ModulePermissionsSchema(BaseModel):
    """Licensed product modules, keyed the way clients send them."""

    hrm: bool = Field(default=True, alias="HRM")
    crm: bool = Field(default=False, alias="CRM")
    recruitment: bool = Field(default=False, alias="RECRUITMENT")

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self) -> ModulePermissions:
        return ModulePermissions(
            hrm=self.hrm,
            crm=self.crm,
            recruitment=self.recruitment,
        )


class CompanyRegisterRequest(BaseModel):
    email: EmailStr
    company_name: str = Field(..., min_length=1, max_length=100)
    password: str
    module_permissions: ModulePermissionsSchema | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "hr@acme.example",
                "company_name": "Acme Corp",
                "password": "Secret1!",
                "module_permissions": {"HRM": True, "CRM": False},
            },
        },
    )


class CompanyLoginRequest(BaseModel):
    email: str
    password: str


class CompanyResponse(BaseModel):
    """Response schema for company data. Never carries the password."""

    id: UUID
    email: str
    company_name: str
    module_permissions: dict[str, bool]
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime

    @classmethod
    def from_company(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=company.id,
            email=company.email,
            company_name=company.company_name,
            module_permissions=company.module_permissions.as_dict(),
            is_active=company.is_active,
            last_login_at=company.last_login_at,
            created_at=company.created_at,
        )


class CompanyLoginResponse(BaseModel):
    token: str
    token_type: str = Field(default="bearer")
    expires_in: int
    company: CompanyResponse
