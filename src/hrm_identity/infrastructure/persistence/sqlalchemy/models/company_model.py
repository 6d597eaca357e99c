"""SQLAlchemy model for the Company aggregate."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hrm_identity.infrastructure.persistence.sqlalchemy.base import (
    IdentityBase,
    TimestampMixin,
)


class CompanyModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting Company aggregates."""

    __tablename__ = "companies"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    company_name: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        deferred=True,
    )
    module_hrm: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    module_crm: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    module_recruitment: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<CompanyModel(id={self.id}, email={self.email})>"
